"""
Constants and message templates.

This package provides the tolerances, sampling defaults and error message
templates used throughout pylagrange.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
