from .utilities import parse_points

__all__ = ["parse_points"]
