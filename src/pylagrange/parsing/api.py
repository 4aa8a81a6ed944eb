import logging
from pathlib import Path
from typing import Union

from pylagrange.algorithms.task import InterpolationTask
from pylagrange.parsing.config.interpolation_yaml_parser import InterpolationYAMLParser

logger = logging.getLogger(__name__)


def create_interpolation(yaml_path: Union[str, Path]) -> InterpolationTask:
    """
    Create an interpolation task from a YAML configuration file.

    This function serves as the main entry point for front-ends: it parses the
    source function and the point lists, samples the function at the
    experimental points and builds the Lagrange polynomial through them.
    Args:
        yaml_path: Path to the YAML configuration file
    Returns:
        The task holding the function, the polynomial and the display bounds
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the configuration is invalid
        DuplicateNodeError: If two experimental points coincide
        UndefinedAtNodeError: If the function is undefined at an experimental point
    Examples:
        task = create_interpolation('square.yaml')
        x, y = task.polynomial_series()
        value = task.polynomial(0.5)
    """
    logger.info("Creating interpolation from: %s", yaml_path)
    try:
        parser = InterpolationYAMLParser(yaml_path)
        task = parser.create_task()
        logger.info("Successfully created interpolation task: %s (degree %d)",
                    task.name, task.polynomial.degree)
        return task
    except Exception as e:
        logger.error("Failed to create interpolation from %s: %s", yaml_path, e, exc_info=True)
        raise


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML file without building the polynomial.
    Args:
        yaml_path: Path to the YAML configuration file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        parser = InterpolationYAMLParser(yaml_path)
        parser.create_function()
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e
