import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Union

from ruamel.yaml import YAML, constructor, scanner

from pylagrange.algorithms.task import InterpolationTask
from pylagrange.core.function import SourceFunction
from pylagrange.data.constants import ProcessingConstants
from pylagrange.parsing.config.yaml_keys import EXPERIMENTAL_FUNCTION_KEY, EXPERIMENTAL_POINTS_KEY, \
    INTERPOLATION_POINTS_KEY, NAME_KEY, OPTIONAL_KEYS, REQUIRED_KEYS, VARIABLE_KEY
from pylagrange.parsing.utils.utilities import parse_points

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys",
                         len(config) if isinstance(config, dict) else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class InterpolationYAMLParser(YAMLFileParser):
    """
    Parser for interpolation task files.

    Example file:
        name: Square plus one
        experimental_function: x**2 + 1
        experimental_points: [0, 1, 2]
        interpolation_points: 0.5, 1.5
    """

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        self._validate_config()
        self.variable = str(self.config.get(VARIABLE_KEY, ProcessingConstants.DEFAULT_VARIABLE))
        self.experimental_points = parse_points(self.config[EXPERIMENTAL_POINTS_KEY], EXPERIMENTAL_POINTS_KEY)
        self.interpolation_points = parse_points(self.config.get(INTERPOLATION_POINTS_KEY),
                                                 INTERPOLATION_POINTS_KEY)
        if self.experimental_points.size == 0:
            logger.error("No experimental points in %s", self.config_path)
            raise ValueError(f"'{EXPERIMENTAL_POINTS_KEY}' must contain at least one point")
        logger.info("InterpolationYAMLParser initialized: %d experimental points, %d interpolation points",
                    self.experimental_points.size, self.interpolation_points.size)

    # --- Public API ---
    def create_function(self) -> SourceFunction:
        """Build the source function described by the configuration."""
        return SourceFunction(str(self.config[EXPERIMENTAL_FUNCTION_KEY]), variable=self.variable)

    def create_task(self) -> InterpolationTask:
        """Build the source function and interpolate it at the experimental points."""
        logger.info("Creating interpolation task from configuration: %s", self.config_path)
        return InterpolationTask(
            function=self.create_function(),
            experimental_points=self.experimental_points,
            interpolation_points=self.interpolation_points,
            name=str(self.config.get(NAME_KEY, self.config_path.stem)),
        )

    # --- Validation ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting configuration validation")
        if not isinstance(self.config, dict):
            logger.error("Invalid YAML structure - expected dictionary at root level")
            raise ValueError("The YAML file must start with a dictionary/object structure with key-value pairs, "
                             "not a list or scalar value")
        missing = [key for key in REQUIRED_KEYS if key not in self.config]
        if missing:
            logger.error("Missing required fields: %s", missing)
            raise ValueError(f"Missing required field(s): {', '.join(missing)}")
        known_keys = REQUIRED_KEYS + OPTIONAL_KEYS
        extra_fields = [key for key in self.config if key not in known_keys]
        if extra_fields:
            error_msg = "Extra fields found in configuration: \n ->"
            for extra in extra_fields:
                matches = get_close_matches(str(extra), known_keys, n=1, cutoff=0.6)
                suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
                error_msg += f" - '{extra}'{suggestion}\n"
            logger.error("Unknown configuration fields: %s", extra_fields)
            raise ValueError(error_msg)
        expression = self.config[EXPERIMENTAL_FUNCTION_KEY]
        if isinstance(expression, bool) or not isinstance(expression, (str, int, float)):
            raise ValueError(f"'{EXPERIMENTAL_FUNCTION_KEY}' must be an expression string, "
                             f"got {type(expression).__name__}")
        logger.info("Configuration validation completed successfully")
