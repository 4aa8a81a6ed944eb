"""Keys used in interpolation task YAML files."""

# Task name
NAME_KEY = "name"

# Source function
EXPERIMENTAL_FUNCTION_KEY = "experimental_function"
VARIABLE_KEY = "variable"

# Point lists
EXPERIMENTAL_POINTS_KEY = "experimental_points"
INTERPOLATION_POINTS_KEY = "interpolation_points"

REQUIRED_KEYS = (EXPERIMENTAL_FUNCTION_KEY, EXPERIMENTAL_POINTS_KEY)
OPTIONAL_KEYS = (NAME_KEY, VARIABLE_KEY, INTERPOLATION_POINTS_KEY)

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
