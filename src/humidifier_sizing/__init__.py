"""Pure domain logic for humidifier sizing.

This package contains pure calculation functions and the input validation
used in front of them. It computes the humidification capacity and water tank
size a humidifier needs to reach and hold a target relative humidity.
"""

from .calculations import (
    CalculationInput,
    CalculationResult,
    calculate_humidifier_requirements,
    calculate_saturated_vapor_density,
    compute,
)
from .exceptions import HumidifierSizingError, InvalidInputError
from .validation import INPUT_SCHEMA, calculate_from_form, validate_input

__all__ = [
    "CalculationInput",
    "CalculationResult",
    "calculate_saturated_vapor_density",
    "calculate_humidifier_requirements",
    "compute",
    "HumidifierSizingError",
    "InvalidInputError",
    "INPUT_SCHEMA",
    "validate_input",
    "calculate_from_form",
]
