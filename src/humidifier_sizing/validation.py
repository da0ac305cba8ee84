"""Input validation for humidifier sizing.

The calculation functions accept any real numbers. Callers that take values
from users validate them here first, then hand the resulting
:class:`~humidifier_sizing.calculations.CalculationInput` to the calculation.
"""

from collections.abc import Mapping
import logging
from typing import Any

import voluptuous as vol

from .calculations import CalculationInput, CalculationResult, compute
from .const import (
    CONF_AREA,
    CONF_CEILING_HEIGHT,
    CONF_CONTINUOUS_OPERATION_HOURS,
    CONF_INITIAL_HUMIDITY,
    CONF_ROOM_TEMPERATURE,
    CONF_TARGET_HUMIDITY,
    CONF_VENTILATION_RATE,
    DEFAULT_CEILING_HEIGHT,
    DEFAULT_CONTINUOUS_OPERATION_HOURS,
    DEFAULT_INITIAL_HUMIDITY,
    DEFAULT_VENTILATION_RATE,
    MAX_HUMIDITY,
    MAX_ROOM_TEMPERATURE,
    MIN_HUMIDITY,
    MIN_ROOM_TEMPERATURE,
)
from .exceptions import InvalidInputError

_LOGGER = logging.getLogger(__name__)


def _positive(msg: str) -> vol.All:
    return vol.All(
        vol.Coerce(float, msg=msg),
        vol.Finite(msg=msg),
        vol.Range(min=0, min_included=False, msg=msg),
    )


def _between(minimum: float, maximum: float, msg: str) -> vol.All:
    return vol.All(
        vol.Coerce(float, msg=msg),
        vol.Finite(msg=msg),
        vol.Range(min=minimum, max=maximum, msg=msg),
    )


INPUT_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_AREA, msg="Area is required"): _positive(
            "Area must be a positive number"
        ),
        vol.Required(CONF_TARGET_HUMIDITY, msg="Target humidity is required"): _between(
            MIN_HUMIDITY,
            MAX_HUMIDITY,
            "Target humidity must be between 0 and 100 %",
        ),
        vol.Required(
            CONF_ROOM_TEMPERATURE, msg="Room temperature is required"
        ): _between(
            MIN_ROOM_TEMPERATURE,
            MAX_ROOM_TEMPERATURE,
            "Room temperature must be between -50 and 50 °C",
        ),
        vol.Optional(
            CONF_CONTINUOUS_OPERATION_HOURS,
            default=DEFAULT_CONTINUOUS_OPERATION_HOURS,
        ): _positive("Continuous operation hours must be a positive number"),
        vol.Optional(CONF_CEILING_HEIGHT, default=DEFAULT_CEILING_HEIGHT): _positive(
            "Ceiling height must be a positive number"
        ),
        vol.Optional(
            CONF_VENTILATION_RATE, default=DEFAULT_VENTILATION_RATE
        ): vol.All(
            vol.Coerce(float, msg="Ventilation rate must be zero or greater"),
            vol.Finite(msg="Ventilation rate must be zero or greater"),
            vol.Range(min=0, msg="Ventilation rate must be zero or greater"),
        ),
        vol.Optional(
            CONF_INITIAL_HUMIDITY, default=DEFAULT_INITIAL_HUMIDITY
        ): _between(
            MIN_HUMIDITY,
            MAX_HUMIDITY,
            "Initial humidity must be between 0 and 100 %",
        ),
    },
    extra=vol.REMOVE_EXTRA,
)


def validate_input(data: Mapping[str, Any]) -> CalculationInput:
    """Validate raw input values and build a CalculationInput.

    Args:
        data: Mapping of field name to value. Values may be numbers or numeric
              strings. Optional fields fall back to their defaults and unknown
              keys are ignored.

    Returns:
        CalculationInput built from the validated values.

    Raises:
        InvalidInputError: If one or more fields are missing or out of range.
            Every failing field is reported, not only the first.

    """
    try:
        validated = INPUT_SCHEMA(dict(data))
    except vol.MultipleInvalid as err:
        errors: dict[str, str] = {}
        for error in err.errors:
            field = str(error.path[0]) if error.path else "base"
            errors.setdefault(field, error.msg)
        _LOGGER.warning("Rejected humidifier sizing input: %s", errors)
        raise InvalidInputError(errors) from err

    return CalculationInput(**validated)


def calculate_from_form(data: Mapping[str, Any]) -> CalculationResult:
    """Validate submitted form values and calculate humidifier requirements."""
    inputs = validate_input(data)
    _LOGGER.debug("Calculating humidifier requirements for %s", inputs)
    return compute(inputs)
