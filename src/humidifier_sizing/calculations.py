"""Pure domain logic for humidifier sizing calculations.

This module contains only pure functions with no external dependencies.
All functions are synchronous and can be tested without any mocking.

A humidifier must be able to:
- Replace the moisture that ventilation carries out of the room every hour
- Raise the room from its initial to its target relative humidity

The required hourly capacity is the larger of the two, with the whole initial
deficit treated as if it had to be closed within a single hour.
"""

from dataclasses import dataclass
import logging
import math

from .const import (
    CELSIUS_TO_KELVIN,
    DEFAULT_CEILING_HEIGHT,
    DEFAULT_CONTINUOUS_OPERATION_HOURS,
    DEFAULT_INITIAL_HUMIDITY,
    DEFAULT_VENTILATION_RATE,
    GRAMS_PER_KILOGRAM,
    MAGNUS_A,
    MAGNUS_B,
    MAGNUS_C,
    MILLILITERS_PER_LITER,
    PA_PER_HPA,
    WATER_VAPOR_GAS_CONSTANT,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationInput:
    """Room and environment parameters for a sizing calculation.

    Attributes:
        area: Floor area of the room in m².
        target_humidity: Relative humidity to reach, in %.
        room_temperature: Room temperature in °C.
        continuous_operation_hours: Hours the humidifier runs without refilling.
        ceiling_height: Ceiling height in m.
        ventilation_rate: Air changes per hour.
        initial_humidity: Relative humidity before humidifying, in %.

    """

    area: float
    target_humidity: float
    room_temperature: float
    continuous_operation_hours: float = DEFAULT_CONTINUOUS_OPERATION_HOURS
    ceiling_height: float = DEFAULT_CEILING_HEIGHT
    ventilation_rate: float = DEFAULT_VENTILATION_RATE
    initial_humidity: float = DEFAULT_INITIAL_HUMIDITY


@dataclass(frozen=True)
class CalculationResult:
    """Required humidifier specification."""

    # mL/h, rounded to the nearest integer
    required_humidification_capacity: int
    # L, rounded to 1 decimal place
    required_tank_capacity: float


def calculate_saturated_vapor_density(temperature: float) -> float:
    """Calculate the saturated water vapour density of air.

    The saturated vapour pressure is obtained from the Magnus approximation
    and converted to a density with the ideal gas law for water vapour.

    Args:
        temperature: Air temperature in °C.

    Returns:
        Mass of water vapour held by 1 m³ of saturated air, in g/m³.

    Note:
        The approximation is singular at -237.3 °C. Temperatures are expected
        to stay within -50..50 °C, so that point is never reached.

    Example:
        >>> round(calculate_saturated_vapor_density(20.0), 2)
        17.28

    """
    saturated_pressure_hpa = MAGNUS_A * math.exp(
        (MAGNUS_B * temperature) / (temperature + MAGNUS_C)
    )
    temperature_kelvin = temperature + CELSIUS_TO_KELVIN
    density_kg_per_m3 = (saturated_pressure_hpa * PA_PER_HPA) / (
        WATER_VAPOR_GAS_CONSTANT * temperature_kelvin
    )
    return density_kg_per_m3 * GRAMS_PER_KILOGRAM


def calculate_humidifier_requirements(
    area: float,
    target_humidity: float,
    room_temperature: float,
    continuous_operation_hours: float = DEFAULT_CONTINUOUS_OPERATION_HOURS,
    ceiling_height: float = DEFAULT_CEILING_HEIGHT,
    ventilation_rate: float = DEFAULT_VENTILATION_RATE,
    initial_humidity: float = DEFAULT_INITIAL_HUMIDITY,
) -> CalculationResult:
    """Calculate the humidification capacity and tank size a room needs.

    The calculation consists of:
    1. Computing the room volume from floor area and ceiling height
    2. Computing the saturated vapour density once, at the room temperature
    3. Computing the moisture deficit between initial and target humidity
    4. Computing the moisture lost every hour through ventilation at target humidity
    5. Taking the larger of the deficit and the hourly ventilation loss as the
       required rate, with 1 g of water counted as 1 mL
    6. Scaling the unrounded rate by the operation time to get the tank volume

    Inputs are not validated here; see :mod:`humidifier_sizing.validation`.

    Note:
        Rounding needs a finite hourly rate. Inputs whose product exceeds the
        float range (around 1.8e308, e.g. ``area=1e308, ceiling_height=10``)
        overflow to infinity and ``round`` raises ``OverflowError``; infinite
        or NaN inputs fail the same way. Validated inputs never get there.

    Args:
        area: Floor area in m².
        target_humidity: Target relative humidity in %.
        room_temperature: Room temperature in °C.
        continuous_operation_hours: Operation time without refilling, in hours.
        ceiling_height: Ceiling height in m.
        ventilation_rate: Air changes per hour.
        initial_humidity: Starting relative humidity in %.

    Returns:
        CalculationResult with the capacity in mL/h and the tank volume in L.

    Example:
        >>> calculate_humidifier_requirements(50, 50, 20)
        CalculationResult(required_humidification_capacity=622, required_tank_capacity=5.0)

    """
    room_volume = area * ceiling_height  # m³

    # The same saturation reference is used for both humidity levels
    vapor_density = calculate_saturated_vapor_density(room_temperature)  # g/m³

    target_moisture = room_volume * vapor_density * (target_humidity / 100)  # g
    initial_moisture = room_volume * vapor_density * (initial_humidity / 100)  # g
    deficit_moisture = target_moisture - initial_moisture  # g, may be negative

    ventilation_volume = room_volume * ventilation_rate  # m³/h
    ventilation_loss = (
        ventilation_volume * vapor_density * (target_humidity / 100)
    )  # g/h

    required_capacity_g_per_hour = max(ventilation_loss, deficit_moisture)

    _LOGGER.debug(
        "Room volume %.1f m³ at %.1f°C (saturation %.2f g/m³): "
        "deficit %.1f g, ventilation loss %.1f g/h",
        room_volume,
        room_temperature,
        vapor_density,
        deficit_moisture,
        ventilation_loss,
    )

    required_tank_capacity = (
        required_capacity_g_per_hour / MILLILITERS_PER_LITER
    ) * continuous_operation_hours

    result = CalculationResult(
        required_humidification_capacity=round(required_capacity_g_per_hour),
        required_tank_capacity=round(required_tank_capacity, 1),
    )

    _LOGGER.debug(
        "Required humidification capacity: %d mL/h, tank capacity: %.1f L "
        "for %.1f hours (%s dominated)",
        result.required_humidification_capacity,
        result.required_tank_capacity,
        continuous_operation_hours,
        "deficit" if deficit_moisture > ventilation_loss else "ventilation",
    )

    return result


def compute(inputs: CalculationInput) -> CalculationResult:
    """Calculate humidifier requirements from a CalculationInput record."""
    return calculate_humidifier_requirements(
        area=inputs.area,
        target_humidity=inputs.target_humidity,
        room_temperature=inputs.room_temperature,
        continuous_operation_hours=inputs.continuous_operation_hours,
        ceiling_height=inputs.ceiling_height,
        ventilation_rate=inputs.ventilation_rate,
        initial_humidity=inputs.initial_humidity,
    )
