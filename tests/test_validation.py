"""Tests for humidifier sizing input validation."""

import logging

import pytest

from humidifier_sizing import (
    CalculationInput,
    CalculationResult,
    HumidifierSizingError,
    InvalidInputError,
    calculate_from_form,
    validate_input,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def form_values() -> dict:
    """Return the values a user submits with every field filled in."""
    return {
        "area": 50,
        "target_humidity": 50,
        "room_temperature": 20,
        "continuous_operation_hours": 8,
        "ceiling_height": 2.4,
        "ventilation_rate": 0.5,
        "initial_humidity": 20,
    }


# =============================================================================
# Tests: validate_input - Accepted Values
# =============================================================================


class TestAcceptedInput:
    """Valid submissions produce a CalculationInput."""

    def test_full_submission(self, form_values):
        assert validate_input(form_values) == CalculationInput(
            area=50.0,
            target_humidity=50.0,
            room_temperature=20.0,
            continuous_operation_hours=8.0,
            ceiling_height=2.4,
            ventilation_rate=0.5,
            initial_humidity=20.0,
        )

    def test_optional_fields_default(self):
        """Only the three required fields need to be supplied."""
        inputs = validate_input(
            {"area": 12, "target_humidity": 55, "room_temperature": 21}
        )
        assert inputs.continuous_operation_hours == 8.0
        assert inputs.ceiling_height == 2.4
        assert inputs.ventilation_rate == 0.5
        assert inputs.initial_humidity == 20.0

    def test_numeric_strings_are_coerced(self, form_values):
        form_values["area"] = "35.5"
        form_values["room_temperature"] = "-5"
        inputs = validate_input(form_values)
        assert inputs.area == 35.5
        assert inputs.room_temperature == -5.0

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("target_humidity", 0),
            ("target_humidity", 100),
            ("initial_humidity", 0),
            ("initial_humidity", 100),
            ("room_temperature", -50),
            ("room_temperature", 50),
            ("ventilation_rate", 0),
        ],
    )
    def test_inclusive_bounds(self, form_values, field, value):
        form_values[field] = value
        assert getattr(validate_input(form_values), field) == value

    def test_unknown_keys_are_ignored(self, form_values):
        """Output fields left in the form data do not break validation."""
        form_values["required_tank_capacity"] = 0
        assert validate_input(form_values).area == 50.0


# =============================================================================
# Tests: validate_input - Rejected Values
# =============================================================================


class TestRejectedInput:
    """Invalid submissions raise InvalidInputError with per-field messages."""

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("area", 0, "Area must be a positive number"),
            ("area", -10, "Area must be a positive number"),
            ("target_humidity", 100.5, "Target humidity must be between 0 and 100 %"),
            ("target_humidity", -1, "Target humidity must be between 0 and 100 %"),
            ("room_temperature", -50.1, "Room temperature must be between -50 and 50 °C"),
            ("room_temperature", 51, "Room temperature must be between -50 and 50 °C"),
            (
                "continuous_operation_hours",
                0,
                "Continuous operation hours must be a positive number",
            ),
            ("ceiling_height", 0, "Ceiling height must be a positive number"),
            ("ventilation_rate", -0.1, "Ventilation rate must be zero or greater"),
            ("initial_humidity", 101, "Initial humidity must be between 0 and 100 %"),
        ],
    )
    def test_out_of_range(self, form_values, field, value, message):
        form_values[field] = value
        with pytest.raises(InvalidInputError) as exc_info:
            validate_input(form_values)
        assert exc_info.value.errors == {field: message}

    def test_not_a_number(self, form_values):
        form_values["area"] = "fifty"
        with pytest.raises(InvalidInputError) as exc_info:
            validate_input(form_values)
        assert exc_info.value.errors == {"area": "Area must be a positive number"}

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("area", "inf", "Area must be a positive number"),
            ("target_humidity", "nan", "Target humidity must be between 0 and 100 %"),
            ("room_temperature", "-inf", "Room temperature must be between -50 and 50 °C"),
            (
                "continuous_operation_hours",
                float("inf"),
                "Continuous operation hours must be a positive number",
            ),
            ("ceiling_height", "inf", "Ceiling height must be a positive number"),
            ("ventilation_rate", "inf", "Ventilation rate must be zero or greater"),
            ("initial_humidity", "nan", "Initial humidity must be between 0 and 100 %"),
        ],
    )
    def test_non_finite(self, form_values, field, value, message):
        """Infinity and NaN are rejected even where there is no upper bound."""
        form_values[field] = value
        with pytest.raises(InvalidInputError) as exc_info:
            validate_input(form_values)
        assert exc_info.value.errors == {field: message}

    def test_missing_required_field(self, form_values):
        del form_values["room_temperature"]
        with pytest.raises(InvalidInputError) as exc_info:
            validate_input(form_values)
        assert exc_info.value.errors == {
            "room_temperature": "Room temperature is required"
        }

    def test_all_errors_reported(self, form_values):
        """Every failing field is reported, not only the first one."""
        form_values["area"] = 0
        form_values["target_humidity"] = 150
        form_values["ventilation_rate"] = -1
        with pytest.raises(InvalidInputError) as exc_info:
            validate_input(form_values)
        assert set(exc_info.value.errors) == {
            "area",
            "target_humidity",
            "ventilation_rate",
        }

    def test_error_hierarchy(self, form_values):
        form_values["area"] = 0
        with pytest.raises(HumidifierSizingError):
            validate_input(form_values)
        with pytest.raises(ValueError, match="area: Area must be a positive number"):
            validate_input(form_values)

    def test_rejection_is_logged(self, form_values, caplog):
        form_values["ceiling_height"] = -2.4
        with caplog.at_level(logging.WARNING, logger="humidifier_sizing.validation"):
            with pytest.raises(InvalidInputError):
                validate_input(form_values)
        assert "Rejected humidifier sizing input" in caplog.text


# =============================================================================
# Tests: calculate_from_form
# =============================================================================


class TestCalculateFromForm:
    """Validation followed by calculation."""

    def test_default_form(self, form_values):
        assert calculate_from_form(form_values) == CalculationResult(
            required_humidification_capacity=622,
            required_tank_capacity=5.0,
        )

    def test_invalid_form_is_not_calculated(self, form_values):
        form_values["continuous_operation_hours"] = 0
        with pytest.raises(InvalidInputError):
            calculate_from_form(form_values)

    @pytest.mark.parametrize("field", ["area", "ceiling_height", "ventilation_rate"])
    def test_infinite_form_is_not_calculated(self, form_values, field):
        """Unbounded fields cannot carry infinity into the calculation."""
        form_values[field] = "inf"
        form_values["target_humidity"] = 0
        form_values["initial_humidity"] = 0
        with pytest.raises(InvalidInputError) as exc_info:
            calculate_from_form(form_values)
        assert set(exc_info.value.errors) == {field}
