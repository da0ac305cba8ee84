"""Constants for humidifier sizing calculations."""

# Magnus approximation of saturated vapour pressure over water
MAGNUS_A = 6.1078  # hPa
MAGNUS_B = 17.269
MAGNUS_C = 237.3  # °C

# Specific gas constant of water vapour
WATER_VAPOR_GAS_CONSTANT = 461.5  # J/(kg·K)

CELSIUS_TO_KELVIN = 273.15
PA_PER_HPA = 100
GRAMS_PER_KILOGRAM = 1000
MILLILITERS_PER_LITER = 1000

# Input field names
CONF_AREA = "area"
CONF_TARGET_HUMIDITY = "target_humidity"
CONF_ROOM_TEMPERATURE = "room_temperature"
CONF_CONTINUOUS_OPERATION_HOURS = "continuous_operation_hours"
CONF_CEILING_HEIGHT = "ceiling_height"
CONF_VENTILATION_RATE = "ventilation_rate"
CONF_INITIAL_HUMIDITY = "initial_humidity"

# Defaults for optional inputs
DEFAULT_CONTINUOUS_OPERATION_HOURS = 8.0  # h
DEFAULT_CEILING_HEIGHT = 2.4  # m
DEFAULT_VENTILATION_RATE = 0.5  # air changes per hour
DEFAULT_INITIAL_HUMIDITY = 20.0  # %

# Suggested starting values for the required inputs
DEFAULT_AREA = 50.0  # m²
DEFAULT_TARGET_HUMIDITY = 50.0  # %
DEFAULT_ROOM_TEMPERATURE = 20.0  # °C

# Validation bounds
MIN_HUMIDITY = 0.0
MAX_HUMIDITY = 100.0
MIN_ROOM_TEMPERATURE = -50.0
MAX_ROOM_TEMPERATURE = 50.0
