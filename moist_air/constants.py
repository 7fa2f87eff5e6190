"""ASHRAE constants used by the psychrometric engine.

References
----------
ASHRAE Handbook - Fundamentals (2017), ch. 1 (psychrometrics) and ch. 39
(units and conversions).
"""

# Zero degree Fahrenheit expressed as degree Rankine.
ZERO_FAHRENHEIT_AS_RANKINE = 459.67

# Zero degree Celsius expressed as Kelvin.
ZERO_CELSIUS_AS_KELVIN = 273.15

# Gas constant of dry air, IP in ft.lbf/lb_da/R and SI in J/kg_da/K.
R_DA_IP = 53.350
R_DA_SI = 287.042

# Ratio of the molar mass of water vapor to that of dry air.
MOLAR_MASS_RATIO = 0.621945

# Ratio of the gas constant of water vapor to that of dry air (1 / 0.621945).
GAS_CONSTANT_RATIO = 1.607858

# Maximum number of iterations of the wet-bulb and dew-point solvers.
MAX_ITER_COUNT = 100

# Humidity ratios below this value (zero included) are raised to it, so that
# logarithms and divisions by the humidity ratio stay finite downstream.
MIN_HUM_RATIO = 1e-7

# Relative slack on the saturation limit, absorbs round-off of inputs derived
# from a saturated state.
SATURATION_RTOL = 1e-9

FREEZING_POINT_WATER_IP = 32.0
FREEZING_POINT_WATER_SI = 0.0

TRIPLE_POINT_WATER_IP = 32.018
TRIPLE_POINT_WATER_SI = 0.01

# Temperature tolerance of the solvers: 0.001 K, in the same temperature
# interval expressed in degree Fahrenheit for IP.
TOLERANCE_SI = 0.001
TOLERANCE_IP = 0.001 * 9.0 / 5.0

# Range of validity of the saturation pressure correlations.
MIN_TEMPERATURE_SI, MAX_TEMPERATURE_SI = -100.0, 200.0
MIN_TEMPERATURE_IP, MAX_TEMPERATURE_IP = -148.0, 392.0

# Conversion factor between psi and lbf/ft2.
PSI_TO_LBF_PER_FT2 = 144.0
