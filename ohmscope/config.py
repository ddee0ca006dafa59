"""Pin assignments, measurement constants and timing used by the ohmmeter."""

# I2C bus wiring of the OLED display.
I2C_BUS = 1
I2C_SDA_PIN = 14
I2C_SCL_PIN = 15
I2C_BAUDRATE = 400_000
OLED_I2C_ADDR = 0x3C

# ADC input wired to the voltage divider.
ADC_GPIO_PIN = 28
ADC_CHANNEL = 2

# Voltage divider: known resistor and reference voltage.
R_DIVISOR = 10000.0
ADC_REF_VOLTAGE = 3.3

# Full-scale ADC readings, depending on how the board is powered.
ADC_MAX_USB = 4045
ADC_MAX_BATTERY = 3630

# Readings this close to either end of the scale count as open or short.
ADC_EDGE_MARGIN = 15

# Push button that switches between USB and battery scale.
BUTTON_A_PIN = 5

# WS2812 LED matrix.
MATRIX_LED_PIN = 7
MATRIX_PIO_SM = 0

# Timing.
ADC_SAMPLES = 200
BUTTON_DEBOUNCE_US = 200_000