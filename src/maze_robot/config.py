"""
Configuration constants for the maze robot.

Fixed hardware values in one place. Thresholds that get tuned on the
track live in params.py instead.
"""

# =============================================================================
# HARDWARE PORTS
# =============================================================================

# Motor/sensor microcontroller (drives both wheels, samples analog inputs)
MCU_PORT = "/dev/ttyUSB0"
MCU_BAUDRATE = 115200

# =============================================================================
# ANALOG CHANNELS
# =============================================================================

LEFT_REFLECTANCE_CHANNEL = 0
RIGHT_REFLECTANCE_CHANNEL = 1
ULTRASONIC_CHANNEL = 2
ANALOG_CHANNELS = 3

ANALOG_MAX_VOLTAGE = 5.0  # Full scale of every analog input
ULTRASONIC_RANGE_MM = 4000.0  # Distance at full scale voltage

# =============================================================================
# CONTROL PARAMETERS
# =============================================================================

CONTROL_LOOP_HZ = 50  # 20ms tick
MOTOR_MAX_COMMAND = 100  # Wire value for a unit wheel speed

# =============================================================================
# AUTONOMOUS MODES
# =============================================================================

MODE_SOLVE_LABEL = "Solve Maze"
MODE_REPLAY_LABEL = "Replay Last Maze"

# Saved run (optimized movements), None = keep in memory only
RUN_FILE = None

# =============================================================================
# WEB INTERFACE
# =============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080
