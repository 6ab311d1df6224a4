# Junction Configuration

# Dwell Timings (milliseconds)
DEFAULT_STANDARD_DWELL_MS = 300000.0  # Go phases
DEFAULT_CAUTION_DWELL_MS = 30000.0    # Caution phases, 10:1 against standard

# Environment overrides read by the API app
STANDARD_DWELL_ENV = "JUNCTION_STANDARD_DWELL_MS"
CAUTION_DWELL_ENV = "JUNCTION_CAUTION_DWELL_MS"

# Console
LOG_LEVEL = "INFO"
