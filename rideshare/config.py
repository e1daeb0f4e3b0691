"""Configuration for the RideShare application."""

import os

from dotenv import load_dotenv

load_dotenv()

# Logging level for the whole application (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("RIDESHARE_LOG_LEVEL", "INFO").upper()

# Whether the demo command waits for Enter between steps
DEMO_PAUSE = os.getenv("RIDESHARE_DEMO_PAUSE", "false").lower() in ("1", "true", "yes")

# Defaults applied when new drivers and riders are registered
DEFAULT_DRIVER_RATING = 5.0
DEFAULT_PAYMENT_METHOD = "Credit Card"

# Accepted bounds for a single driver rating
MIN_RATING = 1.0
MAX_RATING = 5.0
