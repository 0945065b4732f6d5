"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PIN_MIN = 100000
PIN_MAX = 999999
PIN_LENGTH = 6
DEFAULT_PIN_MAX_ATTEMPTS = 20

DEFAULT_TOKEN_MINUTES = 7 * 24 * 60

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_KEY = 1062
