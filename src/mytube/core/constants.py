"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10
WERKZEUG_MAX_PASSWORD_BYTES = 4096

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

DEFAULT_SERVER_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
