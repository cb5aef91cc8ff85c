"""Constants and defaults."""

PASSWORD_MIN_LENGTH = 6
DEFAULT_TOKEN_EXPIRES_MINUTES = 60
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT_SECONDS = 10.0
POOL_RETRY_INTERVAL_SECONDS = 0.05
BEARER_PREFIX = "Bearer"
ACCESS_DENIED = "Access Denied"
GENERIC_STORE_ERROR = "Database error"
