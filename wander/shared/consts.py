from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Component identifiers used in the composite payload.
DATABASE_COMPONENT = "database"
CACHE_COMPONENT = "redis"

CONNECTION_ERROR_MESSAGE = "Failed to connect to API"
