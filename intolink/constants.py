from enum import StrEnum


class Defaults:
    """Default values for tunable settings."""

    PORT = 8080
    HOST = '0.0.0.0'  # noqa: S104
    APP_ENV = 'local'
    LOG_LEVEL = 'INFO'
    SHORTCODE_LENGTH = 10
    SHORTCODE_MAX_ATTEMPTS = 5


class RedisHash:
    """Names of the Redis hashes holding the mappings."""

    FORWARD = 'shortenUrls'  # shortcode -> original URL
    REVERSE = 'originalUrls'  # original URL -> shortcode
    COUNTER = 'resolveCounter'  # shortcode -> resolve count


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        APP_HOST = 'APP_HOST'
        APP_PORT = 'APP_PORT'
        BASE_URL = 'BASE_URL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Redis(StrEnum):
        URL = 'REDIS_STRING'

    class Shortener(StrEnum):
        DEDUP_ENABLED = 'DEDUP_ENABLED'
        SHORTCODE_LENGTH = 'SHORTCODE_LENGTH'
        SHORTCODE_MAX_ATTEMPTS = 'SHORTCODE_MAX_ATTEMPTS'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
BAD_REQUEST = 'BAD_REQUEST'

# Log events
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
SHORT_URL_DEDUPLICATED = 'SHORT_URL_DEDUPLICATED'
SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
DEDUP_RACE_LOST = 'DEDUP_RACE_LOST'
PARTIAL_WRITE = 'PARTIAL_WRITE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
COUNTER_INCREMENT_FAILED = 'COUNTER_INCREMENT_FAILED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
