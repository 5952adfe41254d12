"""Application configuration

Settings come from environment variables, optionally kept in a `.env` file in
the working directory. Variables set in the process environment win over the
file, and empty variables count as unset.

    REDIS_STRING=redis://:secret@localhost:6379/0
    APP_PORT=8080
    APP_NAME=intolink
    APP_ENV=local
    BASE_URL=https://url.noskill.in

Example:
    >>> from intolink.utils.config import load_config
    >>> settings = load_config()
    >>> settings.port
    8080
"""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from intolink.constants import ENV, Defaults
from intolink.exceptions import BadConfigurationError, MissingEnvironmentVariableError


logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    """Validated application settings.

    Fields are read from the environment variables given as aliases; keyword
    arguments may use either the alias or the field name.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_ignore_empty=True,
        extra='ignore',
        frozen=True,
        populate_by_name=True,
    )

    redis_url: str = Field(..., alias=ENV.Redis.URL, min_length=1, description='Redis connection string')
    host: str = Field(default=Defaults.HOST, alias=ENV.App.APP_HOST)
    port: int = Field(default=Defaults.PORT, alias=ENV.App.APP_PORT, ge=1, le=65535)
    app_name: str | None = Field(default=None, alias=ENV.App.APP_NAME)
    app_env: str = Field(default=Defaults.APP_ENV, alias=ENV.App.APP_ENV)
    base_url: str | None = Field(default=None, alias=ENV.App.BASE_URL, description='Public base of rendered short URLs')
    log_level: str = Field(default=Defaults.LOG_LEVEL, alias=ENV.App.LOG_LEVEL)
    dedup_enabled: bool = Field(default=True, alias=ENV.Shortener.DEDUP_ENABLED)
    shortcode_length: int = Field(default=Defaults.SHORTCODE_LENGTH, alias=ENV.Shortener.SHORTCODE_LENGTH, ge=1)
    shortcode_max_attempts: int = Field(default=Defaults.SHORTCODE_MAX_ATTEMPTS, alias=ENV.Shortener.SHORTCODE_MAX_ATTEMPTS, ge=1)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'unknown log level {value!r}')
        return level

    @property
    def prefix(self) -> str | None:
        """Redis key prefix as <app name>:<app env>, or None if APP_NAME is not set."""
        return f'{self.app_name}:{self.app_env.lower()}' if self.app_name else None


def _variable_name(loc: tuple) -> str:
    field = AppSettings.model_fields.get(str(loc[0])) if loc else None
    if field is not None and field.alias:
        return field.alias
    return '.'.join(str(part) for part in loc)


def load_config() -> AppSettings:
    """Load application settings from the environment and `.env`

    Environment variables required:
        REDIS_STRING    – Redis connection string

    Environment variables optional:
        APP_HOST, APP_PORT, APP_NAME, APP_ENV, BASE_URL, LOG_LEVEL,
        DEDUP_ENABLED, SHORTCODE_LENGTH, SHORTCODE_MAX_ATTEMPTS

    Returns:
        AppSettings: validated settings.

    Raises:
        MissingEnvironmentVariableError:
            If `REDIS_STRING` is missing or empty.
        BadConfigurationError:
            If a variable can't be parsed or is out of range.
    """
    try:
        settings = AppSettings()
    except ValidationError as e:
        errors = e.errors()
        missing = [_variable_name(error['loc']) for error in errors if error['type'] == 'missing']
        if missing:
            missing_list = ', '.join(f"'{name}'" for name in missing)
            raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}') from e

        details = '; '.join(f"'{_variable_name(error['loc'])}': {error['msg']} (given value: {error['input']!r})" for error in errors)
        raise BadConfigurationError(f'Invalid configuration. {details}') from e

    logger.debug(
        'Loaded configuration.',
        extra={'prefix': settings.prefix, 'port': settings.port, 'dedupEnabled': settings.dedup_enabled},
    )
    return settings
