"""
Defines custom exceptions so each failure mode of the job logs a distinct message.
"""


class TriggerError(Exception):
    """Base exception for all application-specific errors."""


class MissingEnvironmentError(TriggerError):
    """Raised when one or more required environment variables are unset or empty."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Required environment variables are missing: {', '.join(self.missing)}"
        )


class JSONFileError(TriggerError):
    """Base class for failures while loading the source JSON file."""


class JSONFileNotFoundError(JSONFileError):
    """Raised when the JSON file path does not exist."""


class JSONFileReadError(JSONFileError):
    """Raised when the JSON file exists but cannot be read."""


class InvalidJSONError(JSONFileError):
    """Raised when the file content is not valid JSON."""


class RedisURLError(TriggerError):
    """Raised when REDIS_URL cannot be parsed into connection options."""


class RedisConnectError(TriggerError):
    """Raised when the initial PING to Redis fails."""


class TriggerTimeError(TriggerError):
    """Raised when TRIGGER_TIME is not a valid RFC 3339 timestamp."""


class RedisWriteError(TriggerError):
    """Raised when the SET command fails."""
