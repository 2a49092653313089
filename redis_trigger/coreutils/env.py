from dataclasses import dataclass
from dotenv import load_dotenv
import os

from redis_trigger.exceptions import MissingEnvironmentError

load_dotenv()  # take environment variables from .env

REQUIRED_VARS = ("JSON_PATH", "REDIS_URL", "KEY_NAME", "TRIGGER_TIME")


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


@dataclass(frozen=True)
class Settings:
    """Raw job settings as read from the environment"""

    json_path: str
    redis_url: str
    key_name: str
    trigger_time: str


def load_settings() -> Settings:
    """
    Read the required job settings from the environment

    An empty value counts as missing.

    Returns:
        Settings: populated settings

    Raises:
        MissingEnvironmentError: if any required variable is unset or empty
    """
    values = {key: env_get(key, "") for key in REQUIRED_VARS}
    missing = [key for key, value in values.items() if not value]
    if missing:
        raise MissingEnvironmentError(missing)

    return Settings(
        json_path=values["JSON_PATH"],
        redis_url=values["REDIS_URL"],
        key_name=values["KEY_NAME"],
        trigger_time=values["TRIGGER_TIME"],
    )
