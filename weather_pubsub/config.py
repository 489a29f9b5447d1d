"""Settings loaded from the environment (and an optional .env file)."""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from weather_pubsub.errors import ConfigError

# Environment variable -> Settings field
ENV_VARS = {
    "WEATHER_LOG_LEVEL": "log_level",
    "WEATHER_ISOLATE_ERRORS": "isolate_errors",
    "WEATHER_INITIAL_TEMPERATURE": "initial_temperature",
    "WEATHER_SENSOR_ID": "sensor_id",
}


class Settings(BaseModel):
    log_level: str = "WARNING"
    isolate_errors: bool = False
    initial_temperature: float = 0.0
    sensor_id: str = "weather-sensor"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("sensor_id")
    @classmethod
    def _non_empty_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("sensor id must not be empty")
        return value


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
) -> Settings:
    """
    Build Settings from environment variables.
    When environ is None, a .env file is loaded first (existing variables win) and os.environ is read.
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ
    raw = {
        field: environ[var]
        for var, field in ENV_VARS.items()
        if environ.get(var, "").strip()
    }
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        error = e.errors()[0]
        field = error["loc"][0] if error.get("loc") else ""
        variable = next((var for var, f in ENV_VARS.items() if f == field), str(field))
        raise ConfigError(variable, error["msg"]) from e
