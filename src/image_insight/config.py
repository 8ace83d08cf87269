"""Service settings loaded from a local JSON file.

The file mirrors the usual ``appsettings.json`` layout::

    {
        "AIServicesEndpoint": "https://<resource>.cognitiveservices.azure.com/",
        "AIServicesKey": "<key>"
    }

``AI_SERVICES_ENDPOINT`` / ``AI_SERVICES_KEY`` (environment or ``.env``)
override the file values when set.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_SETTINGS_FILE = "appsettings.json"

ENDPOINT_KEY = "AIServicesEndpoint"
API_KEY_KEY = "AIServicesKey"

_ENV_OVERRIDES = {
    ENDPOINT_KEY: "AI_SERVICES_ENDPOINT",
    API_KEY_KEY: "AI_SERVICES_KEY",
}


class ConfigError(RuntimeError):
    """Raised when the settings file is missing or incomplete."""


class ServiceSettings(BaseModel):
    endpoint: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1, repr=False)

    @field_validator("endpoint")
    @classmethod
    def _endpoint_is_url(cls, v: str) -> str:  # noqa: D401
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return v


def load_settings(path: str | Path = DEFAULT_SETTINGS_FILE) -> ServiceSettings:
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"settings file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"invalid settings file {path}: expected a JSON object")

    # .env is searched from the working directory upwards
    load_dotenv(find_dotenv(usecwd=True))
    values: dict[str, str] = {}
    for name, env_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name) or data.get(name)
        if os.environ.get(env_name):
            logger.debug("using %s from environment", env_name)
        if value:
            values[name] = str(value)

    missing = [name for name in _ENV_OVERRIDES if name not in values]
    if missing:
        raise ConfigError(f"missing settings in {path}: {', '.join(missing)}")

    try:
        return ServiceSettings(endpoint=values[ENDPOINT_KEY], key=values[API_KEY_KEY])
    except ValidationError as e:
        raise ConfigError(f"invalid settings in {path}: {e.errors()[0]['msg']}") from e
