"""Settings selection for the attendance portal.

`APP_ENV` names the environment; unknown or unset values fall back to development.
"""
import importlib
import os
from types import ModuleType

ENV_VAR = "APP_ENV"

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module(env: str | None = None) -> str:
    env = (env if env is not None else os.getenv(ENV_VAR, "development")).strip().lower()
    return f"config.{_ENV_ALIASES.get(env, 'development')}"


def load_settings(env: str | None = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
