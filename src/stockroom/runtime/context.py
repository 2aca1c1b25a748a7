from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any

from loguru import logger
from pydantic import BaseModel

from stockroom.runtime.config.config_data import ConfigData
from stockroom.runtime.config.config_template import load_templated_yaml
from stockroom.runtime.settings import EnvironmentVariables


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def load_default_config(env_vars: EnvironmentVariables | None = None) -> ConfigData:
    """Load config.yaml (or $STOCKROOM_CONFIG), falling back to built-in defaults."""
    env_vars = env_vars or EnvironmentVariables()

    if env_vars.config_file.exists():
        config = load_templated_yaml(env_vars.config_file)
    else:
        logger.debug(
            "No configuration file at {}; using defaults", env_vars.config_file
        )
        config = ConfigData()

    if env_vars.environment is not None:
        config.app.environment = env_vars.environment
    return config


_default_context = AppContext(config=load_default_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context.

    Returns:
        AppContext: The current application context containing configuration.
    """
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _dump_explicitly_set(model: BaseModel) -> dict[str, Any]:
    """Dump only the fields that were explicitly set, at every nesting level."""
    result: dict[str, Any] = {}
    for field_name in model.__class__.model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            nested = _dump_explicitly_set(value)
            if nested:
                result[field_name] = nested
            elif field_name in model.model_fields_set:
                result[field_name] = value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = value
    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge ``override_dict`` into a copy of ``base_dict``."""
    result = base_dict.copy()
    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value
    return result


@contextmanager
def with_context(
    config_override: ConfigData | dict | None = None, **kwargs: Any
) -> Iterator[ConfigData]:
    """Temporarily override the application configuration.

    Overrides are merged into the current configuration, so nested sections
    keep every value that is not overridden.

    Example:
        with with_context(database={"url": "sqlite://"}):
            assert get_config().database.url == "sqlite://"
    """
    if isinstance(config_override, ConfigData):
        override = _dump_explicitly_set(config_override)
    elif isinstance(config_override, dict):
        override = dict(config_override)
    elif config_override is None:
        override = {}
    else:
        raise ValueError(
            f"config_override must be dict, ConfigData, or None, got {type(config_override)}"
        )
    override = _recursive_dict_merge(override, kwargs)

    if not override:
        yield get_config()
        return

    merged = ConfigData.model_validate(
        _recursive_dict_merge(get_config().model_dump(), override)
    )
    token = set_context(replace(get_context(), config=merged))
    try:
        yield merged
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
