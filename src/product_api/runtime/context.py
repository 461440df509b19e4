from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.config.config_template import load_config
from src.product_api.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


# Global configuration instance
_default_config = load_config(Path(EnvironmentVariables().config_file))
_default_context = AppContext(config=_default_config)


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context.

    Returns:
        AppContext: The current application context containing configuration.
    """
    return _app_context.get()


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
