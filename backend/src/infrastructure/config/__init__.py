"""Settings and logging for the booking backend."""

from .settings import Settings, get_settings
from .logger import APP_LOGGER_NAME, setup_logger, get_logger, log_context

__all__ = ["Settings", "get_settings", "APP_LOGGER_NAME", "setup_logger", "get_logger", "log_context"]
