"""Configuration and logging plumbing shared by the Vercel client."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MissingTokenError,
    VercelConfig,
    load_env_config,
)
from .logging import LOG_EXTRA_FIELDS, LogfmtFormatter, setup_logging
from .observability import log_event

__all__ = [
    # Config
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "MissingTokenError",
    "VercelConfig",
    "load_env_config",
    # Logging
    "LOG_EXTRA_FIELDS",
    "LogfmtFormatter",
    "setup_logging",
    "log_event",
]
