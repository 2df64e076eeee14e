"""
Support library for the XenonClinic end-to-end suite.

Configuration, login and API token helpers, visibility guards and download
checks shared by the page objects and scenarios under tests/e2e.
"""

from .config import E2EConfig, UserCredentials, load_config
from .errors import AppUnavailableError, ConfigError, E2EError

__version__ = "1.0.0"

__all__ = [
    "AppUnavailableError",
    "ConfigError",
    "E2EConfig",
    "E2EError",
    "UserCredentials",
    "load_config",
]
