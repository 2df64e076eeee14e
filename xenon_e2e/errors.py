"""
Exceptions raised by the E2E support library.

Assertion failures are never wrapped: they propagate as ordinary pytest
failures. These types cover the harness itself.
"""


class E2EError(Exception):
    """Base class for E2E harness errors."""

    pass


class ConfigError(E2EError):
    """Raised when E2E configuration is missing or invalid."""

    pass


class AppUnavailableError(E2EError):
    """Raised when the application under test cannot be reached."""

    def __init__(self, base_url: str, waited: float):
        self.base_url = base_url
        self.waited = waited
        super().__init__(f"Application at {base_url} not reachable after {waited:.0f}s")
