"""
Logging setup for E2E runs.

Library modules log through ``logging.getLogger(__name__)``; this wires the
root handler once per process so skips, downloads and readiness polling show
up in pytest's captured log output.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Third-party loggers that drown out test output at DEBUG
NOISY_LOGGERS = ("urllib3", "asyncio")


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Configure root logging for an E2E session."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("xenon_e2e").setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
