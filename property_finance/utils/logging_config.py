import logging
import sys
from typing import Optional

from ..config import settings


def setup_logging(log_level: Optional[str] = None) -> None:
    """Setup engine logging configuration."""

    if log_level is None:
        log_level = settings.log_level or ("DEBUG" if settings.debug else "INFO")
    level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    package_logger = logging.getLogger("property_finance")
    package_logger.setLevel(level)

    package_logger.info("Logging setup complete - Level: %s", log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""
    if name == "property_finance" or name.startswith("property_finance."):
        return logging.getLogger(name)
    return logging.getLogger(f"property_finance.{name}")
