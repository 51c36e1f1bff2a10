from .formatting import (
    format_currency,
    format_currency_sek,
    format_number,
    format_number_se,
    format_percentage,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "format_currency",
    "format_currency_sek",
    "format_number",
    "format_number_se",
    "format_percentage",
    "setup_logging",
    "get_logger",
]
