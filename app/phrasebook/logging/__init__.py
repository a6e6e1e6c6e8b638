"""Structured logging for phrasebook.

Public API:
    - configure_logging(): Apply the package's structlog configuration
    - get_module_logger(): Get a lazy logger for the calling module
"""

from phrasebook.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
