__all__ = [
    "Logger",
    "configure_logging",
    "get_logger",
]

from exception_audit.utils.logging.default import Logger
from exception_audit.utils.logging.handlers import configure_logging, get_logger
