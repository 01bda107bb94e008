import logging

from exception_audit.utils.logging.handlers import get_logger


class Logger:
    """
    Logger that carries scan context on every record.

    This class wraps a standard library logger and merges a context dictionary
    (for example the project and file being scanned) into the ``extra`` of
    every log call.

    Args:
        name (str): The name of the logger instance
        context (dict, optional): Context attached to every record
    """

    def __init__(self, name: str, context: dict = None):
        self.base_logger: logging.Logger = get_logger(name)
        self.context = context

    def bind(self, **context) -> "Logger":
        """Return a Logger for the same name with additional context."""
        merged = dict(self.context or {})
        merged.update(context)
        return Logger(self.base_logger.name, merged)

    def __add_context_to_extra(self, extra: dict) -> dict:
        """
        Merges the bound context with additional extra information.

        Args:
            extra (dict): Additional context information to be added to the log

        Returns:
            dict: Merged dictionary of bound context and extra information
        """
        if not extra:
            return self.context

        if not self.context:
            return extra

        extra = extra.copy()
        extra.update(self.context)
        return extra

    def debug(self, message, extra=None):
        self.base_logger.debug(message, extra=self.__add_context_to_extra(extra))

    def info(self, message, extra=None):
        self.base_logger.info(message, extra=self.__add_context_to_extra(extra))

    def warning(self, message, extra=None):
        """
        Log a message with WARNING level.

        Args:
            message: The message to be logged
            extra (dict, optional): Additional context information for this log entry
        """
        self.base_logger.warning(message, extra=self.__add_context_to_extra(extra))

    def error(self, message, extra=None):
        """
        Log a message with ERROR level.

        Args:
            message: The message to be logged
            extra (dict, optional): Additional context information for this log entry
        """
        self.base_logger.error(message, extra=self.__add_context_to_extra(extra))
