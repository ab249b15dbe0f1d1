"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages,
improving observability and debugging of ledger operations.
"""

import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps
import inspect


# Context variable for invocation-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names copied into the log context when present
_CONTEXT_ARGS = ("asset_id", "new_borrower", "target_state")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Asset created", extra={
            "asset_id": asset.asset_id,
            "identity": lender,
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current invocation.

    This context will be automatically included in all log messages
    emitted through StructuredLogger within the current context.

    Example:
        set_logging_context(identity="lenderA", operation="create_asset")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Positional and keyword arguments named in _CONTEXT_ARGS are copied
    into the log record. The operation name is added to the logging context
    for the duration of the call, along with anything set_logging_context
    adds inside it. Failures are logged and re-raised unchanged.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("transfer_asset")
        def transfer_asset(self, asset_id, new_borrower):
            ...
    """
    def decorator(func):
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context: Dict[str, Any] = {"operation": operation_name}

            try:
                bound = signature.bind_partial(*args, **kwargs)
            except TypeError:
                bound = None
            if bound is not None:
                for key in _CONTEXT_ARGS:
                    if key in bound.arguments:
                        context[key] = str(bound.arguments[key])

            token = _logging_context.set({**_logging_context.get(), "operation": operation_name})
            try:
                logger.debug(f"Starting {operation_name}", extra=context)

                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    context["error"] = e.message if hasattr(e, "message") else str(e)
                    context["error_type"] = type(e).__name__
                    logger.warning(f"Failed {operation_name}: {context['error']}", extra=context)
                    raise

                logger.info(f"Completed {operation_name}", extra=context)
                return result
            finally:
                _logging_context.reset(token)

        return wrapper

    return decorator
