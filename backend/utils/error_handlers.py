"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of asset service errors into HTTP
responses so each endpoint only calls the service.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus
from exceptions import (
    AlreadyExists,
    ApplicationError,
    ConfigurationError,
    DeserializationError,
    IdentityDecodeError,
    InvalidStateTransition,
    NotFound,
    StorageFault,
    ValidationError,
)

logger = logging.getLogger(__name__)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle asset service errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Asset transfer")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.put("/assets/{asset_id}/borrower")
        @handle_api_errors("Asset transfer")
        def transfer_asset(...):
            return service.transfer_asset(...)
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except NotFound as e:
                logger.info(f"{operation_name} - Not found: {e.message}")
                raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=e.message)
            except (AlreadyExists, InvalidStateTransition) as e:
                logger.info(f"{operation_name} - Conflict: {e.message}")
                raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=e.message)
            except IdentityDecodeError as e:
                logger.warning(f"{operation_name} - Identity error: {e.message}")
                raise HTTPException(status_code=HTTPStatus.UNAUTHORIZED, detail=e.message)
            except (ValidationError, ConfigurationError) as e:
                logger.warning(f"{operation_name} - Validation error: {e.message}")
                raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.message)
            except StorageFault as e:
                logger.error(f"{operation_name} - Storage fault: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.SERVICE_UNAVAILABLE,
                    detail=f"Ledger unavailable: {e.message}"
                )
            except DeserializationError as e:
                logger.error(f"{operation_name} - Corrupt record: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=e.message
                )
            except ApplicationError as e:
                logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed: {e.message}"
                )

        return wrapper

    return decorator
