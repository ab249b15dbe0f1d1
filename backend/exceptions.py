"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. Every failure surfaced by
the asset service is one of these named conditions so callers can branch on cause.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class AlreadyExists(ApplicationError):
    """Raised when creating an asset under a key that is already present"""

    def __init__(self, asset_id: str):
        super().__init__(f"the asset {asset_id} already exists", {"asset_id": asset_id})


class NotFound(ApplicationError):
    """Raised when no asset is stored under the requested key"""

    def __init__(self, asset_id: str):
        super().__init__(f"the asset {asset_id} does not exist", {"asset_id": asset_id})


class SerializationError(ApplicationError):
    """Raised when an asset cannot be encoded for the ledger"""

    def __init__(self, asset_id: str, message: str):
        super().__init__(f"failed to serialize asset {asset_id}: {message}", {"asset_id": asset_id})


class DeserializationError(ApplicationError):
    """Raised when stored bytes are not a well-formed asset record"""

    def __init__(self, message: str, key: str | None = None):
        details = {"key": key} if key is not None else {}
        super().__init__(f"failed to deserialize asset record: {message}", details)


class IdentityDecodeError(ApplicationError):
    """Raised when the caller identity token cannot be decoded"""

    def __init__(self, message: str):
        super().__init__(f"failed to decode client identity: {message}")


class StorageFault(ApplicationError):
    """Raised when the ledger storage layer fails"""

    def __init__(self, operation: str, message: str, key: str | None = None):
        details = {"operation": operation}
        if key is not None:
            details["key"] = key
        super().__init__(f"ledger {operation} failed: {message}", details)


class InvalidStateTransition(ApplicationError):
    """Raised when an asset's current state does not allow the requested change"""

    def __init__(self, asset_id: str, current_state: str, target: str):
        details = {"asset_id": asset_id, "current_state": current_state, "target": target}
        super().__init__(
            f"asset {asset_id} in state {current_state} does not allow {target}", details
        )
