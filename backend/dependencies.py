"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating ledger and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from config.ledger_config import LEDGER_SETTINGS
from constants import IdentityHeaders, LedgerBackends
from database import get_db
from repositories.ledger_port import LedgerPort
from repositories.memory_ledger import InMemoryLedger
from repositories.sql_ledger import SqlLedger
from services.asset_service import AssetService
from services.identity_resolver import Base64IdentityResolver
from services.interfaces import IAssetService, IIdentityResolver

# Process-wide store for the 'memory' backend
_memory_ledger = InMemoryLedger()


def get_ledger(db: Session = Depends(get_db)) -> LedgerPort:
    """
    Factory function for the configured ledger backend.

    Args:
        db: Database session (injected, unused by the memory backend)

    Returns:
        LedgerPort implementation
    """
    if LEDGER_SETTINGS.backend == LedgerBackends.MEMORY:
        return _memory_ledger
    return SqlLedger(db)


def get_identity_resolver() -> IIdentityResolver:
    """
    Factory function for the caller identity decoder.

    Note: This can be easily swapped for a different implementation
    or a mock for testing purposes.
    """
    return Base64IdentityResolver()


def get_asset_service(
    ledger: LedgerPort = Depends(get_ledger),
    resolver: IIdentityResolver = Depends(get_identity_resolver),
    client_identity: Optional[str] = Header(None, alias=IdentityHeaders.CLIENT_IDENTITY),
) -> IAssetService:
    """
    Factory function for creating an AssetService per request.

    Args:
        ledger: Ledger backend (injected)
        resolver: Identity decoder (injected)
        client_identity: Raw caller credential from the request header

    Returns:
        IAssetService: Asset service implementation
    """
    return AssetService(ledger, client_identity=client_identity, identity_resolver=resolver)
