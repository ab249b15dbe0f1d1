"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from domain.entities.asset import Asset
    from domain.value_objects.asset_state import AssetState


class IIdentityResolver(ABC):
    """
    Interface for decoding a caller credential into an identifier.
    """

    @abstractmethod
    def resolve_caller_identity(self, raw_token: str | bytes | None) -> str:
        """
        Decode an opaque caller token.

        Args:
            raw_token: Credential supplied by the hosting transport

        Returns:
            Stable string identifier of the caller

        Raises:
            IdentityDecodeError: If the token is malformed
        """
        pass


class IAssetService(ABC):
    """
    Abstract interface for loan asset lifecycle operations.

    Each method is one logical transaction against the ledger.
    """

    @abstractmethod
    def initialize_seed_assets(self) -> List["Asset"]:
        """
        Write the demonstration asset batch attributed to the caller.

        Raises:
            IdentityDecodeError, SerializationError, StorageFault: On the first
                failure; earlier writes stay committed
        """
        pass

    @abstractmethod
    def create_asset(self, asset_id: str, start_date: int, end_date: int, amount: int) -> "Asset":
        """
        Issue a new asset lent by the caller.

        Raises:
            AlreadyExists: If the asset ID is taken
        """
        pass

    @abstractmethod
    def read_asset(self, asset_id: str) -> "Asset":
        """
        Raises:
            NotFound: If no asset is stored under the ID
            DeserializationError: If the stored record is malformed
        """
        pass

    @abstractmethod
    def delete_asset(self, asset_id: str) -> None:
        """
        Raises:
            NotFound: If no asset is stored under the ID
        """
        pass

    @abstractmethod
    def asset_exists(self, asset_id: str) -> bool:
        pass

    @abstractmethod
    def transfer_asset(self, asset_id: str, new_borrower: str) -> "Asset":
        """
        Reassign the borrower of an asset.

        Raises:
            NotFound, DeserializationError: From reading the asset
            InvalidStateTransition: If the asset is redeemed
        """
        pass

    @abstractmethod
    def list_all_assets(self) -> List["Asset"]:
        """
        Raises:
            DeserializationError: On the first malformed record
        """
        pass

    @abstractmethod
    def change_asset_state(self, asset_id: str, target_state: "AssetState") -> "Asset":
        """
        Raises:
            InvalidStateTransition: If the transition table forbids the move
        """
        pass

    @abstractmethod
    def record_payment(self, asset_id: str, payment_hash: str) -> "Asset":
        pass

    @abstractmethod
    def update_payment_addresses(
        self,
        asset_id: str,
        borrower_address: str,
        investor_address: str
    ) -> "Asset":
        pass
