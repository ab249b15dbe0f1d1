"""
Asset Service

Handles the loan asset lifecycle against the ledger: issuing, reading,
transferring, state changes and deletion.

Every public method is one logical transaction. The service keeps no state
between invocations; the ledger is the only durable owner of asset data and
no retries happen here, errors propagate to the caller unchanged.
"""

from contextlib import closing
from typing import List, Optional

from constants import SeedAssets
from domain.entities.asset import Asset
from domain.value_objects.asset_state import AssetState
from exceptions import AlreadyExists, NotFound
from repositories.ledger_port import LedgerPort
from services.asset_codec import deserialize_asset, serialize_asset
from services.identity_resolver import Base64IdentityResolver
from services.interfaces import IAssetService, IIdentityResolver
from utils.logging_utils import StructuredLogger, log_operation, set_logging_context

logger = StructuredLogger(__name__)


class AssetService(IAssetService):
    """Service for loan asset business logic."""

    def __init__(
        self,
        ledger: LedgerPort,
        client_identity: str | bytes | None = None,
        identity_resolver: Optional[IIdentityResolver] = None
    ):
        """
        Initialize AssetService for a single invocation.

        Args:
            ledger: World state to read and write
            client_identity: Opaque caller credential supplied by the transport
            identity_resolver: Decoder for the credential (base64 by default)
        """
        self.ledger = ledger
        self.client_identity = client_identity
        self.identity_resolver = identity_resolver or Base64IdentityResolver()

    def submitting_identity(self) -> str:
        """
        Resolve the caller credential. Not cached.

        Raises:
            IdentityDecodeError: If the credential is missing or malformed
        """
        identity = self.identity_resolver.resolve_caller_identity(self.client_identity)
        set_logging_context(identity=identity)
        return identity

    @log_operation("initialize_seed_assets")
    def initialize_seed_assets(self) -> List[Asset]:
        """
        Write the six demonstration assets.

        Existing seed keys are overwritten. The first failure aborts the
        remaining writes; anything written before it stays on the ledger.

        Returns:
            The assets written, in seed order
        """
        written = []
        for asset_id, amount in SeedAssets.RECORDS:
            asset = Asset.issue(
                asset_id=asset_id,
                start_date=SeedAssets.START_DATE,
                end_date=SeedAssets.END_DATE,
                amount=amount,
                lender=self.submitting_identity(),
            )
            self._write(asset_id, asset)
            written.append(asset)

        logger.info(f"Seeded {len(written)} assets", extra={"identity": written[0].lender})
        return written

    @log_operation("create_asset")
    def create_asset(self, asset_id: str, start_date: int, end_date: int, amount: int) -> Asset:
        """
        Issue a new asset lent by the caller.

        Args:
            asset_id: Ledger key for the asset
            start_date: Loan start as YYYYMMDD
            end_date: Loan end as YYYYMMDD
            amount: Loan principal

        Returns:
            The stored asset, in ISSUED state

        Raises:
            AlreadyExists: If the asset ID is taken (the stored value is untouched)
        """
        if self.asset_exists(asset_id):
            raise AlreadyExists(asset_id)

        asset = Asset.issue(
            asset_id=asset_id,
            start_date=start_date,
            end_date=end_date,
            amount=amount,
            lender=self.submitting_identity(),
        )
        self._write(asset_id, asset)

        logger.info(f"Issued asset {asset_id}", extra={"asset_id": asset_id, "identity": asset.lender})
        return asset

    @log_operation("read_asset")
    def read_asset(self, asset_id: str) -> Asset:
        """
        Load the asset stored under a key.

        Raises:
            NotFound: If no asset is stored under the ID
            DeserializationError: If the stored record is malformed
        """
        data = self.ledger.get(asset_id)
        if data is None:
            raise NotFound(asset_id)
        return deserialize_asset(data, key=asset_id)

    @log_operation("delete_asset")
    def delete_asset(self, asset_id: str) -> None:
        """
        Remove an asset from the ledger.

        Raises:
            NotFound: If no asset is stored under the ID
        """
        # Existence is checked up front; the store's delete is a no-op on missing keys
        if not self.asset_exists(asset_id):
            raise NotFound(asset_id)
        self.ledger.delete(asset_id)

    def asset_exists(self, asset_id: str) -> bool:
        """Whether any value is stored under the ID. Never raises NotFound."""
        return self.ledger.get(asset_id) is not None

    @log_operation("transfer_asset")
    def transfer_asset(self, asset_id: str, new_borrower: str) -> Asset:
        """
        Reassign the borrower of an asset.

        Only ``borrower`` changes; lender, dates, amount, addresses, payment
        hashes and state are written back as read.

        Raises:
            NotFound: If no asset is stored under the ID
            DeserializationError: If the stored record is malformed
            InvalidStateTransition: If the asset is redeemed
        """
        asset = self.read_asset(asset_id)
        asset.assign_borrower(new_borrower)
        self._write(asset_id, asset)
        return asset

    @log_operation("list_all_assets")
    def list_all_assets(self) -> List[Asset]:
        """
        Decode every entry of the ledger, in key order.

        The keyspace is assumed to hold only asset records: a single foreign
        or malformed value aborts the listing with DeserializationError.
        """
        assets = []
        with closing(self.ledger.scan_range("", "")) as entries:
            for key, value in entries:
                assets.append(deserialize_asset(value, key=key))
        return assets

    @log_operation("change_asset_state")
    def change_asset_state(self, asset_id: str, target_state: AssetState) -> Asset:
        """
        Move an asset along its lifecycle.

        Raises:
            NotFound: If no asset is stored under the ID
            InvalidStateTransition: If the transition table forbids the move
        """
        asset = self.read_asset(asset_id)
        previous = asset.state
        asset.transition_to(target_state)
        self._write(asset_id, asset)

        logger.info(
            f"Asset {asset_id} moved {previous.name} -> {target_state.name}",
            extra={"asset_id": asset_id}
        )
        return asset

    @log_operation("record_payment")
    def record_payment(self, asset_id: str, payment_hash: str) -> Asset:
        """
        Append a payment reference to an asset.

        Raises:
            ValidationError: If the hash is empty
            InvalidStateTransition: If the asset is redeemed
        """
        asset = self.read_asset(asset_id)
        asset.add_payment_hash(payment_hash)
        self._write(asset_id, asset)
        return asset

    @log_operation("update_payment_addresses")
    def update_payment_addresses(
        self,
        asset_id: str,
        borrower_address: str,
        investor_address: str
    ) -> Asset:
        asset = self.read_asset(asset_id)
        asset.set_payment_addresses(borrower_address, investor_address)
        self._write(asset_id, asset)
        return asset

    def _write(self, asset_id: str, asset: Asset) -> None:
        """Encode and store an asset under the given ledger key (one durable write)."""
        self.ledger.put(asset_id, serialize_asset(asset))
