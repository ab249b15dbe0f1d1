"""
Asset Entity

A single loan instrument tracked on the ledger, together with the rules
that govern how its lifecycle state may change.
"""

from dataclasses import dataclass, field
from typing import List

from domain.value_objects.asset_state import AssetState
from exceptions import InvalidStateTransition, ValidationError


@dataclass
class Asset:
    """
    Loan asset entity.

    Identity is the ledger key ``asset_id``. All state changes go through
    ``transition_to`` so the transition table is the single authority on
    which moves are legal; a REDEEMED asset accepts no further mutation.
    """

    asset_id: str
    lender: str = ""
    borrower: str = ""
    start_date: int = 0
    amount: int = 0
    end_date: int = 0
    borrower_address: str = ""
    investor_address: str = ""
    payment_hashes: List[str] = field(default_factory=list)
    state: AssetState = AssetState.ISSUED

    def __post_init__(self):
        if not self.asset_id:
            raise ValidationError(
                "Asset ID cannot be empty",
                invalid_fields={"asset_id": self.asset_id}
            )

    @classmethod
    def issue(
        cls,
        asset_id: str,
        start_date: int,
        end_date: int,
        amount: int,
        lender: str
    ) -> "Asset":
        """
        Create a freshly issued asset attributed to its lender.

        Args:
            asset_id: Ledger key of the new asset
            start_date: Loan start as YYYYMMDD
            end_date: Loan end as YYYYMMDD
            amount: Loan principal
            lender: Resolved identity of the creator

        Returns:
            Asset in ISSUED state
        """
        return cls(
            asset_id=asset_id,
            lender=lender,
            start_date=start_date,
            end_date=end_date,
            amount=amount,
            state=AssetState.ISSUED,
        )

    @property
    def is_redeemed(self) -> bool:
        return self.state.is_terminal()

    def transition_to(self, target: AssetState) -> None:
        """
        Move the asset to ``target``.

        Raises:
            InvalidStateTransition: If the transition table forbids the move
        """
        if not self.state.can_transition_to(target):
            raise InvalidStateTransition(self.asset_id, self.state.name, target.name)
        self.state = target

    def mark_issued(self) -> None:
        self.transition_to(AssetState.ISSUED)

    def mark_pending(self) -> None:
        self.transition_to(AssetState.PENDING)

    def mark_trading(self) -> None:
        self.transition_to(AssetState.TRADING)

    def mark_redeemed(self) -> None:
        self.transition_to(AssetState.REDEEMED)

    def ensure_mutable(self, action: str) -> None:
        """Reject ``action`` when the asset is already redeemed."""
        if self.is_redeemed:
            raise InvalidStateTransition(self.asset_id, self.state.name, action)

    def assign_borrower(self, new_borrower: str) -> None:
        """Reassign the borrower; every other field is left untouched."""
        self.ensure_mutable("transfer")
        self.borrower = new_borrower

    def add_payment_hash(self, payment_hash: str) -> None:
        """Append a payment reference. The list is append-only."""
        self.ensure_mutable("payment")
        if not payment_hash:
            raise ValidationError(
                "Payment hash cannot be empty",
                invalid_fields={"payment_hash": payment_hash}
            )
        self.payment_hashes.append(payment_hash)

    def set_payment_addresses(self, borrower_address: str, investor_address: str) -> None:
        self.ensure_mutable("address update")
        self.borrower_address = borrower_address
        self.investor_address = investor_address
