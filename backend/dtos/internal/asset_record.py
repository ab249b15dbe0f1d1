"""
Internal Asset Record DTO

The persisted shape of an asset as stored in the ledger. Field aliases are
the wire names; declaration order fixes the key order of the encoded JSON.
"""

from pydantic import BaseModel, Field, validator
from typing import List

from domain.entities.asset import Asset
from domain.value_objects.asset_state import AssetState


class AssetRecord(BaseModel):
    """
    Ledger record for a loan asset.

    ``currentState`` carries the lifecycle state so that it survives a reload.
    Records written without it are read as ISSUED.
    """

    asset_id: str = Field(alias="assetID", min_length=1)
    lender: str = ""
    borrower: str = ""
    start_date: int = Field(0, alias="startDate", strict=True)
    amount: int = Field(0, strict=True)
    end_date: int = Field(0, alias="endDate", strict=True)
    borrower_address: str = Field("", alias="senderAddress")
    investor_address: str = Field("", alias="investorAddress")
    payment_hashes: List[str] = Field(default_factory=list, alias="paymentHashes")
    current_state: str = Field(AssetState.ISSUED.name, alias="currentState")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @validator("payment_hashes", pre=True)
    def null_hashes_as_empty(cls, v):
        """A null hash list is an empty one."""
        return [] if v is None else v

    @validator("current_state")
    def validate_state(cls, v):
        """Only the four lifecycle states are accepted."""
        AssetState.from_name(v)
        return v

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetRecord":
        return cls(
            asset_id=asset.asset_id,
            lender=asset.lender,
            borrower=asset.borrower,
            start_date=asset.start_date,
            amount=asset.amount,
            end_date=asset.end_date,
            borrower_address=asset.borrower_address,
            investor_address=asset.investor_address,
            payment_hashes=list(asset.payment_hashes),
            current_state=asset.state.name,
        )

    def to_entity(self) -> Asset:
        return Asset(
            asset_id=self.asset_id,
            lender=self.lender,
            borrower=self.borrower,
            start_date=self.start_date,
            amount=self.amount,
            end_date=self.end_date,
            borrower_address=self.borrower_address,
            investor_address=self.investor_address,
            payment_hashes=list(self.payment_hashes),
            state=AssetState.from_name(self.current_state),
        )
