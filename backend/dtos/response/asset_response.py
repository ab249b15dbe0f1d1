"""
Asset Response DTOs

DTOs for asset-related API responses.
"""

from pydantic import BaseModel, Field
from typing import List

from domain.entities.asset import Asset


class AssetResponse(BaseModel):
    """
    Response DTO for a loan asset.

    Unlike the ledger record, the API exposes the state by name alongside
    the other fields under snake_case keys.
    """

    asset_id: str = Field(description="Ledger key")
    lender: str = Field(description="Identity that issued the asset")
    borrower: str = Field(description="Current borrower")
    start_date: int = Field(description="Loan start date as YYYYMMDD")
    end_date: int = Field(description="Loan end date as YYYYMMDD")
    amount: int = Field(description="Loan principal")
    borrower_address: str = Field(description="Borrower payment address")
    investor_address: str = Field(description="Investor payment address")
    payment_hashes: List[str] = Field(description="Recorded payment references")
    state: str = Field(description="Lifecycle state")

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetResponse":
        return cls(
            asset_id=asset.asset_id,
            lender=asset.lender,
            borrower=asset.borrower,
            start_date=asset.start_date,
            end_date=asset.end_date,
            amount=asset.amount,
            borrower_address=asset.borrower_address,
            investor_address=asset.investor_address,
            payment_hashes=list(asset.payment_hashes),
            state=asset.state.name,
        )


class AssetListResponse(BaseModel):
    """Response DTO for a full ledger listing."""

    assets: List[AssetResponse] = Field(description="Assets in key order")
    total_count: int = Field(description="Number of assets")


class AssetExistsResponse(BaseModel):
    """Response DTO for an existence check."""

    asset_id: str
    exists: bool
