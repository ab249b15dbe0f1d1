"""
Asset Request DTOs

DTOs for asset-related API requests.
"""

from pydantic import BaseModel, Field, validator

from domain.value_objects.asset_state import AssetState
from domain.value_objects.date_code import DateCode


class CreateAssetRequest(BaseModel):
    """
    Request DTO for issuing a new loan asset.

    The lender is not part of the request; it is taken from the caller identity.
    """

    asset_id: str = Field(min_length=1, description="Ledger key of the new asset")
    start_date: int = Field(description="Loan start date as YYYYMMDD")
    end_date: int = Field(description="Loan end date as YYYYMMDD")
    amount: int = Field(ge=0, description="Loan principal")

    @validator("start_date", "end_date")
    def validate_date_code(cls, v):
        """Ensure dates are 8-digit calendar dates."""
        DateCode(v)
        return v

    @validator("end_date")
    def validate_date_order(cls, v, values):
        """Ensure the loan does not end before it starts."""
        start = values.get("start_date")
        if start is not None and DateCode(v) < DateCode(start):
            raise ValueError("end_date must not be before start_date")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "asset_id": "loan-7",
                "start_date": 20230101,
                "end_date": 20240101,
                "amount": 1000
            }
        }


class TransferAssetRequest(BaseModel):
    """Request DTO for reassigning an asset's borrower."""

    new_borrower: str = Field(min_length=1, description="Identity of the new borrower")


class ChangeStateRequest(BaseModel):
    """Request DTO for moving an asset along its lifecycle."""

    state: str = Field(description="Target state name, e.g. TRADING")

    @validator("state")
    def validate_state(cls, v):
        """Accept only defined state names (case-insensitive)."""
        return AssetState.from_name(v.strip().upper()).name

    def target_state(self) -> AssetState:
        return AssetState.from_name(self.state)


class RecordPaymentRequest(BaseModel):
    """Request DTO for appending a payment reference."""

    payment_hash: str = Field(min_length=1, description="Hash of the payment event")


class PaymentAddressesRequest(BaseModel):
    """Request DTO for updating payment routing addresses."""

    borrower_address: str = Field("", description="Borrower payment address")
    investor_address: str = Field("", description="Investor payment address")
