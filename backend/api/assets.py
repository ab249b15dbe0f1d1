"""
Loan asset API endpoints

Thin HTTP adapter over the asset service. The caller credential travels in
the X-Client-Identity header; all business rules live in the service.
"""
from fastapi import APIRouter, Depends, Response
import logging

from constants import HTTPStatus
from dependencies import get_asset_service
from dtos.request.asset_request import (
    ChangeStateRequest,
    CreateAssetRequest,
    PaymentAddressesRequest,
    RecordPaymentRequest,
    TransferAssetRequest,
)
from dtos.response.asset_response import AssetExistsResponse, AssetListResponse, AssetResponse
from services.interfaces import IAssetService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/assets/init", response_model=AssetListResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Ledger seeding")
def initialize_seed_assets(service: IAssetService = Depends(get_asset_service)):
    """
    Write the demonstration assets attributed to the caller.

    Existing seed keys are overwritten; a failure part-way leaves earlier
    seeds in place.
    """
    assets = service.initialize_seed_assets()
    return AssetListResponse(
        assets=[AssetResponse.from_entity(a) for a in assets],
        total_count=len(assets)
    )


@router.post("/assets", response_model=AssetResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Asset creation")
def create_asset(request: CreateAssetRequest, service: IAssetService = Depends(get_asset_service)):
    """Issue a new asset lent by the caller."""
    asset = service.create_asset(
        request.asset_id,
        request.start_date,
        request.end_date,
        request.amount
    )
    return AssetResponse.from_entity(asset)


@router.get("/assets", response_model=AssetListResponse)
@handle_api_errors("Asset listing")
def list_assets(service: IAssetService = Depends(get_asset_service)):
    """List every asset on the ledger in key order."""
    assets = service.list_all_assets()
    return AssetListResponse(
        assets=[AssetResponse.from_entity(a) for a in assets],
        total_count=len(assets)
    )


@router.get("/assets/{asset_id}", response_model=AssetResponse)
@handle_api_errors("Asset read")
def read_asset(asset_id: str, service: IAssetService = Depends(get_asset_service)):
    return AssetResponse.from_entity(service.read_asset(asset_id))


@router.get("/assets/{asset_id}/exists", response_model=AssetExistsResponse)
@handle_api_errors("Asset existence check")
def asset_exists(asset_id: str, service: IAssetService = Depends(get_asset_service)):
    return AssetExistsResponse(asset_id=asset_id, exists=service.asset_exists(asset_id))


@router.delete("/assets/{asset_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Asset deletion")
def delete_asset(asset_id: str, service: IAssetService = Depends(get_asset_service)):
    service.delete_asset(asset_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.put("/assets/{asset_id}/borrower", response_model=AssetResponse)
@handle_api_errors("Asset transfer")
def transfer_asset(
    asset_id: str,
    request: TransferAssetRequest,
    service: IAssetService = Depends(get_asset_service)
):
    """Reassign the borrower of an asset."""
    return AssetResponse.from_entity(service.transfer_asset(asset_id, request.new_borrower))


@router.put("/assets/{asset_id}/state", response_model=AssetResponse)
@handle_api_errors("Asset state change")
def change_asset_state(
    asset_id: str,
    request: ChangeStateRequest,
    service: IAssetService = Depends(get_asset_service)
):
    """Move an asset along ISSUED -> PENDING -> TRADING -> REDEEMED."""
    return AssetResponse.from_entity(
        service.change_asset_state(asset_id, request.target_state())
    )


@router.post("/assets/{asset_id}/payments", response_model=AssetResponse)
@handle_api_errors("Payment recording")
def record_payment(
    asset_id: str,
    request: RecordPaymentRequest,
    service: IAssetService = Depends(get_asset_service)
):
    return AssetResponse.from_entity(service.record_payment(asset_id, request.payment_hash))


@router.put("/assets/{asset_id}/addresses", response_model=AssetResponse)
@handle_api_errors("Payment address update")
def update_payment_addresses(
    asset_id: str,
    request: PaymentAddressesRequest,
    service: IAssetService = Depends(get_asset_service)
):
    return AssetResponse.from_entity(
        service.update_payment_addresses(
            asset_id,
            request.borrower_address,
            request.investor_address
        )
    )
