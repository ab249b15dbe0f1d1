import pytest

from domain.entities.asset import Asset
from domain.value_objects.asset_state import AssetState
from exceptions import InvalidStateTransition, ValidationError


@pytest.fixture
def asset():
    return Asset.issue("loan-1", start_date=20230101, end_date=20240101, amount=1000, lender="lenderA")


def test_issue_forces_issued_state(asset):
    assert asset.state is AssetState.ISSUED
    assert asset.lender == "lenderA"
    assert asset.borrower == ""
    assert asset.payment_hashes == []


def test_empty_id_is_rejected():
    with pytest.raises(ValidationError):
        Asset(asset_id="")


def test_full_lifecycle(asset):
    asset.mark_pending()
    asset.mark_issued()
    asset.mark_trading()
    asset.mark_redeemed()
    assert asset.state is AssetState.REDEEMED
    assert asset.is_redeemed


def test_illegal_transition_leaves_state(asset):
    with pytest.raises(InvalidStateTransition) as exc_info:
        asset.mark_redeemed()
    assert asset.state is AssetState.ISSUED
    assert exc_info.value.details["current_state"] == "ISSUED"
    assert exc_info.value.details["target"] == "REDEEMED"


def test_assign_borrower_changes_only_borrower(asset):
    asset.mark_trading()
    asset.assign_borrower("borrowerB")
    assert asset.borrower == "borrowerB"
    assert asset.state is AssetState.TRADING
    assert asset.lender == "lenderA"


def test_redeemed_asset_rejects_mutation(asset):
    asset.mark_trading()
    asset.mark_redeemed()
    with pytest.raises(InvalidStateTransition):
        asset.assign_borrower("borrowerB")
    with pytest.raises(InvalidStateTransition):
        asset.add_payment_hash("0xabc")
    with pytest.raises(InvalidStateTransition):
        asset.set_payment_addresses("addr-1", "addr-2")
    assert asset.borrower == ""
    assert asset.payment_hashes == []


def test_payment_hashes_append_in_order(asset):
    asset.add_payment_hash("0x01")
    asset.add_payment_hash("0x02")
    assert asset.payment_hashes == ["0x01", "0x02"]


def test_empty_payment_hash_rejected(asset):
    with pytest.raises(ValidationError):
        asset.add_payment_hash("")
