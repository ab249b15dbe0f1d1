import json

import pytest

from domain.entities.asset import Asset
from domain.value_objects.asset_state import AssetState
from exceptions import DeserializationError
from services.asset_codec import deserialize_asset, serialize_asset


@pytest.fixture
def asset():
    asset = Asset.issue("loan-7", start_date=20230101, end_date=20240101, amount=1000, lender="lenderA")
    asset.borrower = "borrowerB"
    asset.borrower_address = "addr-borrower"
    asset.investor_address = "addr-investor"
    asset.payment_hashes = ["0x01", "0x02"]
    asset.state = AssetState.TRADING
    return asset


def test_wire_shape_and_key_order(asset):
    payload = json.loads(serialize_asset(asset))
    assert list(payload) == [
        "assetID", "lender", "borrower", "startDate", "amount", "endDate",
        "senderAddress", "investorAddress", "paymentHashes", "currentState",
    ]
    assert payload["senderAddress"] == "addr-borrower"
    assert payload["currentState"] == "TRADING"


def test_encoding_is_compact(asset):
    assert b", " not in serialize_asset(asset)
    assert b": " not in serialize_asset(asset)


def test_bytes_survive_decode_and_encode(asset):
    data = serialize_asset(asset)
    assert serialize_asset(deserialize_asset(data)) == data


def test_state_survives_reload(asset):
    assert deserialize_asset(serialize_asset(asset)) == asset


def test_record_without_state_loads_as_issued():
    data = json.dumps({
        "assetID": "asset1", "lender": "x", "borrower": "", "startDate": 20210101,
        "amount": 300, "endDate": 20220101, "senderAddress": "", "investorAddress": "",
        "paymentHashes": None,
    }).encode()
    asset = deserialize_asset(data)
    assert asset.state is AssetState.ISSUED
    assert asset.payment_hashes == []


@pytest.mark.parametrize("data", [
    b"not json",
    b"null",
    b"[]",
    b'{"lender": "x"}',
    b'{"assetID": ""}',
    b'{"assetID": "a", "amount": "lots"}',
    b'{"assetID": "a", "amount": true}',
    b'{"assetID": "a", "amount": "300"}',
    b'{"assetID": "a", "startDate": 20210101.5}',
    b'{"assetID": "a", "currentState": "CLOSED"}',
    b'{"assetID": "a", "paymentHashes": "0x01"}',
])
def test_malformed_records_raise(data):
    with pytest.raises(DeserializationError) as exc_info:
        deserialize_asset(data, key="k1")
    assert exc_info.value.details == {"key": "k1"}
