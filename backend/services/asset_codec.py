"""
Asset Codec

Converts asset entities to and from the bytes stored in the ledger.
Encoding is canonical (fixed key order, compact separators), so decoding
and re-encoding a record written by this module yields identical bytes.
"""
import logging

from pydantic import ValidationError as PydanticValidationError

from domain.entities.asset import Asset
from dtos.internal.asset_record import AssetRecord
from exceptions import DeserializationError, SerializationError

logger = logging.getLogger(__name__)


def serialize_asset(asset: Asset) -> bytes:
    """
    Encode an asset as a ledger value.

    Raises:
        SerializationError: If the asset cannot be represented as a record
    """
    try:
        record = AssetRecord.from_entity(asset)
        return record.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticValidationError, TypeError, ValueError) as e:
        raise SerializationError(asset.asset_id, str(e)) from e


def deserialize_asset(data: bytes, key: str | None = None) -> Asset:
    """
    Decode a ledger value into an asset.

    Args:
        data: Stored bytes
        key: Ledger key the bytes were read from, for error context

    Raises:
        DeserializationError: If the bytes are not a well-formed asset record
    """
    try:
        record = AssetRecord.model_validate_json(data)
    except PydanticValidationError as e:
        logger.warning(f"Malformed asset record at key {key!r}: {e.error_count()} error(s)")
        raise DeserializationError(str(e), key=key) from e
    return record.to_entity()
