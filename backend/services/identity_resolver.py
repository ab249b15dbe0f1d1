"""
Identity Resolver

Turns the opaque credential supplied by the hosting transport into the
plain identifier recorded on assets. Only decoding happens here; whether
the caller may perform an operation is decided outside this package.
"""
import base64
import binascii
import logging

from exceptions import IdentityDecodeError
from services.interfaces import IIdentityResolver

logger = logging.getLogger(__name__)


class Base64IdentityResolver(IIdentityResolver):
    """Decodes standard base64 client IDs into UTF-8 identifiers."""

    def resolve_caller_identity(self, raw_token: str | bytes | None) -> str:
        """
        Decode a caller token.

        Args:
            raw_token: Base64 text (or bytes) supplied with the invocation

        Returns:
            Decoded identifier

        Raises:
            IdentityDecodeError: If the token is missing, not valid base64,
                or does not decode to UTF-8 text
        """
        if raw_token is None or (isinstance(raw_token, (str, bytes)) and not raw_token.strip()):
            raise IdentityDecodeError("no client identity supplied")

        try:
            decoded = base64.b64decode(raw_token, validate=True)
        except (binascii.Error, ValueError, TypeError) as e:
            logger.warning(f"Rejected malformed client identity token: {e}")
            raise IdentityDecodeError(f"token is not valid base64: {e}") from e

        try:
            return decoded.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IdentityDecodeError("decoded token is not UTF-8 text") from e


def encode_identity(identity: str) -> str:
    """Encode an identifier the way the transport supplies it."""
    return base64.b64encode(identity.encode("utf-8")).decode("ascii")
