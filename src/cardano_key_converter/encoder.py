"""
Key Encoder

Turns the CBOR hex of an onchain Ed25519 signing key into the Bech32
``ed25519_sk`` private key expected by offchain wallet libraries.
"""

import logging
from functools import lru_cache
from types import ModuleType

from .errors import (
    Bech32EncodingError,
    InvalidCborHexInputError,
    InvalidCborPrefixError,
    InvalidKeyLengthError,
    KeyConverterError,
)


logger = logging.getLogger(__name__)

ENCODE_ERROR_CONTEXT = "Error converting CBOR hex to private key"

# CBOR major type 2 (bytestring) with one-byte length 0x20 (32 bytes)
CBOR_BYTESTRING_32_PREFIX = "5820"
PRIVATE_KEY_HEX_LENGTH = 64
PRIVATE_KEY_HRP = "ed25519_sk"


@lru_cache(maxsize=None)
def get_bech32_encoder() -> ModuleType:
    """
    Load the Bech32 encoder on first use and reuse it afterwards.

    Returns:
        The pycardano bech32 module

    Raises:
        Bech32EncodingError: If the encoder cannot be loaded
    """
    try:
        import pycardano.crypto.bech32 as bech32
    except ImportError as e:
        raise Bech32EncodingError(f"Failed to load bech32 encoder: {e}") from e

    logger.debug("Loaded bech32 encoder from pycardano")
    return bech32


def encode_private_key_bytes(key_bytes: bytes) -> str:
    """
    Bech32-encode raw key bytes with the ed25519_sk prefix.

    Args:
        key_bytes: Raw 32-byte signing key

    Returns:
        Bech32-encoded private key
    """
    encoder = get_bech32_encoder()
    try:
        words = encoder.convertbits(key_bytes, 8, 5)
        if words is None:
            raise Bech32EncodingError("Unable to convert key bytes to 5-bit words")
        return encoder.bech32_encode(PRIVATE_KEY_HRP, words, encoder.Encoding.BECH32)
    except Bech32EncodingError:
        raise
    except Exception as e:
        raise Bech32EncodingError(f"Bech32 encoding failed: {e}") from e


def decode_encoded_private_key(private_key: str) -> bytes:
    """
    Decode an ed25519_sk Bech32 private key back to its raw bytes.

    Args:
        private_key: Bech32-encoded private key

    Returns:
        Raw 32-byte signing key

    Raises:
        Bech32EncodingError: If the checksum, prefix or payload size is wrong
    """
    if not private_key or not isinstance(private_key, str):
        raise Bech32EncodingError("Invalid Bech32 private key input")

    encoder = get_bech32_encoder()
    hrp, words, _ = encoder.bech32_decode(private_key.strip())
    if hrp is None or words is None:
        raise Bech32EncodingError("Invalid Bech32 private key")
    if hrp != PRIVATE_KEY_HRP:
        raise Bech32EncodingError(f"Unexpected Bech32 prefix: expected {PRIVATE_KEY_HRP}, got {hrp}")

    decoded = encoder.convertbits(words, 5, 8, False)
    if decoded is None or len(decoded) != PRIVATE_KEY_HEX_LENGTH // 2:
        raise Bech32EncodingError("Bech32 private key does not hold a 32-byte key")
    return bytes(decoded)


def cbor_hex_to_encoded_private_key(cbor_hex: str) -> str:
    """
    Convert CBOR hex to a Bech32-encoded private key.

    Args:
        cbor_hex: CBOR hex string ("5820" followed by 64 hex characters)

    Returns:
        Bech32-encoded private key (ed25519_sk1...)

    Raises:
        InvalidCborHexInputError: If the input is empty or not a string
        InvalidCborPrefixError: If the 5820 tag is missing
        InvalidKeyLengthError: If the payload is not 64 hex characters
        Bech32EncodingError: If hex decoding or Bech32 encoding fails
    """
    try:
        if not cbor_hex or not isinstance(cbor_hex, str):
            raise InvalidCborHexInputError("Invalid CBOR hex input")

        clean_hex = cbor_hex.strip()

        if not clean_hex.startswith(CBOR_BYTESTRING_32_PREFIX):
            raise InvalidCborPrefixError(
                f"CBOR hex must start with '{CBOR_BYTESTRING_32_PREFIX}' prefix for 32-byte private key"
            )

        raw_hex = clean_hex[len(CBOR_BYTESTRING_32_PREFIX) :]
        if len(raw_hex) != PRIVATE_KEY_HEX_LENGTH:
            raise InvalidKeyLengthError(PRIVATE_KEY_HEX_LENGTH, len(raw_hex))

        try:
            key_bytes = bytes.fromhex(raw_hex)
        except ValueError as e:
            raise Bech32EncodingError(f"Invalid hex in private key: {e}") from e
        # fromhex skips embedded whitespace
        if len(key_bytes) != PRIVATE_KEY_HEX_LENGTH // 2:
            raise Bech32EncodingError(f"Invalid hex in private key: decoded {len(key_bytes)} bytes")

        return encode_private_key_bytes(key_bytes)
    except KeyConverterError as e:
        raise e.with_context(ENCODE_ERROR_CONTEXT) from e
