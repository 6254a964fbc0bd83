"""
Key File Reader

Locates an onchain private key file and extracts the CBOR hex of the key.

Accepted formats:
    - cardano-cli JSON envelope: {"type": "...", "description": "...", "cborHex": "5820..."}
    - JSON object with only a cborHex field
    - JSON document that is a bare quoted hex string
    - Plain text file containing only the hex string
"""

import json
import logging
import re
from pathlib import Path
from typing import Union

from .errors import (
    KeyConverterError,
    KeyFileNotFoundError,
    KeyFileReadError,
    UnrecognizedKeyFormatError,
)


logger = logging.getLogger(__name__)

READ_ERROR_CONTEXT = "Error reading private key file"

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")


def is_valid_hex(value: str) -> bool:
    """Check that a string is non-empty, contiguous hex digits of even length"""
    return bool(HEX_PATTERN.match(value)) and len(value) % 2 == 0


def extract_cbor_hex(content: str) -> str:
    """
    Extract the CBOR hex string from the text content of a key file.

    JSON is tried first. The raw hex fallback applies when the content is
    not JSON at all, or is hex made only of digits that parsed as a number;
    valid JSON of any other unknown shape is rejected.

    Args:
        content: Full text content of the key file

    Returns:
        CBOR hex string as found in the file

    Raises:
        UnrecognizedKeyFormatError: If the content matches no accepted format
    """
    try:
        key_data = json.loads(content)
    except (ValueError, RecursionError):
        # JSONDecodeError is a ValueError; oversized integers and deep nesting also fail here
        trimmed_content = content.strip()
        if is_valid_hex(trimmed_content):
            logger.debug("Key file detected as raw hex text")
            return trimmed_content
        raise UnrecognizedKeyFormatError("File content is neither valid JSON nor valid hex string")

    if isinstance(key_data, dict) and "cborHex" in key_data:
        cbor_hex = key_data["cborHex"]
        if not isinstance(cbor_hex, str) or not cbor_hex:
            raise UnrecognizedKeyFormatError("cborHex field must be a non-empty string")
        logger.debug(f"Key file detected as JSON envelope (type: {key_data.get('type', 'n/a')})")
        return cbor_hex

    if isinstance(key_data, str) and key_data:
        logger.debug("Key file detected as JSON string")
        return key_data

    # Hex made only of digits also parses as a JSON number
    if isinstance(key_data, (int, float)) and not isinstance(key_data, bool) and is_valid_hex(content.strip()):
        logger.debug("Key file detected as raw hex text")
        return content.strip()

    raise UnrecognizedKeyFormatError("Unable to extract CBOR hex from JSON structure")


def read_private_key_file(key_path: Union[str, Path]) -> str:
    """
    Read a private key file and extract its CBOR hex.

    Args:
        key_path: Path to the private key file

    Returns:
        The CBOR hex string

    Raises:
        KeyFileNotFoundError: If the path does not exist
        KeyFileReadError: If the file exists but cannot be read as text
        UnrecognizedKeyFormatError: If the content matches no accepted format
    """
    try:
        path = Path(key_path)
        if not path.exists():
            raise KeyFileNotFoundError(str(key_path))

        try:
            file_content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise KeyFileReadError(str(e)) from e

        return extract_cbor_hex(file_content)
    except KeyConverterError as e:
        raise e.with_context(READ_ERROR_CONTEXT) from e
