"""
Pytest configuration for key converter tests

Fixtures for writing onchain key files in the formats cardano-cli and
other tooling produce.
"""

import json
from pathlib import Path

import pytest

from cardano_key_converter.encoder import get_bech32_encoder


CBOR_PREFIX = "5820"


def make_cbor_hex(byte_hex: str) -> str:
    """CBOR hex for a 32-byte key made of one repeated byte"""
    return CBOR_PREFIX + byte_hex * 32


@pytest.fixture
def cbor_hex():
    """Sample CBOR hex of a 32-byte signing key"""
    return make_cbor_hex("aa")


@pytest.fixture
def write_key_file(tmp_path: Path):
    """Write key file content to a temporary file and return its path"""

    def _write(content, name: str = "payment.skey") -> Path:
        path = tmp_path / name
        if isinstance(content, (dict, list)):
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_key_file(write_key_file):
    """Key file in the cardano-cli JSON envelope format"""
    return write_key_file(
        {
            "type": "PaymentSigningKeyShelley_ed25519",
            "description": "Payment Signing Key",
            "cborHex": make_cbor_hex("ee"),
        }
    )


@pytest.fixture(autouse=True)
def reset_bech32_encoder():
    """Drop the memoized encoder so each test starts from a cold cache"""
    get_bech32_encoder.cache_clear()
    yield
    get_bech32_encoder.cache_clear()
