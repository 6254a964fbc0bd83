"""
Cardano Key Converter

Converts cardano-cli (onchain) private key files into Bech32 ed25519_sk
(offchain) private keys, with an optional BlockFrost wallet client for
address and UTXO lookups.
"""

from .chain_context import WalletClient, create_client
from .config import CardanoConfig, CardanoNetwork, Settings
from .converter import CardanoKeyConverter, onchain_to_offchain_private_key
from .encoder import cbor_hex_to_encoded_private_key, decode_encoded_private_key
from .errors import (
    Bech32EncodingError,
    InvalidCborHexInputError,
    InvalidCborPrefixError,
    InvalidKeyLengthError,
    KeyConverterError,
    KeyFileNotFoundError,
    KeyFileReadError,
    UnrecognizedKeyFormatError,
    WalletClientError,
    WalletNotSelectedError,
)
from .key_file import read_private_key_file


__all__ = [
    "CardanoKeyConverter",
    "CardanoConfig",
    "CardanoNetwork",
    "Settings",
    "WalletClient",
    "create_client",
    "read_private_key_file",
    "cbor_hex_to_encoded_private_key",
    "decode_encoded_private_key",
    "onchain_to_offchain_private_key",
    "KeyConverterError",
    "KeyFileNotFoundError",
    "KeyFileReadError",
    "UnrecognizedKeyFormatError",
    "InvalidCborHexInputError",
    "InvalidCborPrefixError",
    "InvalidKeyLengthError",
    "Bech32EncodingError",
    "WalletClientError",
    "WalletNotSelectedError",
]
