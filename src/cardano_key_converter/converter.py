"""
Cardano Key Converter

Converts onchain (cardano-cli) private key files to offchain Bech32 private
keys and uses them to build a wallet client for address and UTXO queries.
"""

import logging
from pathlib import Path
from typing import List, Union

import pycardano as pc

from .chain_context import WalletClient, create_client
from .config import CardanoConfig
from .encoder import cbor_hex_to_encoded_private_key
from .errors import KeyConverterError
from .key_file import read_private_key_file


logger = logging.getLogger(__name__)

KeyPath = Union[str, Path]


def onchain_to_offchain_private_key(key_path: KeyPath) -> str:
    """
    Convert an onchain private key file to an offchain private key

    Args:
        key_path: Path to the onchain private key file

    Returns:
        Bech32-encoded private key (ed25519_sk1...)
    """
    try:
        cbor_hex = read_private_key_file(key_path)
        return cbor_hex_to_encoded_private_key(cbor_hex)
    except KeyConverterError as e:
        raise e.with_context("Error converting onchain to offchain private key") from e


class CardanoKeyConverter:
    """Converts onchain keys and queries the matching wallet"""

    def __init__(self, config: CardanoConfig):
        """
        Initialize converter

        Args:
            config: Network and BlockFrost settings for the wallet client
        """
        self.network = config.network
        self.blockfrost_api_url = config.blockfrost_api_url
        self.blockfrost_api_key = config.blockfrost_api_key

    def read_private_key_file(self, key_path: KeyPath) -> str:
        """Read a private key file and extract its CBOR hex"""
        return read_private_key_file(key_path)

    def cbor_hex_to_encoded_private_key(self, cbor_hex: str) -> str:
        """Convert CBOR hex to a Bech32-encoded private key"""
        return cbor_hex_to_encoded_private_key(cbor_hex)

    def onchain_to_offchain_private_key(self, key_path: KeyPath) -> str:
        """Convert an onchain private key file to an offchain private key"""
        return onchain_to_offchain_private_key(key_path)

    def create_client_with_private_key(self, key_path: KeyPath) -> WalletClient:
        """
        Create a wallet client with the converted private key selected

        Args:
            key_path: Path to the onchain private key file

        Returns:
            Wallet client with the wallet selected
        """
        try:
            client = create_client(self.blockfrost_api_url, self.blockfrost_api_key, self.network)
            private_key = self.onchain_to_offchain_private_key(key_path)
            client.select_wallet(private_key)
            return client
        except KeyConverterError as e:
            raise e.with_context("Error creating wallet client with private key") from e

    def get_wallet_address(self, key_path: KeyPath) -> str:
        """
        Get wallet address from private key file

        Args:
            key_path: Path to the onchain private key file

        Returns:
            Wallet address
        """
        try:
            client = self.create_client_with_private_key(key_path)
            return client.wallet_address()
        except KeyConverterError as e:
            raise e.with_context("Error getting wallet address") from e

    def get_wallet_utxos(self, key_path: KeyPath) -> List[pc.UTxO]:
        """
        Get UTXOs for the wallet from private key file

        Args:
            key_path: Path to the onchain private key file

        Returns:
            List of UTXOs at the wallet address
        """
        try:
            client = self.create_client_with_private_key(key_path)
            address = client.wallet_address()
            utxos = client.unspent_outputs_at(address)
        except KeyConverterError as e:
            raise e.with_context("Error getting wallet UTXOs") from e

        logger.info(f"Found {len(utxos)} UTXOs at {address}")
        return utxos

