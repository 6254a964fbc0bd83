"""
Wallet Client

Thin wrapper over a PyCardano BlockFrost chain context. Selects a wallet
from a Bech32 ed25519_sk private key and queries its address and UTXOs.
"""

import logging
from typing import List, Optional, Union

import pycardano as pc

from .config import CardanoNetwork
from .encoder import decode_encoded_private_key
from .errors import WalletClientError, WalletNotSelectedError


logger = logging.getLogger(__name__)


class WalletClient:
    """Wallet bound to a BlockFrost chain context"""

    def __init__(self, context: pc.ChainContext, network: CardanoNetwork):
        """
        Initialize wallet client

        Args:
            context: PyCardano chain context for chain queries
            network: Network the wallet addresses belong to
        """
        self.context = context
        self.network = network
        self.signing_key: Optional[pc.PaymentSigningKey] = None

    def select_wallet(self, private_key: str) -> None:
        """
        Select the wallet from a Bech32 private key

        Args:
            private_key: Bech32-encoded private key (ed25519_sk1...)
        """
        key_bytes = decode_encoded_private_key(private_key)
        self.signing_key = pc.PaymentSigningKey(key_bytes)

    def wallet_address(self) -> str:
        """
        Get the enterprise address of the selected wallet

        Returns:
            Bech32 address string
        """
        if self.signing_key is None:
            raise WalletNotSelectedError("No wallet selected")

        address = pc.Address(
            payment_part=self.signing_key.to_verification_key().hash(),
            network=self.network.cardano_network,
        )
        return str(address)

    def unspent_outputs_at(self, address: Union[str, pc.Address]) -> List[pc.UTxO]:
        """
        Get UTXOs at an address

        Args:
            address: Address to query

        Returns:
            List of UTXOs
        """
        try:
            return self.context.utxos(address)
        except Exception as e:
            raise WalletClientError(f"Failed to fetch UTXOs: {e}") from e


def create_client(endpoint_url: str, api_key: str, network: Union[str, CardanoNetwork]) -> WalletClient:
    """
    Create a wallet client backed by BlockFrost

    Args:
        endpoint_url: BlockFrost API URL (network default when empty)
        api_key: BlockFrost project id
        network: Network name ("Mainnet", "Preprod" or "Preview")

    Returns:
        Wallet client without a selected wallet
    """
    try:
        cardano_network = CardanoNetwork(network)
    except ValueError as e:
        raise WalletClientError(f"Unknown network: {network}") from e

    base_url = endpoint_url or cardano_network.default_blockfrost_url
    logger.info(f"Creating BlockFrost chain context for {cardano_network.value} at {base_url}")

    try:
        context = pc.BlockFrostChainContext(project_id=api_key, base_url=base_url)
    except Exception as e:
        raise WalletClientError(f"Failed to create chain context: {e}") from e

    return WalletClient(context, cardano_network)
