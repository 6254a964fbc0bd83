"""
Key Converter Configuration

Explicit converter configuration plus environment-backed settings.
Settings load from environment variables or a .env file.
"""

from enum import Enum

import pycardano as pc
from blockfrost import ApiUrls
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class CardanoNetwork(str, Enum):
    """Cardano networks supported by the wallet client"""

    MAINNET = "Mainnet"
    PREPROD = "Preprod"
    PREVIEW = "Preview"

    @property
    def cardano_network(self) -> pc.Network:
        """PyCardano network used for address construction"""
        return pc.Network.MAINNET if self is CardanoNetwork.MAINNET else pc.Network.TESTNET

    @property
    def default_blockfrost_url(self) -> str:
        """BlockFrost base URL used when no endpoint is configured"""
        if self is CardanoNetwork.MAINNET:
            return ApiUrls.mainnet.value
        if self is CardanoNetwork.PREVIEW:
            return ApiUrls.preview.value
        return ApiUrls.preprod.value


class CardanoConfig(BaseModel):
    """
    Configuration for CardanoKeyConverter

    Only the wallet client uses these values. Key conversion works with
    empty placeholders.
    """

    network: CardanoNetwork = CardanoNetwork.MAINNET
    blockfrost_api_url: str = ""
    blockfrost_api_key: str = ""


class Settings(BaseSettings):
    """Key converter settings loaded from environment variables"""

    network: CardanoNetwork = CardanoNetwork.PREPROD
    blockfrost_api_url: str = ""
    blockfrost_api_key: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    def to_cardano_config(self) -> CardanoConfig:
        """Build the explicit converter configuration from these settings"""
        return CardanoConfig(
            network=self.network,
            blockfrost_api_url=self.blockfrost_api_url,
            blockfrost_api_key=self.blockfrost_api_key,
        )
