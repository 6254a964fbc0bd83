"""
Key Converter CLI

Converts an onchain private key file and optionally shows the wallet address
and UTXOs. BlockFrost settings come from the environment or a .env file.
"""

import logging
from typing import Optional

import click
from dotenv import load_dotenv

from .config import CardanoNetwork, Settings
from .converter import CardanoKeyConverter
from .errors import KeyConverterError


logger = logging.getLogger(__name__)


@click.command()
@click.argument("key_path", type=click.Path(dir_okay=False))
@click.option("--address", "show_address", is_flag=True, help="Show the wallet address.")
@click.option("--utxos", "show_utxos", is_flag=True, help="Show the UTXOs at the wallet address.")
@click.option(
    "--network",
    type=click.Choice([n.value for n in CardanoNetwork]),
    default=None,
    help="Override the configured network.",
)
@click.option("--env-file", type=click.Path(dir_okay=False), default=None, help="Load settings from this .env file.")
def main(key_path: str, show_address: bool, show_utxos: bool, network: Optional[str], env_file: Optional[str]) -> None:
    """Convert an onchain private key file to an offchain ed25519_sk key."""
    load_dotenv(env_file)
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = settings.to_cardano_config()
    if network:
        config.network = CardanoNetwork(network)
    converter = CardanoKeyConverter(config)

    try:
        private_key = converter.onchain_to_offchain_private_key(key_path)
        click.echo(f"Converted private key: {private_key}")

        if show_address:
            click.echo(f"Wallet address: {converter.get_wallet_address(key_path)}")

        if show_utxos:
            utxos = converter.get_wallet_utxos(key_path)
            click.echo(f"UTXOs ({len(utxos)}):")
            for utxo in utxos:
                click.echo(f"  {utxo.input.transaction_id}#{utxo.input.index}: {utxo.output.amount}")
    except KeyConverterError as e:
        logger.error(f"Conversion failed for {key_path}: {e}")
        click.echo(f"Conversion failed: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
