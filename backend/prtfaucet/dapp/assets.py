import logging

from prtfaucet.config import TOKEN_DECIMALS, TOKEN_SYMBOL
from prtfaucet.dapp.session import WalletSession

logger = logging.getLogger(__name__)


def watch_asset_params(token_address: str) -> dict:
    return {
        "type": "ERC20",
        "options": {
            "address": token_address,
            "symbol": TOKEN_SYMBOL,
            "decimals": TOKEN_DECIMALS,
        },
    }


def add_token_to_wallet(session: WalletSession, token_address: str) -> str:
    """Ask the wallet to list PRT; returns the message shown on the card."""
    if session.connector is None:
        return "No wallet is installed."

    try:
        added = session.connector.request("wallet_watchAsset", watch_asset_params(token_address))
    except Exception:
        logger.exception("wallet_watchAsset failed")
        return "An error occurred."

    if added:
        return f"Success! {TOKEN_SYMBOL} token added to your wallet."
    return "Token adding was cancelled."
