import logging
import os

from dotenv import load_dotenv

load_dotenv()

RPC_URL = os.getenv("RPC_URL")
FAUCET_PRIVATE_KEY = os.getenv("FAUCET_PRIVATE_KEY")
TOKEN_CONTRACT_ADDRESS = os.getenv("TOKEN_CONTRACT_ADDRESS")

PORT = int(os.getenv("PORT", "3000"))
EXPLORER_URL = os.getenv("EXPLORER_URL", "https://sepolia.etherscan.io")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# dApp
DAPP_PRIVATE_KEY = os.getenv("DAPP_PRIVATE_KEY")
DAPP_PORT = int(os.getenv("DAPP_PORT", "5173"))
CLAIM_PAGE_URL = os.getenv("CLAIM_PAGE_URL", f"http://localhost:{PORT}")

TOKEN_SYMBOL = "PRT"
TOKEN_DECIMALS = 18

# Claim limits in whole tokens, inclusive.
CLAIM_MIN_AMOUNT = 1
CLAIM_MAX_AMOUNT = 1000

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def require(name: str) -> str:
    value = os.getenv(name) or globals().get(name)
    if not value:
        raise RuntimeError(f"{name} is not set")
    return value
