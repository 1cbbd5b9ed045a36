import logging

from fastapi import APIRouter, Depends

from prtfaucet.chain import TokenClient
from prtfaucet.crypto import is_address, to_checksum
from prtfaucet.deps import get_token_client
from prtfaucet.errors import ChainUnavailable, InvalidAddress
from prtfaucet.schemas import Balance, TokenInfo
from prtfaucet.units import format_units

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=TokenInfo)
def token_info(client: TokenClient = Depends(get_token_client)):
    try:
        return TokenInfo(
            contract=client.address,
            name=client.name(),
            symbol=client.symbol(),
            decimals=client.decimals(),
            owner=client.owner(),
        )
    except Exception:
        logger.exception("Token metadata read failed")
        raise ChainUnavailable()


@router.get("/balance/{address}", response_model=Balance)
def balance(address: str, client: TokenClient = Depends(get_token_client)):
    if not is_address(address):
        raise InvalidAddress()

    try:
        raw = client.balance_of(address)
    except Exception:
        logger.exception("Balance read failed for %s", address)
        raise ChainUnavailable()

    return Balance(address=to_checksum(address), raw=str(raw), formatted=format_units(raw))
