import logging

from web3 import Web3

from prtfaucet.chain import TokenClient, revert_reason
from prtfaucet.config import CLAIM_MAX_AMOUNT, CLAIM_MIN_AMOUNT
from prtfaucet.crypto import is_address, to_checksum
from prtfaucet.errors import InvalidAddress, InvalidAmount, SubmissionFailure
from prtfaucet.units import parse_units

logger = logging.getLogger(__name__)


def validate_claim(address, amount) -> tuple[str, int]:
    """
    Returns (checksum recipient, amount in base units).
    Address is checked first; nothing here touches the network.
    """
    if not is_address(address):
        raise InvalidAddress()

    try:
        units = parse_units(amount)
    except ValueError:
        raise InvalidAmount()

    if units < Web3.to_wei(CLAIM_MIN_AMOUNT, "ether") or units > Web3.to_wei(CLAIM_MAX_AMOUNT, "ether"):
        raise InvalidAmount()

    return to_checksum(address), units


def submit_claim(client: TokenClient, address, amount) -> str:
    """
    Broadcast one faucet transfer and return its hash without waiting for
    a receipt. The faucet applies no cooldown or dedup: every valid request
    is sent.
    """
    recipient, units = validate_claim(address, amount)

    try:
        gas_price = client.gas_price()
        tx_hash = client.transfer(recipient, units, gas_price=gas_price)
    except Exception as exc:
        logger.exception("Claiming failed for %s", recipient)
        raise SubmissionFailure(revert_reason(exc)) from exc

    logger.info("Transaction sent. Hash: %s", tx_hash)
    return tx_hash
