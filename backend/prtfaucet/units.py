from decimal import Decimal, InvalidOperation

from web3 import Web3

from prtfaucet.config import TOKEN_DECIMALS

_PLAIN = frozenset("0123456789.")


def parse_units(amount) -> int:
    """
    "1.5" -> 1500000000000000000 (PRT has 18 decimals, same scale as ether).
    Accepts a plain non-negative decimal string or a JSON number; raises
    ValueError for signs, exponents, non-ASCII digits, NaN/Infinity and
    more fractional digits than the token has.
    """
    if isinstance(amount, bool) or not isinstance(amount, (str, int, float)):
        raise ValueError(f"invalid amount: {amount!r}")

    text = str(amount).strip()
    if not text or not set(text) <= _PLAIN:
        raise ValueError(f"invalid decimal amount: {amount!r}")
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"invalid decimal amount: {amount!r}")

    if not value.is_finite() or -value.as_tuple().exponent > TOKEN_DECIMALS:
        raise ValueError(f"too many decimals for {TOKEN_DECIMALS}-decimal token: {amount!r}")

    return Web3.to_wei(value, "ether")


def format_units(value: int) -> str:
    text = format(Decimal(Web3.from_wei(value, "ether")).normalize(), "f")
    return text if "." in text else f"{text}.0"
