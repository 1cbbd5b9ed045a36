from web3 import Web3


def is_address(value) -> bool:
    """
    Same rule the wallet uses: 0x + 40 hex chars, and if the string is
    mixed-case the EIP-55 checksum must match.
    """
    if not isinstance(value, str) or not Web3.is_address(value):
        return False
    body = value[2:] if value[:2].lower() == "0x" else value
    if body.lower() == body or body.upper() == body:
        return True
    return Web3.is_checksum_address(value)


def to_checksum(address: str) -> str:
    return Web3.to_checksum_address(address)


def same_address(a: str | None, b: str | None) -> bool:
    if not a or not b:
        return False
    return a.lower() == b.lower()
