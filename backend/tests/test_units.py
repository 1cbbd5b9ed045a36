import pytest

from prtfaucet.claims import validate_claim
from prtfaucet.crypto import is_address, same_address, to_checksum
from prtfaucet.errors import InvalidAddress, InvalidAmount
from prtfaucet.units import format_units, parse_units


def test_parse_units():
    assert parse_units("1") == 10**18
    assert parse_units("1.5") == 15 * 10**17
    assert parse_units(".25") == 25 * 10**16
    assert parse_units("0.000000000000000001") == 1
    assert parse_units(" 7 ") == 7 * 10**18
    assert parse_units(25) == 25 * 10**18
    assert parse_units(2.5) == 25 * 10**17


@pytest.mark.parametrize("bad", ["", ".", "-1", "1e18", "1,5", "0x10", "0.0000000000000000001", "1..2", "٥", "NaN", None, [1], True])
def test_parse_units_rejects(bad):
    with pytest.raises(ValueError):
        parse_units(bad)


def test_format_units():
    assert format_units(10**18) == "1.0"
    assert format_units(15 * 10**17) == "1.5"
    assert format_units(0) == "0.0"
    assert format_units(12 * 10**18) == "12.0"
    assert format_units(1) == "0.000000000000000001"


def test_address_checks():
    good = to_checksum("0x" + "ab" * 20)
    i = next(i for i, ch in enumerate(good) if i > 1 and ch.isalpha())
    broken = good[:i] + good[i].swapcase() + good[i + 1:]

    assert is_address("0x" + "ab" * 20)
    assert is_address(good)
    assert not is_address(broken)
    assert not is_address("0x" + "aB" * 20)
    assert is_address("0x" + "AB" * 20)
    assert not is_address("0xInvalid")
    assert not is_address(None)
    assert same_address("0x" + "ab" * 20, "0x" + "AB" * 20)
    assert not same_address(None, "0x" + "ab" * 20)


def test_validate_claim_bounds():
    addr = "0x" + "cd" * 20
    assert validate_claim(addr, "1")[1] == 10**18
    assert validate_claim(addr, "1000")[1] == 1000 * 10**18
    with pytest.raises(InvalidAmount):
        validate_claim(addr, "1000.5")
    with pytest.raises(InvalidAddress):
        validate_claim("", "10")
