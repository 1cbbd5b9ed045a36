from unittest.mock import MagicMock

import pytest
from eth_account import Account
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import ContractLogicError, TransactionNotFound

from fakes import TOKEN, USER
from prtfaucet.chain import TokenClient, revert_reason

KEY = "0x" + "11" * 32


def _client(account=None):
    w3 = MagicMock()
    contract = w3.eth.contract.return_value
    return TokenClient(w3, TOKEN.lower(), account), w3, contract


def test_transfer_builds_signs_and_sends():
    account = Account.from_key(KEY)
    client, w3, contract = _client(account)
    w3.eth.get_transaction_count.return_value = 7
    contract.functions.transfer.return_value.build_transaction.return_value = {
        "to": Web3.to_checksum_address(TOKEN),
        "value": 0,
        "gas": 60000,
        "gasPrice": 5,
        "nonce": 7,
        "chainId": 11155111,
        "data": "0x",
    }
    w3.eth.send_raw_transaction.return_value = HexBytes(b"\xab" * 32)

    tx_hash = client.transfer(USER, 10**18, gas_price=5)

    assert tx_hash == "0x" + "ab" * 32
    contract.functions.transfer.assert_called_once_with(Web3.to_checksum_address(USER), 10**18)
    params = contract.functions.transfer.return_value.build_transaction.call_args[0][0]
    assert params == {"from": account.address, "nonce": 7, "gasPrice": 5}
    w3.eth.get_transaction_count.assert_called_once_with(account.address, "pending")
    w3.eth.send_raw_transaction.assert_called_once()


def test_transfer_without_key():
    client, _, _ = _client()
    with pytest.raises(RuntimeError):
        client.transfer(USER, 1)


def test_reads():
    client, w3, contract = _client()
    contract.functions.name.return_value.call.return_value = "Phillip Reward Token"
    contract.functions.owner.return_value.call.return_value = USER
    contract.functions.balanceOf.return_value.call.return_value = 42
    w3.eth.gas_price = 3

    assert client.address == Web3.to_checksum_address(TOKEN)
    assert client.name() == "Phillip Reward Token"
    assert client.owner().lower() == USER
    assert client.balance_of(USER) == 42
    assert client.gas_price() == 3


def test_receipt_status():
    client, w3, _ = _client()
    w3.eth.get_transaction_receipt.side_effect = TransactionNotFound("missing")
    assert client.receipt_status("0x01") is None

    w3.eth.get_transaction_receipt.side_effect = None
    w3.eth.get_transaction_receipt.return_value = {"status": 0}
    assert client.receipt_status("0x01") == 0


def test_revert_reason():
    assert revert_reason(ContractLogicError("execution reverted: nope")) == "execution reverted: nope"
    assert revert_reason(TimeoutError("slow")) is None
