import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import ContractLogicError, TransactionNotFound, Web3RPCError

from prtfaucet import config
from prtfaucet.abi import TOKEN_ABI

logger = logging.getLogger(__name__)


def revert_reason(exc: Exception) -> str | None:
    """Human readable reason from a revert or RPC error, if the node gave one."""
    if isinstance(exc, (ContractLogicError, Web3RPCError)):
        return exc.message or str(exc) or None
    return None


class TokenClient:
    """
    Thin wrapper over one deployed PRT contract.

    ``account`` is the signer used for server-side writes (the faucet key).
    Wallet-signed writes go through ``build_call`` and a wallet connector
    instead, so the dApp can use a client without any key.
    """

    def __init__(self, w3: Web3, token_address: str, account: LocalAccount | None = None):
        self.w3 = w3
        self.address = Web3.to_checksum_address(token_address)
        self.contract = w3.eth.contract(address=self.address, abi=TOKEN_ABI)
        self.account = account

    @classmethod
    def from_env(cls, private_key_var: str | None = "FAUCET_PRIVATE_KEY") -> "TokenClient":
        w3 = Web3(Web3.HTTPProvider(config.require("RPC_URL")))
        account = Account.from_key(config.require(private_key_var)) if private_key_var else None
        client = cls(w3, config.require("TOKEN_CONTRACT_ADDRESS"), account)
        if account is not None:
            logger.info("Token client ready | token=%s signer=%s", client.address, account.address)
        return client

    # reads

    def name(self) -> str:
        return self.contract.functions.name().call()

    def symbol(self) -> str:
        return self.contract.functions.symbol().call()

    def decimals(self) -> int:
        return self.contract.functions.decimals().call()

    def owner(self) -> str:
        return Web3.to_checksum_address(self.contract.functions.owner().call())

    def balance_of(self, address: str) -> int:
        return self.contract.functions.balanceOf(Web3.to_checksum_address(address)).call()

    def gas_price(self) -> int:
        return self.w3.eth.gas_price

    # writes

    def build_call(self, function_name: str, args: list, sender: str, gas_price: int | None = None) -> dict:
        fn = getattr(self.contract.functions, function_name)(*args)
        params = {
            "from": sender,
            "nonce": self.w3.eth.get_transaction_count(sender, "pending"),
        }
        if gas_price is not None:
            params["gasPrice"] = gas_price
        return fn.build_transaction(params)

    def send_signed(self, tx: dict, account: LocalAccount) -> str:
        signed = account.sign_transaction(tx)
        return Web3.to_hex(self.w3.eth.send_raw_transaction(signed.raw_transaction))

    def transfer(self, to: str, amount: int, gas_price: int | None = None) -> str:
        if self.account is None:
            raise RuntimeError("FAUCET_PRIVATE_KEY is not set")
        tx = self.build_call("transfer", [Web3.to_checksum_address(to), amount], self.account.address, gas_price)
        return self.send_signed(tx, self.account)

    def receipt_status(self, tx_hash: str) -> int | None:
        """1 = success, 0 = reverted, None = not mined yet."""
        try:
            receipt = self.w3.eth.get_transaction_receipt(tx_hash)
        except TransactionNotFound:
            return None
        return receipt["status"]
