import logging
from typing import Any, Protocol

from eth_account import Account
from web3 import Web3

from prtfaucet.chain import revert_reason
from prtfaucet.errors import WalletRejection

logger = logging.getLogger(__name__)


class WalletConnector(Protocol):
    """What the dApp needs from a wallet: accounts, requests, signed sends."""

    id: str
    name: str

    def connect(self) -> str: ...

    def disconnect(self) -> None: ...

    def request(self, method: str, params: Any = None) -> Any: ...

    def send_transaction(self, tx: dict) -> str: ...


class LocalKeyConnector:
    """
    Wallet backed by a private key held by this process.
    Signs with eth-account and broadcasts through the given web3 instance.
    """

    id = "localKey"
    name = "Local Key"

    def __init__(self, w3: Web3, private_key: str):
        self.w3 = w3
        self.account = Account.from_key(private_key)
        self.connected = False
        self.watched_assets: list[dict] = []

    def connect(self) -> str:
        self.connected = True
        return self.account.address

    def disconnect(self) -> None:
        self.connected = False

    def request(self, method: str, params: Any = None) -> Any:
        if method in ("eth_accounts", "eth_requestAccounts"):
            if method == "eth_requestAccounts":
                self.connect()
            return [self.account.address] if self.connected else []

        if method == "wallet_watchAsset":
            options = (params or {}).get("options", {})
            if options not in self.watched_assets:
                self.watched_assets.append(options)
            return True

        raise WalletRejection(f"Unsupported wallet method: {method}")

    def send_transaction(self, tx: dict) -> str:
        if not self.connected:
            raise WalletRejection("Wallet is not connected.")
        try:
            signed = self.account.sign_transaction(tx)
            return Web3.to_hex(self.w3.eth.send_raw_transaction(signed.raw_transaction))
        except Exception as exc:
            logger.warning("Wallet send failed: %s", exc)
            raise WalletRejection(revert_reason(exc) or str(exc)) from exc


class WalletSession:
    """
    Connected/disconnected state of the dApp. Only the connector changes
    it; everything else reads ``address`` and ``is_connected``.
    """

    def __init__(self, connectors: list[WalletConnector]):
        self.connectors = list(connectors)
        self.connector: WalletConnector | None = None
        self.address: str | None = None

    @property
    def is_connected(self) -> bool:
        return self.address is not None

    def connect(self, connector_id: str | None = None) -> str:
        connector = self._find(connector_id)
        address = Web3.to_checksum_address(connector.connect())
        self.connector = connector
        self.address = address
        logger.info("Wallet connected via %s: %s", connector.name, address)
        return address

    def disconnect(self) -> None:
        if self.connector is not None:
            self.connector.disconnect()
        self.connector = None
        self.address = None

    def snapshot(self) -> dict:
        return {"address": self.address, "isConnected": self.is_connected}

    def _find(self, connector_id: str | None) -> WalletConnector:
        if not self.connectors:
            raise WalletRejection("No wallet is installed.")
        if connector_id is None:
            return self.connectors[0]
        for c in self.connectors:
            if c.id == connector_id:
                return c
        raise WalletRejection(f"Unknown wallet connector: {connector_id}")
