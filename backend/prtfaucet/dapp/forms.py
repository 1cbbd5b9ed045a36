import logging
from enum import Enum

from prtfaucet.chain import TokenClient, revert_reason
from prtfaucet.config import EXPLORER_URL
from prtfaucet.crypto import is_address, same_address, to_checksum
from prtfaucet.dapp.reads import TokenReads
from prtfaucet.dapp.session import WalletSession
from prtfaucet.errors import (
    FaucetError,
    InvalidAddress,
    InvalidAmount,
    UnauthorizedOwner,
    WalletRejection,
)
from prtfaucet.units import parse_units

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    CONFIRMING = "confirming"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class TransactionForm:
    """
    One wallet-signed contract call and the life of its last submission:

        idle -> pending -> confirming -> confirmed | failed

    Pending covers building the call and the wallet signing it; confirming
    starts once a hash exists. Errors are stored on ``error`` for display
    rather than raised. A sent transaction cannot be cancelled.
    """

    function_name = ""

    def __init__(self, client: TokenClient, session: WalletSession, explorer_url: str = EXPLORER_URL):
        self.client = client
        self.session = session
        self.explorer_url = explorer_url.rstrip("/")
        self.state = SubmissionState.IDLE
        self.tx_hash: str | None = None
        self.error: FaucetError | None = None

    @property
    def busy(self) -> bool:
        return self.state == SubmissionState.PENDING

    @property
    def enabled(self) -> bool:
        return not self.busy

    @property
    def explorer_link(self) -> str | None:
        if not self.tx_hash:
            return None
        return f"{self.explorer_url}/tx/{self.tx_hash}"

    def check(self, recipient: str) -> None:
        """Client-side gate run before anything is sent to the wallet."""

    def submit(self, recipient: str | None, amount) -> str | None:
        self.error = None
        self.tx_hash = None
        self.state = SubmissionState.IDLE

        try:
            recipient, units = self._validate(recipient, amount)
            self.check(recipient)
        except FaucetError as exc:
            self.error = exc
            return None

        self.state = SubmissionState.PENDING
        try:
            tx = self.client.build_call(self.function_name, [recipient, units], self.session.address)
            tx_hash = self.session.connector.send_transaction(tx)
        except WalletRejection as exc:
            return self._fail(exc)
        except Exception as exc:
            logger.warning("%s rejected: %s", self.function_name, exc)
            return self._fail(WalletRejection(revert_reason(exc) or str(exc)))

        self.tx_hash = tx_hash
        self.state = SubmissionState.CONFIRMING
        logger.info("%s sent: %s", self.function_name, tx_hash)
        return tx_hash

    def poll(self) -> SubmissionState:
        """Check for a receipt once, without blocking. An RPC error keeps it confirming."""
        if self.state != SubmissionState.CONFIRMING:
            return self.state
        try:
            status = self.client.receipt_status(self.tx_hash)
        except Exception as exc:
            logger.warning("Receipt lookup for %s failed: %s", self.tx_hash, exc)
            return self.state
        self._settle(status)
        return self.state

    def _validate(self, recipient: str | None, amount) -> tuple[str, int]:
        if not self.session.is_connected or self.session.connector is None:
            raise WalletRejection("Wallet is not connected.")
        if not is_address(recipient):
            raise InvalidAddress()
        try:
            units = parse_units(amount)
        except ValueError:
            raise InvalidAmount("Enter a valid amount.")
        if units <= 0:
            raise InvalidAmount("Enter a valid amount.")
        return to_checksum(recipient), units

    def _settle(self, status: int | None) -> None:
        if status is None:
            return
        if status == 1:
            self.state = SubmissionState.CONFIRMED
        else:
            self.state = SubmissionState.FAILED
            self.error = WalletRejection("Transaction reverted.")

    def _fail(self, exc: FaucetError) -> None:
        self.state = SubmissionState.FAILED
        self.error = exc
        return None


class RewardForm(TransactionForm):
    """
    ``rewardUser`` for the contract owner. The owner comparison is only a
    hint for the UI; the contract enforces the real check.
    """

    function_name = "rewardUser"

    def __init__(self, client: TokenClient, session: WalletSession, reads: TokenReads, explorer_url: str = EXPLORER_URL):
        super().__init__(client, session, explorer_url)
        self.reads = reads

    @property
    def enabled(self) -> bool:
        return not self.busy and self.reads.owner() is not None

    def submit(self, recipient: str | None, amount) -> str | None:
        # "Reward Me": defaults to the connected wallet
        return super().submit(recipient or self.session.address, amount)

    def check(self, recipient: str) -> None:
        owner = self.reads.owner()
        if owner is None:
            raise UnauthorizedOwner("Error: contract owner is not loaded yet")
        if not same_address(self.session.address, owner):
            raise UnauthorizedOwner()


class TransferForm(TransactionForm):
    function_name = "transfer"
