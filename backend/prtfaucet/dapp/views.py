from pydantic import BaseModel

from prtfaucet.config import TOKEN_SYMBOL
from prtfaucet.dapp.forms import RewardForm, SubmissionState, TransactionForm, TransferForm
from prtfaucet.dapp.reads import TokenReads
from prtfaucet.dapp.session import WalletSession
from prtfaucet.units import format_units

TITLE = f"PhillipCapital Reward Token ({TOKEN_SYMBOL}) DApp"
CONNECT_NOTICE = "Please connect your wallet to see token info and actions."


class Card(BaseModel):
    id: str
    title: str
    lines: list[str] = []
    actions: list[str] = []
    link: str | None = None
    state: str | None = None
    error: str | None = None
    enabled: bool = True


class Page(BaseModel):
    title: str
    session: dict
    cards: list[Card]
    notice: str | None = None


def wallet_status_card(session: WalletSession) -> Card:
    if session.is_connected:
        return Card(
            id="wallet",
            title="1. Wallet Status",
            lines=["Connected:", session.address],
            actions=["disconnect"],
        )
    return Card(
        id="wallet",
        title="1. Wallet Status",
        lines=["Please connect your wallet."],
        actions=[f"connect:{c.id}" for c in session.connectors],
    )


def token_info_card(reads: TokenReads, address: str) -> Card:
    balance = reads.balance(address)
    shown = format_units(balance) if balance is not None else "0"
    return Card(
        id="token",
        title="2. Token Info",
        lines=[
            f"Name: {reads.name() or ''}",
            f"Symbol: {reads.symbol() or ''}",
            f"Your {TOKEN_SYMBOL} Balance: {shown} {TOKEN_SYMBOL}",
        ],
        actions=["refresh-balance"],
    )


def add_token_card(message: str | None) -> Card:
    lines = [f"Add the Phillip Reward Token ({TOKEN_SYMBOL}) to your wallet."]
    if message:
        lines.append(message)
    return Card(id="add-token", title=f"3. Add {TOKEN_SYMBOL} to Wallet", lines=lines, actions=["watch-asset"])


def faucet_card(claim_page_url: str) -> Card:
    return Card(
        id="faucet",
        title=f"4. Claim {TOKEN_SYMBOL} Tokens",
        lines=[f"Need some {TOKEN_SYMBOL} to test? Get free tokens from our Claim Page."],
        link=claim_page_url,
    )


def _form_lines(form: TransactionForm) -> list[str]:
    lines = []
    if form.tx_hash:
        lines.append("Transaction Sent!")
    if form.state == SubmissionState.PENDING:
        lines.append("Confirming...")
    elif form.state == SubmissionState.CONFIRMING:
        lines.append("Waiting for confirmation...")
    elif form.state == SubmissionState.CONFIRMED:
        lines.append("Transaction Confirmed!")
    return lines


def form_card(form: TransactionForm, id: str, title: str, action: str) -> Card:
    return Card(
        id=id,
        title=title,
        lines=_form_lines(form),
        actions=[action],
        link=form.explorer_link,
        state=form.state.value,
        error=form.error.message if form.error else None,
        enabled=form.enabled,
    )


def render_page(
    session: WalletSession,
    reads: TokenReads,
    reward: RewardForm,
    transfer: TransferForm,
    claim_page_url: str,
    asset_message: str | None = None,
) -> Page:
    cards = [wallet_status_card(session)]
    if not session.is_connected:
        return Page(title=TITLE, session=session.snapshot(), cards=cards, notice=CONNECT_NOTICE)

    cards += [
        token_info_card(reads, session.address),
        add_token_card(asset_message),
        faucet_card(claim_page_url),
        form_card(reward, "reward", "5. Reward Me (Owner Only)", "reward"),
        form_card(transfer, "transfer", "6. Transfer Tokens", "transfer"),
    ]
    return Page(title=TITLE, session=session.snapshot(), cards=cards)
