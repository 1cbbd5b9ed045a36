import logging
from typing import Any

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from prtfaucet import config
from prtfaucet.chain import TokenClient
from prtfaucet.dapp.assets import add_token_to_wallet
from prtfaucet.dapp.forms import RewardForm, TransferForm
from prtfaucet.dapp.reads import TokenReads
from prtfaucet.dapp.session import LocalKeyConnector, WalletConnector, WalletSession
from prtfaucet.dapp.views import Page, render_page
from prtfaucet.handlers import install_error_handlers

logger = logging.getLogger(__name__)

router = APIRouter()


class DApp:
    """Everything one dApp user sees: session, cached reads and both forms."""

    def __init__(
        self,
        client: TokenClient,
        session: WalletSession,
        reads: TokenReads | None = None,
        claim_page_url: str = config.CLAIM_PAGE_URL,
        explorer_url: str = config.EXPLORER_URL,
    ):
        self.client = client
        self.session = session
        self.reads = reads or TokenReads(client)
        self.claim_page_url = claim_page_url
        self.reward = RewardForm(client, session, self.reads, explorer_url)
        self.transfer = TransferForm(client, session, explorer_url)
        self.asset_message: str | None = None

    def page(self) -> Page:
        self.reward.poll()
        self.transfer.poll()
        return render_page(
            self.session,
            self.reads,
            self.reward,
            self.transfer,
            self.claim_page_url,
            self.asset_message,
        )


class ConnectReq(BaseModel):
    connector_id: str | None = None


class RewardReq(BaseModel):
    recipient: str | None = None
    amount: Any = None


class TransferReq(BaseModel):
    recipient: str
    amount: Any = None


def _dapp(request: Request) -> DApp:
    return request.app.state.dapp


@router.get("/", response_model=Page)
def page(request: Request):
    return _dapp(request).page()


@router.post("/connect", response_model=Page)
def connect(req: ConnectReq, request: Request):
    dapp = _dapp(request)
    dapp.session.connect(req.connector_id)
    return dapp.page()


@router.post("/disconnect", response_model=Page)
def disconnect(request: Request):
    dapp = _dapp(request)
    dapp.session.disconnect()
    dapp.reads.cache.clear()
    dapp.asset_message = None
    return dapp.page()


@router.post("/balance/refresh", response_model=Page)
def refresh_balance(request: Request):
    dapp = _dapp(request)
    dapp.reads.refetch_balance(dapp.session.address)
    return dapp.page()


@router.post("/watch-asset", response_model=Page)
def watch_asset(request: Request):
    dapp = _dapp(request)
    dapp.asset_message = add_token_to_wallet(dapp.session, dapp.reads.contract)
    return dapp.page()


@router.post("/reward", response_model=Page)
def reward(req: RewardReq, request: Request):
    dapp = _dapp(request)
    dapp.reward.submit(req.recipient, req.amount)
    return dapp.page()


@router.post("/transfer", response_model=Page)
def transfer(req: TransferReq, request: Request):
    dapp = _dapp(request)
    dapp.transfer.submit(req.recipient, req.amount)
    return dapp.page()


def create_dapp(dapp: DApp) -> FastAPI:
    app = FastAPI(title="PRT DApp")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.state.dapp = dapp
    app.include_router(router)
    return app


def from_env() -> DApp:
    client = TokenClient.from_env(private_key_var=None)
    connectors: list[WalletConnector] = [LocalKeyConnector(client.w3, config.require("DAPP_PRIVATE_KEY"))]
    return DApp(client, WalletSession(connectors))


def run():
    uvicorn.run(create_dapp(from_env()), host="0.0.0.0", port=config.DAPP_PORT)


if __name__ == "__main__":
    run()
