from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from prtfaucet.config import CORS_ORIGINS, EXPLORER_URL, PORT
from prtfaucet.handlers import install_error_handlers
from prtfaucet.routes import claim, token

PUBLIC_DIR = Path(__file__).parent / "public"

app = FastAPI(title="PRT Faucet")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_error_handlers(app)

app.include_router(claim.router, tags=["claim"])
app.include_router(token.router, prefix="/token", tags=["token"])


@app.get("/health")
def health():
    return {"ok": True, "service": "prt-faucet"}


@app.get("/config")
def page_config():
    return {"explorerUrl": EXPLORER_URL}


# claim page; mounted last so the API routes above win
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


def run():
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
