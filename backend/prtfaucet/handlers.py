import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prtfaucet.errors import FaucetError

logger = logging.getLogger(__name__)


async def faucet_error_handler(request: Request, exc: FaucetError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FaucetError, faucet_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
