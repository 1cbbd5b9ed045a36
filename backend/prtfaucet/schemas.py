from typing import Any

from pydantic import BaseModel


class ClaimRequest(BaseModel):
    # left untyped so a bad value gets the claim's own 400, in order
    address: Any = None
    amount: Any = None


class ClaimResponse(BaseModel):
    message: str
    txHash: str


class ErrorResponse(BaseModel):
    error: str


class TokenInfo(BaseModel):
    contract: str
    name: str
    symbol: str
    decimals: int
    owner: str


class Balance(BaseModel):
    address: str
    raw: str
    formatted: str
