from fastapi import APIRouter, Depends

from prtfaucet.chain import TokenClient
from prtfaucet.claims import submit_claim
from prtfaucet.deps import get_token_client
from prtfaucet.schemas import ClaimRequest, ClaimResponse, ErrorResponse

router = APIRouter()


@router.post(
    "/claim",
    response_model=ClaimResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def claim(req: ClaimRequest, client: TokenClient = Depends(get_token_client)):
    tx_hash = submit_claim(client, req.address, req.amount)
    return ClaimResponse(message="Transaction sent successfully!", txHash=tx_hash)
