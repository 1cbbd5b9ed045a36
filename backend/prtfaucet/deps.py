from functools import lru_cache

from prtfaucet.chain import TokenClient


@lru_cache(maxsize=1)
def get_token_client() -> TokenClient:
    return TokenClient.from_env()
