import logging
from typing import Any, Callable

from prtfaucet.chain import TokenClient

logger = logging.getLogger(__name__)


class QueryCache:
    """
    Keyed results of read-only contract calls. A value is fetched once and
    kept until invalidated; a failed fetch leaves no value and records the
    error under the same key.
    """

    def __init__(self):
        self.data: dict[tuple, Any] = {}
        self.errors: dict[tuple, Exception] = {}

    def get(self, key: tuple, fetch: Callable[[], Any]):
        if key in self.data:
            return self.data[key]
        try:
            value = fetch()
        except Exception as exc:
            logger.warning("Read %s failed: %s", key, exc)
            self.errors[key] = exc
            return None
        self.errors.pop(key, None)
        self.data[key] = value
        return value

    def invalidate(self, key: tuple) -> None:
        self.data.pop(key, None)
        self.errors.pop(key, None)

    def clear(self) -> None:
        self.data.clear()
        self.errors.clear()


class TokenReads:
    def __init__(self, client: TokenClient, cache: QueryCache | None = None):
        self.client = client
        self.cache = cache if cache is not None else QueryCache()

    @property
    def contract(self) -> str:
        return self.client.address

    def name(self) -> str | None:
        return self.cache.get(("name",), self.client.name)

    def symbol(self) -> str | None:
        return self.cache.get(("symbol",), self.client.symbol)

    def owner(self) -> str | None:
        return self.cache.get(("owner",), self.client.owner)

    def balance(self, address: str | None) -> int | None:
        # disabled until a wallet is connected
        if address is None:
            return None
        return self.cache.get(("balanceOf", address.lower()), lambda: self.client.balance_of(address))

    def refetch_balance(self, address: str | None) -> int | None:
        if address is None:
            return None
        self.cache.invalidate(("balanceOf", address.lower()))
        return self.balance(address)
