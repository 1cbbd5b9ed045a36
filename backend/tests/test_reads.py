from fakes import FakeTokenClient, USER
from prtfaucet.dapp.reads import QueryCache, TokenReads


def test_reads_are_cached_until_refetch():
    client = FakeTokenClient(balances={USER: 5 * 10**18})
    reads = TokenReads(client)

    assert reads.name() == "Phillip Reward Token"
    assert reads.name() == "Phillip Reward Token"
    assert reads.balance(USER) == 5 * 10**18

    client.balances[USER] = 7 * 10**18
    assert reads.balance(USER) == 5 * 10**18
    assert reads.refetch_balance(USER) == 7 * 10**18
    assert client.reads.count("name") == 1
    assert client.reads.count("balanceOf") == 2


def test_balance_disabled_without_address():
    client = FakeTokenClient()
    reads = TokenReads(client)
    assert reads.balance(None) is None
    assert "balanceOf" not in client.reads


def test_failed_read_is_recorded_not_cached():
    cache = QueryCache()
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise ConnectionError("rpc down")
        return "PRT"

    assert cache.get(("symbol",), flaky) is None
    assert isinstance(cache.errors[("symbol",)], ConnectionError)
    assert cache.get(("symbol",), flaky) == "PRT"
    assert ("symbol",) not in cache.errors
