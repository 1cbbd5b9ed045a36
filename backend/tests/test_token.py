from fakes import OWNER, TOKEN, USER


def test_token_info(api):
    r = api.get("/token")

    assert r.status_code == 200
    assert r.json() == {
        "contract": TOKEN,
        "name": "Phillip Reward Token",
        "symbol": "PRT",
        "decimals": 18,
        "owner": OWNER,
    }


def test_balance(api, fake_client):
    fake_client.balances[USER] = 25 * 10**17

    body = api.get(f"/token/balance/{USER}").json()

    assert body["raw"] == str(25 * 10**17)
    assert body["formatted"] == "2.5"
    assert body["address"].lower() == USER


def test_balance_invalid_address(api):
    r = api.get("/token/balance/0xInvalid")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid wallet address."}


def test_rpc_down(api, fake_client):
    def down(address):
        raise ConnectionError("rpc down")

    fake_client.balance_of = down
    r = api.get(f"/token/balance/{USER}")
    assert r.status_code == 503
    assert r.json() == {"error": "RPC endpoint unavailable."}
