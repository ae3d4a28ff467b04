import pytest


@pytest.mark.asyncio
@pytest.mark.integration
async def test_execute_orders(client):
    payload = {
        "positions": [
            {"ticker": "btc", "leverage": 2, "allocation": 50, "order_type": "LIMIT", "limit_price": 40000},
            {"ticker": "eth", "direction": "SHORT", "leverage": 1, "allocation": 50},
        ],
        "total_capital": 10000,
    }

    resp = await client.post("/api/v1/orders/execute", json=payload)
    assert resp.status_code == 200

    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Successfully executed 2 position(s)"
    assert len(body["order_ids"]) == 2
    assert all(order_id.startswith("HL-") for order_id in body["order_ids"])

    btc, eth = body["executed_positions"]
    assert btc["ticker"] == "BTC"
    assert btc["execution_price"] == 40000
    assert btc["quantity"] == pytest.approx(0.25)
    assert eth["status"] == "FILLED"
    assert eth["execution_price"] == pytest.approx(2285.75, rel=0.002)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_execute_uses_default_capital(client):
    payload = {
        "positions": [
            {"ticker": "ZZZ", "leverage": 1, "allocation": 100, "order_type": "LIMIT", "limit_price": 100},
        ],
    }

    resp = await client.post("/api/v1/orders/execute", json=payload)
    assert resp.status_code == 200
    assert resp.json()["executed_positions"][0]["quantity"] == pytest.approx(100)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_execute_bad_allocation_is_400(client):
    payload = {"positions": [{"ticker": "BTC", "allocation": 70}]}

    resp = await client.post("/api/v1/orders/execute", json=payload)
    assert resp.status_code == 400
    assert "Current: 70%" in resp.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_order_status(client):
    resp = await client.get("/api/v1/orders/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
