from fastapi.testclient import TestClient

from finance_insights.main import app
from finance_insights.routers import analytics as analytics_router

client = TestClient(app)

NOW = "2026-10-14T12:00:00"

payload = {
    "now": NOW,
    "transactions": [
        {
            "id": "t1",
            "amount": 100.0,
            "type": "income",
            "date": "2026-10-12T09:00:00",
            "balance": {"id": "b1", "name": "Wallet", "currency": "GBP"},
        },
        {
            "id": "t2",
            "amount": 40.0,
            "type": "expense",
            "date": "2026-10-13T09:00:00",
            "category": {"id": "c1", "name": "Food"},
            "balance": {"id": "b1", "name": "Wallet", "currency": "GBP"},
        },
    ],
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_calculate_analytics():
    response = client.post("/api/analytics", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "GBP"
    assert data["analytics"]["total_income"] == 100.0
    assert data["analytics"]["net_change"] == 60.0
    assert data["analytics"]["category_breakdown"][0] == {"category": "Food", "amount": 40.0, "count": 1}
    assert len(data["analytics"]["daily_pattern"]) == 7
    assert {"message": "You saved £60.00 this period", "kind": "success"} in data["insights"]


def test_empty_request_uses_default_currency():
    response = client.post("/api/analytics", json={"transactions": []})
    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "USD"
    assert data["insights"] == []
    assert data["analytics"]["largest_transaction"] is None


def test_invalid_date_is_rejected():
    bad = {"transactions": [{"id": "x", "amount": 5, "type": "expense", "date": "not-a-date"}]}
    response = client.post("/api/analytics", json=bad)
    assert response.status_code == 422


def test_insights_from_snapshot():
    analytics = client.post("/api/analytics", json=payload).json()["analytics"]
    response = client.post("/api/analytics/insights", params={"currency": "USD"}, json=analytics)
    assert response.status_code == 200
    messages = [item["message"] for item in response.json()]
    assert "You saved $60.00 this period" in messages


def test_dashboard():
    body = {
        "now": NOW,
        "balances": [{"id": "b1", "name": "Wallet", "currency": "GBP"}],
        "transactions": payload["transactions"],
    }
    response = client.post("/api/dashboard", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["total_accounts"] == 1
    assert data["this_month_transactions"] == 2
    assert data["most_used_category"] == "Food"


def test_insights_failure_returns_500(monkeypatch):
    def broken(analytics, currency):
        raise RuntimeError("boom")

    analytics = client.post("/api/analytics", json={"transactions": []}).json()["analytics"]
    monkeypatch.setattr(analytics_router, "build_insights", broken)
    response = client.post("/api/analytics/insights", json=analytics)
    assert response.status_code == 500
    assert "boom" in response.json()["detail"]
