import pytest


@pytest.fixture
def march_sales(client, catalog):
    shop_id = catalog["shop"]["id"]
    pepsi = str(catalog["pepsi"]["id"])
    sevenup = str(catalog["sevenup"]["id"])

    def place(items, on):
        client.post("/api/v1/orders", json={"shop_id": shop_id, "items": items, "order_date": on})

    place({pepsi: 2, sevenup: 1}, "2024-03-05")   # 300 + 250
    place({sevenup: 2}, "2024-03-05")             # 500
    place({pepsi: 10}, "2024-03-12")              # 1500
    place({sevenup: 50}, "2024-04-01")            # next month
    client.post("/api/v1/expenses", json={"amount": 200, "expense_date": "2024-03-05"})
    client.post("/api/v1/expenses", json={"amount": 80, "expense_date": "2024-03-12"})


def test_daily_summary(client, march_sales):
    daily = client.get("/api/v1/reports/daily", params={"on": "2024-03-05"}).json()

    assert daily["summary"] == {
        "total": 1050.0,
        "order_count": 2,
        "brand_stats": {
            "Pepsi": {"units": 2, "revenue": 300.0},
            "7Up": {"units": 3, "revenue": 750.0},
        }
    }
    assert daily["expenses"] == 200.0
    assert daily["net"] == 850.0


def test_monthly_summary_and_top_brand(client, march_sales):
    monthly = client.get("/api/v1/reports/monthly", params={"year": 2024, "month": 3}).json()

    assert monthly["summary"]["total"] == 2550.0
    assert monthly["summary"]["order_count"] == 3
    assert monthly["summary"]["brand_stats"]["Pepsi"] == {"units": 12, "revenue": 1800.0}
    assert monthly["top_brand"] == "Pepsi"


def test_dashboard(client, march_sales):
    dashboard = client.get("/api/v1/reports/dashboard", params={"on": "2024-03-12"}).json()

    assert dashboard["date"] == "2024-03-12"
    assert dashboard["today"]["total"] == 1500.0
    assert dashboard["month"]["total"] == 2550.0
    assert dashboard["today_expenses"] == 80.0
    assert dashboard["net"] == 1420.0
    assert dashboard["top_brand"] == "Pepsi"


def test_dashboard_without_sales(client):
    dashboard = client.get("/api/v1/reports/dashboard", params={"on": "2024-03-12"}).json()

    assert dashboard["today"] == {"total": 0.0, "order_count": 0, "brand_stats": {}}
    assert dashboard["net"] == 0.0
    assert dashboard["top_brand"] == "N/A"


def test_monthly_rejects_bad_month(client):
    assert client.get("/api/v1/reports/monthly", params={"year": 2024, "month": 13}).status_code == 422
