from datetime import date


def test_expenses_for_a_day(client):
    client.post("/api/v1/expenses", json={"amount": 200, "concept": "Fuel", "expense_date": "2024-03-05"})
    client.post("/api/v1/expenses", json={"amount": 75.5, "expense_date": "2024-03-05"})
    client.post("/api/v1/expenses", json={"amount": 999, "expense_date": "2024-03-06"})

    day = client.get("/api/v1/expenses", params={"on": "2024-03-05"}).json()

    assert [(e["concept"], e["amount"]) for e in day["expenses"]] == [("Fuel", 200.0), ("General", 75.5)]
    assert day["total_amount"] == 275.5


def test_expense_defaults_to_today(client):
    expense = client.post("/api/v1/expenses", json={"amount": 50}).json()
    assert expense["expense_date"] == date.today().isoformat()


def test_expense_amount_must_be_positive(client):
    assert client.post("/api/v1/expenses", json={"amount": 0}).status_code == 422
    assert client.post("/api/v1/expenses", json={}).status_code == 422


def test_delete_expense(client):
    expense = client.post("/api/v1/expenses", json={"amount": 10, "expense_date": "2024-03-05"}).json()

    assert client.delete(f"/api/v1/expenses/{expense['id']}").status_code == 200
    assert client.get("/api/v1/expenses", params={"on": "2024-03-05"}).json()["expenses"] == []
    assert client.delete(f"/api/v1/expenses/{expense['id']}").status_code == 404


def test_day_total_does_not_drift(client):
    client.post("/api/v1/expenses", json={"amount": 0.1, "expense_date": "2024-03-05"})
    client.post("/api/v1/expenses", json={"amount": 0.2, "expense_date": "2024-03-05"})

    day = client.get("/api/v1/expenses", params={"on": "2024-03-05"}).json()

    assert day["total_amount"] == 0.3
