from monarch.shared.live import live_collections


def test_profile_defaults(client):
    assert client.get("/api/v1/profile").json() == {
        "rep_name": "Sales Rep",
        "company": "Pepsi Company"
    }


def test_profile_partial_update(client):
    response = client.put("/api/v1/profile", json={"rep_name": " Nimal "})
    assert response.status_code == 200
    assert response.json() == {"rep_name": "Nimal", "company": "Pepsi Company"}

    client.put("/api/v1/profile", json={"company": "Monarch Distributors"})
    assert client.get("/api/v1/profile").json() == {
        "rep_name": "Nimal",
        "company": "Monarch Distributors"
    }


def test_profile_rejects_blank_values(client):
    assert client.put("/api/v1/profile", json={"rep_name": "  "}).status_code == 422


def test_profile_update_is_published_in_write_order(client):
    received = []
    unsubscribe = live_collections.subscribe("settings", received.append, replay=False)
    try:
        client.put("/api/v1/profile", json={"company": "Monarch Distributors"})
        client.put("/api/v1/profile", json={"rep_name": "Nimal"})
    finally:
        unsubscribe()

    assert [[(s["key"], s["value"]) for s in records] for records in received] == [
        [("company", "Monarch Distributors")],
        [("company", "Monarch Distributors"), ("rep_name", "Nimal")],
    ]


def test_failed_profile_save_is_rolled_back(client, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from monarch.modules.profile.repository import ProfileRepository

    def locked(self, values):
        raise OperationalError("UPDATE settings", {}, Exception("database is locked"))

    monkeypatch.setattr(ProfileRepository, "set_values", locked)

    response = client.put("/api/v1/profile", json={"rep_name": "Nimal"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Error saving profile")
