def test_routes_create_list_and_duplicate(client):
    created = client.post("/api/v1/catalog/routes", json={"name": "  Galle Road "})
    assert created.status_code == 201
    assert created.json()["name"] == "Galle Road"

    duplicate = client.post("/api/v1/catalog/routes", json={"name": "Galle Road"})
    assert duplicate.status_code == 409

    routes = client.get("/api/v1/catalog/routes").json()
    assert [r["name"] for r in routes] == ["Galle Road"]


def test_blank_names_are_rejected(client):
    assert client.post("/api/v1/catalog/routes", json={"name": "   "}).status_code == 422
    assert client.post("/api/v1/catalog/shops", json={"name": ""}).status_code == 422


def test_shops_filter_by_route(client):
    north = client.post("/api/v1/catalog/routes", json={"name": "North"}).json()
    south = client.post("/api/v1/catalog/routes", json={"name": "South"}).json()
    client.post("/api/v1/catalog/shops", json={"name": "A Stores", "route_id": north["id"]})
    client.post("/api/v1/catalog/shops", json={"name": "B Stores", "route_id": south["id"]})
    client.post("/api/v1/catalog/shops", json={"name": "C Stores", "route_id": north["id"]})

    all_shops = client.get("/api/v1/catalog/shops").json()
    north_shops = client.get("/api/v1/catalog/shops", params={"route_id": north["id"]}).json()

    assert [s["name"] for s in all_shops] == ["A Stores", "B Stores", "C Stores"]
    assert [s["name"] for s in north_shops] == ["A Stores", "C Stores"]


def test_shop_with_unknown_route(client):
    response = client.post("/api/v1/catalog/shops", json={"name": "Lost Shop", "route_id": 42})
    assert response.status_code == 404


def test_deleting_route_keeps_shops(client):
    route = client.post("/api/v1/catalog/routes", json={"name": "East"}).json()
    shop = client.post("/api/v1/catalog/shops", json={"name": "Corner", "route_id": route["id"]}).json()

    assert client.delete(f"/api/v1/catalog/routes/{route['id']}").status_code == 200

    shops = client.get("/api/v1/catalog/shops").json()
    assert shops == [{**shop, "route_id": None}]
    assert client.delete(f"/api/v1/catalog/routes/{route['id']}").status_code == 404


def test_brands_create_update_delete(client):
    brand = client.post("/api/v1/catalog/brands", json={"name": "Pepsi", "size": "500ml", "price": 150}).json()
    assert brand["price"] == 150.0

    updated = client.patch(f"/api/v1/catalog/brands/{brand['id']}", json={"price": 160.5})
    assert updated.status_code == 200
    assert updated.json()["price"] == 160.5
    assert updated.json()["name"] == "Pepsi"

    assert client.delete(f"/api/v1/catalog/brands/{brand['id']}").status_code == 200
    assert client.get("/api/v1/catalog/brands").json() == []
    assert client.delete(f"/api/v1/catalog/brands/{brand['id']}").status_code == 404


def test_brand_price_must_be_positive(client):
    assert client.post("/api/v1/catalog/brands", json={"name": "Free", "price": 0}).status_code == 422


def test_brand_rename_conflict(client):
    client.post("/api/v1/catalog/brands", json={"name": "Pepsi", "price": 150})
    mirinda = client.post("/api/v1/catalog/brands", json={"name": "Mirinda", "price": 140}).json()

    response = client.patch(f"/api/v1/catalog/brands/{mirinda['id']}", json={"name": "Pepsi"})
    assert response.status_code == 409


def test_brand_update_conflict_from_database(client, monkeypatch):
    from sqlalchemy.exc import IntegrityError
    from monarch.modules.catalog.repository import CatalogRepository

    def taken(self, brand, changes):
        raise IntegrityError("UPDATE brands", {}, Exception("UNIQUE constraint failed: brands.name"))

    brand = client.post("/api/v1/catalog/brands", json={"name": "Pepsi", "price": 150}).json()
    monkeypatch.setattr(CatalogRepository, "update_brand", taken)

    response = client.patch(f"/api/v1/catalog/brands/{brand['id']}", json={"name": "Mirinda"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Error updating brand")
    assert client.get("/api/v1/catalog/brands").json()[0]["name"] == "Pepsi"
