import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from monarch.config.database import Base, get_db
from monarch.main import app
from monarch.shared.database import models  # noqa: F401

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = override_get_db
    # Not entered as a context manager: the lifespan would create tables on the real engine
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(client):
    """A route with one shop and two brands"""
    route = client.post("/api/v1/catalog/routes", json={"name": "Kandy North"}).json()
    shop = client.post("/api/v1/catalog/shops", json={"name": "Lanka Stores", "route_id": route["id"]}).json()
    cola = client.post("/api/v1/catalog/brands", json={"name": "Pepsi", "size": "500ml", "price": 150}).json()
    soda = client.post("/api/v1/catalog/brands", json={"name": "7Up", "size": "1L", "price": 250}).json()
    return {"route": route, "shop": shop, "pepsi": cola, "sevenup": soda}
