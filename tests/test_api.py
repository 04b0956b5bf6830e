import pytest
from fastapi.testclient import TestClient

from jurisdiction.config import settings
from jurisdiction.main import create_app
from jurisdiction.tables import reset_tables


@pytest.fixture
def client():
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def client_without_regions(monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_REGIONS", False)
    reset_tables()
    with TestClient(create_app()) as client:
        yield client
    reset_tables()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_jurisdiction(client):
    response = client.get("/jurisdictions/NO")
    assert response.status_code == 200
    body = response.json()
    assert body["jurisdiction"] == "NO"
    assert body["alpha3"] == "NOR"
    assert body["country_code"] == 578
    assert body["name"] == "Norway"
    assert body["region"] == "Europe"
    assert body["region_code"] == 150
    assert body["sub_region"] == "Northern Europe"
    assert body["sub_region_code"] == 154
    assert body["intermediate_region"] is None


def test_get_jurisdiction_by_alpha3(client):
    assert client.get("/jurisdictions/nor").json()["alpha2"] == "NO"


def test_unknown_jurisdiction(client):
    assert client.get("/jurisdictions/ZZ").status_code == 404
    assert client.get("/jurisdictions/NORWAY").status_code == 404
    assert client.get("/jurisdictions/%C3%9F").status_code == 404


def test_get_by_numeric(client):
    response = client.get("/jurisdictions/numeric/578")
    assert response.status_code == 200
    assert response.json()["alpha2"] == "NO"
    assert client.get("/jurisdictions/numeric/0").status_code == 404
    assert client.get("/jurisdictions/numeric/1000").status_code == 422


def test_unclassified_jurisdiction(client):
    body = client.get("/jurisdictions/AQ").json()
    assert body["name"] == "Antarctica"
    assert body["region"] is None
    assert body["sub_region_code"] is None


def test_list_jurisdictions(client):
    body = client.get("/jurisdictions").json()
    assert len(body) == 249
    assert body[0]["alpha2"] == "AF"


def test_list_regions(client):
    body = client.get("/regions").json()
    assert [region["name"] for region in body] == ["Africa", "Oceania", "Americas", "Asia", "Europe"]
    europe = body[-1]
    northern = next(sub for sub in europe["sub_regions"] if sub["id"] == 154)
    assert northern["intermediate_regions"] == [{"id": 830, "name": "Channel Islands"}]


def test_region_jurisdictions(client):
    response = client.get("/regions/150/jurisdictions")
    assert response.status_code == 200
    assert "NO" in response.json()
    assert "AO" not in response.json()
    assert client.get("/regions/1/jurisdictions").status_code == 404


def test_regions_disabled(client_without_regions):
    assert client_without_regions.get("/regions").status_code == 404
    body = client_without_regions.get("/jurisdictions/NO").json()
    assert body["alpha3"] == "NOR"
    assert body["region"] is None
