"""Tests for the city endpoints."""

import pytest
from fastapi.testclient import TestClient

from city_info_api.app.main import app
from city_info_api.app.services.city_service import CityService


class TestCitiesEndpoints:
    """Tests for GET /api/cities and GET /api/cities/{id}."""

    def test_list_cities_returns_seed_data(self, client):
        response = client.get("/api/cities")

        assert response.status_code == 200
        cities = response.json()
        assert [city["name"] for city in cities] == ["New York City", "Antwerp"]

    def test_city_includes_point_of_interest_count(self, client):
        response = client.get("/api/cities/1")

        assert response.status_code == 200
        city = response.json()
        assert city["id"] == 1
        assert city["description"] == "The one with that big park."
        assert city["number_of_points_of_interest"] == 2
        assert [poi["id"] for poi in city["points_of_interest"]] == [1, 2]

    @pytest.mark.parametrize("city_id", [0, 3, 999])
    def test_unknown_city_is_not_found(self, client, city_id):
        response = client.get(f"/api/cities/{city_id}")

        assert response.status_code == 404

    def test_non_integer_city_id_is_rejected(self, client):
        response = client.get("/api/cities/abc")

        assert response.status_code == 422


class TestUnhandledErrors:
    """Unexpected exceptions are reported as a generic 500."""

    def test_unexpected_exception_returns_500(self, monkeypatch):
        async def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(CityService, "list_cities", boom)
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/api/cities")

        assert response.status_code == 500
        assert response.json() == {"detail": "A problem happened while handling your request."}
