"""
City Info Backend — Points of Interest Endpoint Tests
=======================================================

What:  HTTP-level tests for the nested points-of-interest resource.
How:   httpx AsyncClient against the app, in-memory seeded database,
       recording mail service.

Seed reminders:
    city 1 (New York City): 1 Central Park, 2 Empire State Building
    city 2 (Antwerp):       3 Cathedral, 4 Antwerp Central Station
    city 3 (Paris):         5 Eiffel Tower, 6 The Louvre
"""

import json

import pytest

from app.exceptions import DatabaseError
from app.services.city_info_repository import get_city_info_repository

BASE = "/api/cities/{city_id}/pointsofinterest"


def url(city_id, point_of_interest_id=None):
    path = BASE.format(city_id=city_id)
    if point_of_interest_id is not None:
        path += f"/{point_of_interest_id}"
    return path


class TestListAndDetail:

    @pytest.mark.asyncio
    async def test_list_for_city(self, test_client):
        response = await test_client.get(url(1))

        assert response.status_code == 200
        assert {p["name"] for p in response.json()} == {"Central Park", "Empire State Building"}

    @pytest.mark.asyncio
    async def test_list_for_missing_city_is_404(self, test_client):
        response = await test_client.get(url(999))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_unexpected_failure_is_contained(self, test_client, caplog):
        from app.main import app

        class ExplodingRepository:
            async def city_exists(self, city_id):
                raise RuntimeError("connection reset by peer")

        app.dependency_overrides[get_city_info_repository] = lambda: ExplodingRepository()

        response = await test_client.get(url(1))

        assert response.status_code == 500
        assert response.json() == "A problem happened while handling your request."
        assert "connection reset" not in response.text
        assert any(r.levelname == "CRITICAL" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_list_store_failure_is_contained(self, test_client, caplog):
        from app.main import app

        class FailingStoreRepository:
            async def city_exists(self, city_id):
                raise DatabaseError(message="Could not reach the store.")

        app.dependency_overrides[get_city_info_repository] = lambda: FailingStoreRepository()

        response = await test_client.get(url(1))

        assert response.status_code == 500
        assert response.json() == "A problem happened while handling your request."
        assert any(r.levelname == "CRITICAL" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_detail(self, test_client):
        response = await test_client.get(url(3, 5))

        assert response.status_code == 200
        assert response.json()["name"] == "Eiffel Tower"

    @pytest.mark.asyncio
    async def test_detail_missing_item_is_404(self, test_client):
        response = await test_client.get(url(3, 999))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_detail_item_of_other_city_is_404(self, test_client):
        # 1 (Central Park) exists, but belongs to New York City
        response = await test_client.get(url(3, 1))
        assert response.status_code == 404


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_then_fetch_round_trip(self, test_client, sample_point_of_interest):
        payload = {"name": "Bryant Park", "description": "Next to the public library."}

        response = await test_client.post(url(1), json=payload)

        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert created["id"] not in {1, 2}
        assert created["name"] == payload["name"]
        assert response.headers["Location"].endswith(url(1, created["id"]))

        fetched = await test_client.get(url(1, created["id"]))
        assert fetched.status_code == 200
        assert fetched.json() == created

    @pytest.mark.asyncio
    async def test_create_central_park_for_city_without_points(self, test_client, session_factory):
        from app.models.city import City

        async with session_factory() as session:
            session.add(City(id=20, name="New York City", description="Fresh copy."))
            await session.commit()

        response = await test_client.post(
            url(20), json={"name": "Central Park", "description": "..."}
        )

        assert response.status_code == 201
        new_id = response.json()["id"]
        fetched = await test_client.get(response.headers["Location"])
        assert fetched.json() == {"id": new_id, "name": "Central Park", "description": "..."}

    @pytest.mark.asyncio
    async def test_create_for_missing_city_is_404(self, test_client, sample_point_of_interest):
        response = await test_client.post(url(999), json=sample_point_of_interest)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_with_long_name_is_400(self, test_client):
        response = await test_client.post(url(1), json={"name": "x" * 51})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_create_without_name_is_400(self, test_client):
        response = await test_client.post(url(1), json={"description": "nameless"})
        assert response.status_code == 400


class TestFullUpdate:

    @pytest.mark.asyncio
    async def test_put_replaces_all_fields(self, test_client):
        response = await test_client.put(url(1, 1), json={"name": "Central Park (updated)"})

        assert response.status_code == 204
        assert response.content == b""
        fetched = (await test_client.get(url(1, 1))).json()
        assert fetched == {"id": 1, "name": "Central Park (updated)", "description": None}

    @pytest.mark.asyncio
    async def test_put_is_idempotent(self, test_client):
        payload = {"name": "Empire State", "description": "Art Deco."}

        first = await test_client.put(url(1, 2), json=payload)
        state_after_first = (await test_client.get(url(1, 2))).json()
        second = await test_client.put(url(1, 2), json=payload)
        state_after_second = (await test_client.get(url(1, 2))).json()

        assert first.status_code == second.status_code == 204
        assert state_after_first == state_after_second == {"id": 2, **payload}

    @pytest.mark.asyncio
    async def test_put_item_of_other_city_is_404(self, test_client):
        response = await test_client.put(url(2, 1), json={"name": "Hijacked"})

        assert response.status_code == 404
        assert (await test_client.get(url(1, 1))).json()["name"] == "Central Park"

    @pytest.mark.asyncio
    async def test_put_for_missing_city_is_404(self, test_client):
        response = await test_client.put(url(999, 1), json={"name": "Nope"})
        assert response.status_code == 404


class TestPartialUpdate:

    @pytest.mark.asyncio
    async def test_patch_replace_name(self, test_client):
        response = await test_client.patch(
            url(3, 6),
            json=[{"op": "replace", "path": "/name", "value": "Musée du Louvre"}],
        )

        assert response.status_code == 204
        fetched = (await test_client.get(url(3, 6))).json()
        assert fetched["name"] == "Musée du Louvre"
        assert fetched["description"] == "The world's largest museum."

    @pytest.mark.asyncio
    async def test_patch_accepts_json_patch_media_type(self, test_client):
        response = await test_client.patch(
            url(3, 6),
            content=json.dumps([{"op": "remove", "path": "/description"}]),
            headers={"Content-Type": "application/json-patch+json"},
        )

        assert response.status_code == 204
        assert (await test_client.get(url(3, 6))).json()["description"] is None

    @pytest.mark.asyncio
    async def test_patch_empty_name_is_rejected_and_store_unchanged(self, test_client):
        before = (await test_client.get(url(3, 5))).json()

        response = await test_client.patch(
            url(3, 5),
            json=[
                {"op": "replace", "path": "/description", "value": "changed"},
                {"op": "replace", "path": "/name", "value": ""},
            ],
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["errors"][0]["loc"] == ["name"]
        assert (await test_client.get(url(3, 5))).json() == before

    @pytest.mark.asyncio
    async def test_patch_removing_name_is_rejected(self, test_client):
        response = await test_client.patch(url(3, 5), json=[{"op": "remove", "path": "/name"}])
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_unknown_path_is_rejected(self, test_client):
        response = await test_client.patch(
            url(3, 5), json=[{"op": "replace", "path": "/id", "value": 42}]
        )

        assert response.status_code == 400
        assert (await test_client.get(url(3, 5))).status_code == 200

    @pytest.mark.asyncio
    async def test_patch_unknown_operation_is_rejected(self, test_client):
        response = await test_client.patch(
            url(3, 5), json=[{"op": "merge", "path": "/name", "value": "x"}]
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_item_of_other_city_is_404(self, test_client):
        response = await test_client.patch(
            url(1, 5), json=[{"op": "replace", "path": "/name", "value": "Hijacked"}]
        )

        assert response.status_code == 404
        assert (await test_client.get(url(3, 5))).json()["name"] == "Eiffel Tower"

    @pytest.mark.asyncio
    async def test_patch_for_missing_city_is_404(self, test_client):
        response = await test_client.patch(
            url(999, 5), json=[{"op": "replace", "path": "/name", "value": "x"}]
        )
        assert response.status_code == 404


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_and_notifies(self, test_client, mail_outbox):
        response = await test_client.delete(url(2, 4))

        assert response.status_code == 204
        assert (await test_client.get(url(2, 4))).status_code == 404
        assert mail_outbox.sent == [
            (
                "Point of interest deleted.",
                "Point of interest Antwerp Central Station with id 4 was deleted.",
            )
        ]

    @pytest.mark.asyncio
    async def test_delete_item_of_other_city_is_404(self, test_client, mail_outbox):
        response = await test_client.delete(url(1, 4))

        assert response.status_code == 404
        assert mail_outbox.sent == []
        assert (await test_client.get(url(2, 4))).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_for_missing_city_is_404(self, test_client, mail_outbox):
        response = await test_client.delete(url(999, 4))

        assert response.status_code == 404
        assert mail_outbox.sent == []


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client, db_engine, monkeypatch):
        monkeypatch.setattr("app.routes.health.engine", db_engine)

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
