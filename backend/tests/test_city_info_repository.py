"""
City Info Backend — Repository Unit Tests
===========================================

What:  Tests for CityInfoRepository against the seeded in-memory database.
How:   Each test gets its own session (db_session fixture); no HTTP layer.
"""

import pytest

from app.models.point_of_interest import PointOfInterest
from app.services.city_info_repository import CityInfoRepository


class TestCityQueries:

    @pytest.mark.asyncio
    async def test_city_exists(self, db_session):
        repository = CityInfoRepository(db_session)

        assert await repository.city_exists(1) is True
        assert await repository.city_exists(999) is False

    @pytest.mark.asyncio
    async def test_get_cities_defaults(self, db_session):
        repository = CityInfoRepository(db_session)

        cities, metadata = await repository.get_cities()

        assert [c.name for c in cities] == ["Antwerp", "New York City", "Paris"]
        assert metadata.total_count == 3
        assert metadata.total_pages == 1

    @pytest.mark.asyncio
    async def test_get_cities_name_is_trimmed(self, db_session):
        repository = CityInfoRepository(db_session)

        cities, _ = await repository.get_cities(name="  ANTWERP ")

        assert [c.id for c in cities] == [2]

    @pytest.mark.asyncio
    async def test_get_cities_blank_filters_are_ignored(self, db_session):
        repository = CityInfoRepository(db_session)

        cities, metadata = await repository.get_cities(name="   ", search_query="")

        assert len(cities) == 3
        assert metadata.total_count == 3

    @pytest.mark.asyncio
    async def test_get_cities_page_beyond_last_is_empty(self, db_session):
        repository = CityInfoRepository(db_session)

        cities, metadata = await repository.get_cities(page_number=5, page_size=2)

        assert cities == []
        assert metadata.total_count == 3
        assert metadata.total_pages == 2
        assert metadata.current_page == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page_number,page_size", [(0, 10), (1, 0)])
    async def test_get_cities_rejects_non_positive_paging(self, db_session, page_number, page_size):
        repository = CityInfoRepository(db_session)

        with pytest.raises(ValueError):
            await repository.get_cities(page_number=page_number, page_size=page_size)

    @pytest.mark.asyncio
    async def test_get_city_with_children(self, db_session):
        repository = CityInfoRepository(db_session)

        city = await repository.get_city(3, include_points_of_interest=True)

        assert city.name == "Paris"
        assert sorted(p.id for p in city.points_of_interest) == [5, 6]

    @pytest.mark.asyncio
    async def test_get_missing_city_is_none(self, db_session):
        repository = CityInfoRepository(db_session)
        assert await repository.get_city(999) is None

    @pytest.mark.asyncio
    async def test_city_name_matches_city_id(self, db_session):
        repository = CityInfoRepository(db_session)

        assert await repository.city_name_matches_city_id("Paris", 3) is True
        assert await repository.city_name_matches_city_id("Paris", 1) is False
        assert await repository.city_name_matches_city_id(None, 3) is False


class TestPointOfInterestQueries:

    @pytest.mark.asyncio
    async def test_points_of_interest_are_scoped_by_city(self, db_session):
        repository = CityInfoRepository(db_session)

        points = await repository.get_points_of_interest(2)

        assert {p.name for p in points} == {"Cathedral", "Antwerp Central Station"}
        assert await repository.get_points_of_interest(999) == []

    @pytest.mark.asyncio
    async def test_item_of_other_city_is_absent(self, db_session):
        repository = CityInfoRepository(db_session)

        assert await repository.get_point_of_interest(3, 5) is not None
        assert await repository.get_point_of_interest(1, 5) is None


class TestUnitOfWork:

    @pytest.mark.asyncio
    async def test_add_then_commit_assigns_id(self, db_session):
        repository = CityInfoRepository(db_session)
        point = PointOfInterest(name="Montmartre", description=None)

        await repository.add_point_of_interest(3, point)
        saved = await repository.commit()

        assert saved is True
        assert point.id is not None
        assert point.id > 6
        assert point.city_id == 3

    @pytest.mark.asyncio
    async def test_commit_without_changes_returns_false(self, db_session):
        repository = CityInfoRepository(db_session)
        await repository.get_cities()

        assert await repository.commit() is False

    @pytest.mark.asyncio
    async def test_commit_reports_update(self, db_session):
        repository = CityInfoRepository(db_session)
        point = await repository.get_point_of_interest(1, 1)

        point.name = "Central Park (renamed)"

        assert await repository.commit() is True
        assert (await repository.get_point_of_interest(1, 1)).name == "Central Park (renamed)"

    @pytest.mark.asyncio
    async def test_delete_then_commit(self, db_session):
        repository = CityInfoRepository(db_session)
        point = await repository.get_point_of_interest(2, 3)

        await repository.delete_point_of_interest(point)

        assert await repository.commit() is True
        assert await repository.get_point_of_interest(2, 3) is None
