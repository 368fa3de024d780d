"""
City Info Backend — City Info Repository
==========================================

What:  Domain-facing facade over the request-scoped AsyncSession.
Why:   Routes ask questions ("does city 3 exist?", "give me page 2 of cities
       named like 'par'") without building SQL themselves, and the whole
       request shares one unit of work that is persisted by commit().
How:   Each instance wraps exactly one AsyncSession; routes receive it
       through the get_city_info_repository dependency.

Returned values are ORM entities, never wire DTOs; mapping happens in
app.mapping.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy import exists, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db_session
from app.exceptions import DatabaseError
from app.models.city import City
from app.models.point_of_interest import PointOfInterest
from app.schemas.common import PaginationMetadata

logger = logging.getLogger(__name__)


class CityInfoRepository:
    """
    Repository over cities and their points of interest.

    Contract notes:
        - get_cities expects page_number >= 1 and page_size >= 1; the HTTP
          layer clamps page_size to the configured maximum beforehand.
        - get_point_of_interest is scoped by city: an item owned by another
          city is reported as absent.
        - add/delete are pending until commit().
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Cities ────────────────────────────────────────────────────────────

    async def city_exists(self, city_id: int) -> bool:
        result = await self._session.execute(
            select(exists().where(City.id == city_id))
        )
        return bool(result.scalar())

    async def get_cities(
        self,
        name: Optional[str] = None,
        search_query: Optional[str] = None,
        page_number: int = 1,
        page_size: int = 10,
    ) -> Tuple[List[City], PaginationMetadata]:
        """
        Filtered, name-ordered page of cities plus its pagination metadata.

        Filters:
            name:          exact, case-insensitive match on City.name
            search_query:  case-insensitive substring of name or description
            Both supplied: AND

        Query plan:
            SELECT count(*) FROM cities WHERE <filters>
            SELECT * FROM cities WHERE <filters> ORDER BY name
            LIMIT :page_size OFFSET (:page_number - 1) * :page_size
        """
        if page_number < 1 or page_size < 1:
            raise ValueError("page_number and page_size must be >= 1")

        conditions = []
        if name and name.strip():
            conditions.append(func.lower(City.name) == name.strip().lower())
        if search_query and search_query.strip():
            term = search_query.strip()
            # % and _ in the term match literally
            conditions.append(
                or_(
                    City.name.icontains(term, autoescape=True),
                    City.description.icontains(term, autoescape=True),
                )
            )

        count_result = await self._session.execute(
            select(func.count(City.id)).where(*conditions)
        )
        total_count = count_result.scalar() or 0

        result = await self._session.execute(
            select(City)
            .where(*conditions)
            .order_by(City.name)
            .offset(page_size * (page_number - 1))
            .limit(page_size)
        )
        cities = list(result.scalars().all())

        metadata = PaginationMetadata.build(
            total_count=total_count,
            page_size=page_size,
            current_page=page_number,
        )
        return cities, metadata

    async def get_city(
        self, city_id: int, include_points_of_interest: bool = False
    ) -> Optional[City]:
        query = select(City).where(City.id == city_id)
        if include_points_of_interest:
            query = query.options(selectinload(City.points_of_interest))
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    async def city_name_matches_city_id(self, city_name: Optional[str], city_id: int) -> bool:
        """
        Whether `city_id` belongs to the city called `city_name`.

        Lookup for an ownership check against a caller's city claim. No route
        enforces such a check yet; authorization lives outside this service.
        """
        if not city_name:
            return False
        result = await self._session.execute(
            select(exists().where(City.id == city_id, City.name == city_name))
        )
        return bool(result.scalar())

    # ── Points of interest ────────────────────────────────────────────────

    async def get_points_of_interest(self, city_id: int) -> List[PointOfInterest]:
        result = await self._session.execute(
            select(PointOfInterest).where(PointOfInterest.city_id == city_id)
        )
        return list(result.scalars().all())

    async def get_point_of_interest(
        self, city_id: int, point_of_interest_id: int
    ) -> Optional[PointOfInterest]:
        result = await self._session.execute(
            select(PointOfInterest).where(
                PointOfInterest.city_id == city_id,
                PointOfInterest.id == point_of_interest_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_point_of_interest(
        self, city_id: int, point_of_interest: PointOfInterest
    ) -> None:
        point_of_interest.city_id = city_id
        self._session.add(point_of_interest)

    async def delete_point_of_interest(self, point_of_interest: PointOfInterest) -> None:
        await self._session.delete(point_of_interest)

    # ── Unit of work ──────────────────────────────────────────────────────

    async def commit(self) -> bool:
        """
        Persist every pending change of this request.

        Returns:
            True if at least one insert, update or delete was pending.

        Raises:
            DatabaseError: the store rejected the changes (session rolled back)
        """
        session = self._session
        has_changes = bool(
            session.new
            or session.deleted
            or any(session.is_modified(obj) for obj in session.dirty)
        )
        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Commit failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save your changes. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.debug("Commit finished (changes=%s)", has_changes)
        return has_changes


# ── Dependency ────────────────────────────────────────────────────────────

async def get_city_info_repository(
    db: AsyncSession = Depends(get_db_session),
) -> CityInfoRepository:
    """FastAPI dependency: one repository per request, bound to its session."""
    return CityInfoRepository(db)
