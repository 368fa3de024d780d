"""
City Info Backend — Cities Route Handlers
===========================================

What:  GET /api/v{version}/cities (list) and GET /api/v{version}/cities/{id}.
How:   Extracts query parameters, delegates to CityInfoRepository, maps the
       entities to DTOs in app.mapping.

Versioning:
    This router carries no version prefix itself; app.main mounts it once per
    entry of settings.api_versions (/api/v1, /api/v2). Every version shares
    this implementation.
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Response

from app.config import settings
from app.exceptions import NotFoundError
from app.mapping import to_city_detail_dto, to_city_without_points_of_interest_dtos
from app.schemas.city import CityDto, CityWithoutPointsOfInterestDto
from app.schemas.common import ErrorResponse
from app.services.city_info_repository import CityInfoRepository, get_city_info_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cities", tags=["Cities"])


def report_api_versions(response: Response) -> None:
    """Advertises every mounted API version on each cities response."""
    response.headers["api-supported-versions"] = ", ".join(
        f"{version}.0" for version in settings.api_versions
    )


@router.get(
    "",
    response_model=List[CityWithoutPointsOfInterestDto],
    responses={
        200: {"description": "Page of cities; metadata in the X-Pagination header"},
        400: {"description": "Invalid query parameters", "model": ErrorResponse},
    },
    summary="List cities with filtering and pagination",
)
async def get_cities(
    response: Response,
    name: Optional[str] = Query(default=None, description="Exact (case-insensitive) city name"),
    search_query: Optional[str] = Query(
        default=None,
        alias="searchQuery",
        description="Case-insensitive substring of name or description",
    ),
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int = Query(
        default=settings.default_cities_page_size,
        ge=1,
        alias="pageSize",
        description=f"Items per page; larger values are clamped to {settings.max_cities_page_size}",
    ),
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> List[CityWithoutPointsOfInterestDto]:
    """
    List cities ordered by name.

    Example:
        GET /api/v1/cities?searchQuery=an&pageSize=50
        X-Pagination: {"totalCount":1,"pageSize":20,"currentPage":1,"totalPages":1}
    """
    effective_page_size = min(page_size, settings.max_cities_page_size)

    cities, pagination = await repository.get_cities(
        name=name,
        search_query=search_query,
        page_number=page_number,
        page_size=effective_page_size,
    )

    response.headers["X-Pagination"] = pagination.to_header()
    report_api_versions(response)

    return to_city_without_points_of_interest_dtos(cities)


@router.get(
    "/{city_id}",
    response_model=Union[CityDto, CityWithoutPointsOfInterestDto],
    responses={
        200: {"description": "The city, with points of interest when requested"},
        404: {"description": "City not found", "model": ErrorResponse},
    },
    summary="Get a city by id",
)
async def get_city(
    city_id: int,
    response: Response,
    include_points_of_interest: bool = Query(default=False, alias="includePointsOfInterest"),
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> Union[CityDto, CityWithoutPointsOfInterestDto]:
    city = await repository.get_city(city_id, include_points_of_interest)
    if city is None:
        logger.info("City with id %d wasn't found.", city_id)
        raise NotFoundError(resource="city", resource_id=city_id)

    report_api_versions(response)
    return to_city_detail_dto(city, include_points_of_interest)
