"""
City Info Backend — Points of Interest Route Handlers
=======================================================

What:  CRUD for points of interest nested under a city:
           GET    /api/cities/{cityId}/pointsofinterest
           GET    /api/cities/{cityId}/pointsofinterest/{id}
           POST   /api/cities/{cityId}/pointsofinterest
           PUT    /api/cities/{cityId}/pointsofinterest/{id}
           PATCH  /api/cities/{cityId}/pointsofinterest/{id}
           DELETE /api/cities/{cityId}/pointsofinterest/{id}

Request Flow (linear, no retries):
    city exists? → (single-item routes) item exists and belongs to city?
    → operate → repository.commit() → respond

    Not-found checks run before any mutation, so a 404 never leaves pending
    changes behind.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from app.exceptions import NotFoundError
from app.mapping import (
    apply_point_of_interest_update,
    to_point_of_interest_dto,
    to_point_of_interest_dtos,
    to_point_of_interest_entity,
    to_point_of_interest_for_update_dto,
)
from app.models.point_of_interest import PointOfInterest
from app.schemas.common import ErrorResponse
from app.schemas.point_of_interest import (
    PointOfInterestDto,
    PointOfInterestForCreationDto,
    PointOfInterestForUpdateDto,
)
from app.services.city_info_repository import CityInfoRepository, get_city_info_repository
from app.services.json_patch import PatchOperation, patch_model
from app.services.mail_service import MailService, get_mail_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cities/{city_id}/pointsofinterest", tags=["Points of Interest"])

GENERIC_FAILURE_MESSAGE = "A problem happened while handling your request."


async def _ensure_city_exists(repository: CityInfoRepository, city_id: int) -> None:
    if not await repository.city_exists(city_id):
        logger.info(
            "City with id %d wasn't found when accessing points of interest.", city_id
        )
        raise NotFoundError(resource="city", resource_id=city_id)


async def _get_owned_point_of_interest(
    repository: CityInfoRepository, city_id: int, point_of_interest_id: int
) -> PointOfInterest:
    """City must exist and own the point of interest; otherwise 404."""
    await _ensure_city_exists(repository, city_id)
    point_of_interest = await repository.get_point_of_interest(city_id, point_of_interest_id)
    if point_of_interest is None:
        raise NotFoundError(resource="point of interest", resource_id=point_of_interest_id)
    return point_of_interest


@router.get(
    "",
    response_model=List[PointOfInterestDto],
    responses={
        404: {"description": "City not found", "model": ErrorResponse},
        500: {"description": "Unexpected failure"},
    },
    summary="List the points of interest of a city",
)
async def get_points_of_interest(
    city_id: int,
    repository: CityInfoRepository = Depends(get_city_info_repository),
):
    """
    Outermost containment boundary: anything unexpected becomes a 500 with a
    fixed message and is logged at CRITICAL, store failures included. Only
    NotFoundError passes through to its 404 handler.
    """
    try:
        await _ensure_city_exists(repository, city_id)
        points_of_interest = await repository.get_points_of_interest(city_id)
        return to_point_of_interest_dtos(points_of_interest)
    except NotFoundError:
        raise
    except Exception:
        logger.critical(
            "Exception while getting points of interest for city with id %d",
            city_id,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=GENERIC_FAILURE_MESSAGE,
        )


@router.get(
    "/{point_of_interest_id}",
    name="get_point_of_interest",
    response_model=PointOfInterestDto,
    responses={404: {"description": "City or point of interest not found", "model": ErrorResponse}},
    summary="Get one point of interest of a city",
)
async def get_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> PointOfInterestDto:
    point_of_interest = await _get_owned_point_of_interest(
        repository, city_id, point_of_interest_id
    )
    return to_point_of_interest_dto(point_of_interest)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PointOfInterestDto,
    responses={
        201: {"description": "Created; Location points at the new resource"},
        400: {"description": "Invalid body", "model": ErrorResponse},
        404: {"description": "City not found", "model": ErrorResponse},
    },
    summary="Create a point of interest for a city",
)
async def create_point_of_interest(
    city_id: int,
    point_of_interest: PointOfInterestForCreationDto,
    request: Request,
    response: Response,
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> PointOfInterestDto:
    await _ensure_city_exists(repository, city_id)

    entity = to_point_of_interest_entity(point_of_interest)
    await repository.add_point_of_interest(city_id, entity)

    # The id is assigned by the store on commit
    await repository.commit()

    created = to_point_of_interest_dto(entity)
    response.headers["Location"] = str(
        request.url_for(
            "get_point_of_interest",
            city_id=city_id,
            point_of_interest_id=created.id,
        )
    )
    logger.info("Point of interest %d created for city %d", created.id, city_id)
    return created


@router.put(
    "/{point_of_interest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid body", "model": ErrorResponse},
        404: {"description": "City or point of interest not found", "model": ErrorResponse},
    },
    summary="Replace a point of interest",
)
async def update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    point_of_interest: PointOfInterestForUpdateDto,
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> Response:
    entity = await _get_owned_point_of_interest(repository, city_id, point_of_interest_id)

    apply_point_of_interest_update(point_of_interest, entity)
    await repository.commit()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{point_of_interest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid patch document or result", "model": ErrorResponse},
        404: {"description": "City or point of interest not found", "model": ErrorResponse},
    },
    summary="Partially update a point of interest with a JSON Patch document",
)
async def partially_update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    patch_document: List[PatchOperation],
    repository: CityInfoRepository = Depends(get_city_info_repository),
) -> Response:
    """
    The patch targets the update DTO, not the entity:
        entity → PointOfInterestForUpdateDto → apply ops → validate → merge

    Example body:
        [{"op": "replace", "path": "/name", "value": "Updated - Central Park"}]
    """
    entity = await _get_owned_point_of_interest(repository, city_id, point_of_interest_id)

    point_of_interest_to_patch = to_point_of_interest_for_update_dto(entity)
    patched = patch_model(
        point_of_interest_to_patch,
        patch_document,
        model_class=PointOfInterestForUpdateDto,
    )

    apply_point_of_interest_update(patched, entity)
    await repository.commit()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{point_of_interest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "City or point of interest not found", "model": ErrorResponse}},
    summary="Delete a point of interest",
)
async def delete_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    repository: CityInfoRepository = Depends(get_city_info_repository),
    mail_service: MailService = Depends(get_mail_service),
) -> Response:
    entity = await _get_owned_point_of_interest(repository, city_id, point_of_interest_id)

    await repository.delete_point_of_interest(entity)
    await repository.commit()

    mail_service.send(
        "Point of interest deleted.",
        f"Point of interest {entity.name} with id {entity.id} was deleted.",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
