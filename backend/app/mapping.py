"""
City Info Backend — Entity/DTO Mapping
========================================

What:  Explicit conversion functions between ORM entities and wire DTOs.
Why:   One function per DTO shape keeps the field-selection rules visible and
       unit-testable without a database.

Rules:
    - Light city shape never reads City.points_of_interest (it may not be
      loaded, and async sessions cannot lazy-load).
    - The full city shape is chosen by the caller's include flag, not by
      whether the repository happened to populate children.
    - Update DTOs overwrite every mutable field of the entity (PUT semantics).
"""

from typing import Iterable, List, Union

from app.models.city import City
from app.models.point_of_interest import PointOfInterest
from app.schemas.city import CityDto, CityWithoutPointsOfInterestDto
from app.schemas.point_of_interest import (
    PointOfInterestDto,
    PointOfInterestForCreationDto,
    PointOfInterestForUpdateDto,
)


# ── Points of interest ────────────────────────────────────────────────────

def to_point_of_interest_dto(entity: PointOfInterest) -> PointOfInterestDto:
    return PointOfInterestDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
    )


def to_point_of_interest_dtos(entities: Iterable[PointOfInterest]) -> List[PointOfInterestDto]:
    return [to_point_of_interest_dto(entity) for entity in entities]


def to_point_of_interest_entity(dto: PointOfInterestForCreationDto) -> PointOfInterest:
    """New, unattached entity; id and city_id are set by the repository/store."""
    return PointOfInterest(name=dto.name, description=dto.description)


def to_point_of_interest_for_update_dto(entity: PointOfInterest) -> PointOfInterestForUpdateDto:
    """
    Snapshot of the entity's mutable fields, used as the patch target.

    model_construct skips validation: the stored row is taken as-is and the
    patched result is validated afterwards.
    """
    return PointOfInterestForUpdateDto.model_construct(
        name=entity.name,
        description=entity.description,
    )


def apply_point_of_interest_update(
    dto: PointOfInterestForUpdateDto, entity: PointOfInterest
) -> PointOfInterest:
    entity.name = dto.name
    entity.description = dto.description
    return entity


# ── Cities ────────────────────────────────────────────────────────────────

def to_city_without_points_of_interest_dto(entity: City) -> CityWithoutPointsOfInterestDto:
    return CityWithoutPointsOfInterestDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
    )


def to_city_without_points_of_interest_dtos(
    entities: Iterable[City],
) -> List[CityWithoutPointsOfInterestDto]:
    return [to_city_without_points_of_interest_dto(entity) for entity in entities]


def to_city_dto(entity: City) -> CityDto:
    return CityDto(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        points_of_interest=to_point_of_interest_dtos(entity.points_of_interest),
    )


def to_city_detail_dto(
    entity: City, include_points_of_interest: bool
) -> Union[CityDto, CityWithoutPointsOfInterestDto]:
    if include_points_of_interest:
        return to_city_dto(entity)
    return to_city_without_points_of_interest_dto(entity)
