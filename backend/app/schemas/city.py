"""
City Info Backend — City Schemas
==================================

What:  Pydantic models for the city wire formats.

Shapes:
    - CityWithoutPointsOfInterestDto: list endpoint, and detail when
      includePointsOfInterest is false
    - CityDto: detail when includePointsOfInterest is true

CityDto fields have no defaults: FastAPI validates the detail response
against Union[CityDto, CityWithoutPointsOfInterestDto], and a light payload
must fail the CityDto branch.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from app.schemas.point_of_interest import PointOfInterestDto


class CityWithoutPointsOfInterestDto(BaseModel):
    """A city without its points of interest."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(description="The id of the city")
    name: str = Field(description="The name of the city")
    description: Optional[str] = Field(default=None, description="The description of the city")


class CityDto(BaseModel):
    """A city together with all of its points of interest."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    description: Optional[str]
    points_of_interest: List[PointOfInterestDto]

    @computed_field(alias="numberOfPointsOfInterest")
    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)
