"""
City Info Backend — Point of Interest Schemas
==============================================

What:  Pydantic models for the point-of-interest wire formats.
Why:   The API contract is separate from the ORM model: clients never send
       ids or city ids, and the update shape is what patch documents target.

Shapes:
    - PointOfInterestDto:            returned by every read/create endpoint
    - PointOfInterestForCreationDto: POST body
    - PointOfInterestForUpdateDto:   PUT body, and the transient target of PATCH

Creation and update share one set of rules so a patched DTO is validated
exactly like a PUT payload.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200


class PointOfInterestDto(BaseModel):
    """Full representation of a point of interest."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(description="Server-assigned identifier")
    name: str = Field(description="Name of the point of interest")
    description: Optional[str] = Field(default=None, description="Free-text description")


class PointOfInterestWriteDto(BaseModel):
    """
    Validation rules shared by the creation and update bodies.

    name:        required, not blank, at most 50 characters
    description: optional, at most 200 characters
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="You should provide a name value.",
    )
    description: Optional[str] = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("You should provide a name value.")
        return v


class PointOfInterestForCreationDto(PointOfInterestWriteDto):
    """POST /api/cities/{cityId}/pointsofinterest body."""


class PointOfInterestForUpdateDto(PointOfInterestWriteDto):
    """PUT body; also the document a PATCH is applied to."""
