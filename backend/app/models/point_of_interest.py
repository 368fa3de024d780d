"""
City Info Backend — PointOfInterest SQLAlchemy Model
======================================================

What:  ORM model representing the `points_of_interest` table.
Who:   Used by CityInfoRepository for CRUD and by Alembic for schema management.

Lifecycle:
    1. Created via POST scoped to a city (id assigned on commit)
    2. Replaced via PUT, partially modified via PATCH
    3. Deleted via DELETE (triggers the mail notification)
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.city import City


class PointOfInterest(Base):
    """
    A point of interest owned by exactly one city.

    Ownership:
        city_id is non-null; every lookup is scoped by (city_id, id) so an
        item under another city is never returned.
    """

    __tablename__ = "points_of_interest"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
        default=None,
    )

    city_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cities.id", ondelete="CASCADE"),
        nullable=False,
    )

    city: Mapped["City"] = relationship(back_populates="points_of_interest")

    # (city_id, id) lookups and "all points of interest for a city"
    __table_args__ = (
        Index("idx_points_of_interest_city_id", "city_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<PointOfInterest(id={self.id}, city_id={self.city_id}, "
            f"name='{self.name}')>"
        )
