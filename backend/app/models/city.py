"""
City Info Backend — City SQLAlchemy Model
===========================================

What:  ORM model representing the `cities` table.
Who:   Used by CityInfoRepository for queries and by Alembic for schema management.

Table Design Rationale:
    - Integer surrogate key: assigned by the database on insert
    - name: Exact-match filter and sort key of the cities list, hence indexed
    - description: Optional free text, covered by the search query filter

Lifecycle:
    Cities are created by the seed migration. The API only reads them.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.point_of_interest import PointOfInterest


class City(Base):
    """
    A city owning a set of points of interest.

    Query Patterns:
        - Existence check: SELECT 1 FROM cities WHERE id = :id
        - Filtered page: ... WHERE lower(name) = :name ORDER BY name LIMIT/OFFSET
        - Detail with children: selectinload on points_of_interest
    """

    __tablename__ = "cities"

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

    # ── Relationships ─────────────────────────────────────────────────────
    # Loaded only on request (selectinload); async sessions cannot lazy-load,
    # so code paths that did not ask for children must never touch this.
    points_of_interest: Mapped[List["PointOfInterest"]] = relationship(
        back_populates="city",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_cities_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<City(id={self.id}, name='{self.name}')>"
