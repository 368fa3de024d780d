"""Create cities and points_of_interest tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the two related tables behind the API.
How:   Integer surrogate keys; points_of_interest.city_id references cities.id.

Rollback: downgrade() drops both tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both tables with constraints and indexes — see app/models/ for docs."""
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_cities_name", "cities", ["name"])

    op.create_table(
        "points_of_interest",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column("city_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["city_id"], ["cities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_points_of_interest_city_id",
        "points_of_interest",
        ["city_id"],
    )


def downgrade() -> None:
    """Drop both tables, children first."""
    op.drop_index("idx_points_of_interest_city_id", table_name="points_of_interest")
    op.drop_table("points_of_interest")
    op.drop_index("idx_cities_name", table_name="cities")
    op.drop_table("cities")
