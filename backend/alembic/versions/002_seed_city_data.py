"""Seed cities and points of interest

Revision ID: 002
Revises: 001
Create Date: 2024-01-15 00:05:00.000000+00:00

What:  Inserts the initial cities (the API has no endpoint to create them).
How:   Rows come from app.seed_data so the test-suite seeds the same data.
       On PostgreSQL the id sequences are advanced past the explicit ids.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from app.seed_data import SEED_CITIES, SEED_POINTS_OF_INTEREST

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


cities = sa.table(
    "cities",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
)

points_of_interest = sa.table(
    "points_of_interest",
    sa.column("id", sa.Integer),
    sa.column("city_id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(cities, SEED_CITIES)
    op.bulk_insert(points_of_interest, SEED_POINTS_OF_INTEREST)

    # Explicit ids do not advance PostgreSQL sequences
    if op.get_bind().dialect.name == "postgresql":
        for table in ("cities", "points_of_interest"):
            op.execute(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"(SELECT MAX(id) FROM {table}))"
            )


def downgrade() -> None:
    seeded_poi_ids = [row["id"] for row in SEED_POINTS_OF_INTEREST]
    seeded_city_ids = [row["id"] for row in SEED_CITIES]
    op.execute(
        points_of_interest.delete().where(points_of_interest.c.id.in_(seeded_poi_ids))
    )
    op.execute(cities.delete().where(cities.c.id.in_(seeded_city_ids)))
