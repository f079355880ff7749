"""seed initial lessons

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

Fixed UUIDs keep the storefront's local fixtures stable across resets.
"""
from uuid import UUID

from alembic import op
import sqlalchemy as sa

revision = "002"
down_revision = "001"
branch_labels = None
depends_on = None

SEED_DATA = [
    {"id": "00000000-0000-0000-0000-000000000001", "title": "Algebra", "location": "Hendon",
     "price": 100.0, "subject": "Math", "image": "math.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000002", "title": "Creative Writing", "location": "Colindale",
     "price": 80.0, "subject": "English", "image": "english.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000003", "title": "Chemistry Lab", "location": "Brent Cross",
     "price": 90.0, "subject": "Science", "image": "chemistry.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000004", "title": "Oil Painting", "location": "Golders Green",
     "price": 95.0, "subject": "Art", "image": "art.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000005", "title": "Piano", "location": "Hendon",
     "price": 120.0, "subject": "Music", "image": "music.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000006", "title": "Football", "location": "Mill Hill",
     "price": 60.0, "subject": "Sport", "image": "football.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000007", "title": "Spanish", "location": "Colindale",
     "price": 85.0, "subject": "Languages", "image": "spanish.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000008", "title": "Python Programming", "location": "Brent Cross",
     "price": 110.0, "subject": "Computing", "image": "python.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000009", "title": "Drama", "location": "Golders Green",
     "price": 70.0, "subject": "Arts", "image": "drama.png", "total_inventory": 5},
    {"id": "00000000-0000-0000-0000-000000000010", "title": "Chess Club", "location": "Mill Hill",
     "price": 50.0, "subject": "Games", "image": "chess.png", "total_inventory": 5},
]


def upgrade() -> None:
    lessons = sa.table(
        "lessons",
        sa.column("id", sa.Uuid()),
        sa.column("title", sa.String()),
        sa.column("location", sa.String()),
        sa.column("price", sa.Float()),
        sa.column("subject", sa.String()),
        sa.column("image", sa.String()),
        sa.column("total_inventory", sa.Integer()),
        sa.column("available_inventory", sa.Integer()),
    )
    op.bulk_insert(
        lessons,
        [{**row, "id": UUID(row["id"]), "available_inventory": row["total_inventory"]} for row in SEED_DATA],
    )


def downgrade() -> None:
    op.execute("DELETE FROM lessons")
