"""Create users table and seed root/user accounts.

Revision ID: 20260120120000
Revises:
Create Date: 2026-01-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20260120120000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    users = op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("login", sa.String(length=8), nullable=False),
        sa.Column("phone", sa.String(length=8), nullable=False),
        sa.Column("pass", sa.String(length=8), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("login", "pass", name="uniq_login_pass"),
    )
    # The static API tokens resolve to these two logins.
    op.bulk_insert(
        users,
        [
            {"login": "root", "phone": "", "pass": "root"},
            {"login": "user", "phone": "", "pass": "user"},
        ],
    )


def downgrade() -> None:
    op.drop_table("users")
