"""Create users table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `users` table holding schema-flexible user documents.
How:   Integer surrogate key, non-unique indexed `id`, JSON body (JSONB on
       PostgreSQL), server-side creation timestamp.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the users table and its lookup index. See bookmarker/models/user.py."""
    op.create_table(
        "users",
        sa.Column(
            "pk",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Surrogate key; defines insertion order",
        ),
        sa.Column(
            "id",
            sa.Text(),
            nullable=False,
            comment="Document id used for lookups (not unique)",
        ),
        sa.Column(
            "attributes",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment="Schema-flexible document body",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this document was created (UTC)",
        ),
        sa.PrimaryKeyConstraint("pk"),
    )

    # Lookups go through the `id` field, not the primary key
    op.create_index("idx_users_id", "users", ["id"])


def downgrade() -> None:
    """Drop the users table. Destructive: all user documents are lost."""
    op.drop_index("idx_users_id", table_name="users")
    op.drop_table("users")
