"""001: create profiles table

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE profiles (
            user_id             VARCHAR(64)     PRIMARY KEY,
            display_name        VARCHAR(100),
            username            VARCHAR(64),
            custom_fee_rate     NUMERIC(6, 4),
            is_founding_seller  BOOLEAN         NOT NULL DEFAULT FALSE,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_profiles_custom_fee_rate CHECK (
                custom_fee_rate IS NULL OR (custom_fee_rate >= 0 AND custom_fee_rate <= 1)
            )
        );
    """)
    op.execute(
        "COMMENT ON COLUMN profiles.custom_fee_rate IS "
        "'NULL = default rate, 0 = processor fee only, else all-in seller rate';"
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS profiles CASCADE;")
