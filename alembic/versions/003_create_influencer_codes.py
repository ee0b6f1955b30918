"""003: create influencer_codes table

Revision ID: 003
Revises: 002
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE influencer_codes (
            id                  UUID            PRIMARY KEY DEFAULT gen_random_uuid(),
            code                VARCHAR(32)     NOT NULL,
            user_id             VARCHAR(64),
            discount_rate       NUMERIC(6, 4)   NOT NULL,
            monthly_cap_cents   BIGINT          NOT NULL,
            is_active           BOOLEAN         NOT NULL DEFAULT TRUE,
            approved_by         VARCHAR(64),
            approved_at         TIMESTAMPTZ,
            claimed_at          TIMESTAMPTZ,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_influencer_codes_rate CHECK (discount_rate >= 0 AND discount_rate <= 1),
            CONSTRAINT ck_influencer_codes_cap_gte_0 CHECK (monthly_cap_cents >= 0)
        );
    """)
    op.execute("CREATE UNIQUE INDEX uq_influencer_codes_code ON influencer_codes (upper(code));")
    # One code per user; unowned codes (user_id NULL) are unconstrained
    op.execute("""
        CREATE UNIQUE INDEX uq_influencer_codes_user_id
        ON influencer_codes (user_id)
        WHERE user_id IS NOT NULL;
    """)
    op.execute(
        "COMMENT ON TABLE influencer_codes IS "
        "'Discount codes: claimed only via UPDATE ... WHERE user_id IS NULL';"
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS influencer_codes CASCADE;")
