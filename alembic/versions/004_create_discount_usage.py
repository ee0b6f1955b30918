"""004: create discount_usage table

Revision ID: 004
Revises: 003
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE discount_usage (
            id                  BIGSERIAL       PRIMARY KEY,
            code_id             UUID            NOT NULL REFERENCES influencer_codes (id),
            user_id             VARCHAR(64)     NOT NULL,
            claim_id            VARCHAR(64),
            item_price_cents    BIGINT          NOT NULL,
            savings_cents       BIGINT          NOT NULL DEFAULT 0,
            month_year          VARCHAR(7)      NOT NULL,
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_discount_usage_savings_gte_0 CHECK (savings_cents >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_discount_usage_user_month ON discount_usage (user_id, month_year);")
    op.execute("COMMENT ON TABLE discount_usage IS 'Append-only discount savings ledger, amounts in cents';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS discount_usage CASCADE;")
