"""002: create listings table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE listings (
            id          UUID            PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id     VARCHAR(64)     NOT NULL,
            title       VARCHAR(200)    NOT NULL,
            price_cents BIGINT          NOT NULL,
            image_url   VARCHAR(1000),
            status      VARCHAR(16)     NOT NULL DEFAULT 'active',
            created_at  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_listings_price_gte_0 CHECK (price_cents >= 0),
            CONSTRAINT ck_listings_status CHECK (status IN ('active', 'sold', 'draft'))
        );
    """)
    op.execute("CREATE INDEX idx_listings_status_time ON listings (status, created_at DESC);")
    op.execute("CREATE INDEX idx_listings_status_price ON listings (status, price_cents DESC);")
    op.execute("COMMENT ON TABLE listings IS 'Marketplace listings: amounts in cents';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS listings CASCADE;")
