"""SQLAlchemy ORM models for cm_discount.

These map to existing tables created by Alembic migrations.
DO NOT add/remove columns here without a corresponding migration.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Numeric, String, func
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.cm_common.database import Base


class InfluencerCodeORM(Base):
    __tablename__ = "influencer_codes"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    discount_rate: Mapped[float] = mapped_column(Numeric(6, 4), nullable=False)
    monthly_cap_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    approved_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    claimed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class DiscountUsageORM(Base):
    __tablename__ = "discount_usage"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    code_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey("influencer_codes.id"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    claim_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    item_price_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    savings_cents: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    month_year: Mapped[str] = mapped_column(String(7), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    # append-only ledger, so no updated_at
