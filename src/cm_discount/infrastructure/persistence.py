"""DiscountRepository: concrete implementation of DiscountRepositoryProtocol.

Code ownership changes only through _CLAIM_CODE_SQL: a single UPDATE guarded
by "active and unowned". Two concurrent redemptions of one code serialize on
the row lock; the loser re-evaluates the WHERE clause, matches nothing and
gets zero rows back. uq_influencer_codes_user_id keeps a user from holding two
codes even if they redeem two different codes at the same time.

Transaction ownership: the CALLER commits or rolls back.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.errors import InternalError
from src.cm_discount.domain.models import DiscountCode, DiscountUsage

_CODE_COLUMNS = """
    id, code, user_id, discount_rate, monthly_cap_cents, is_active, claimed_at, created_at
"""

_CLAIM_CODE_SQL = text(f"""
    UPDATE influencer_codes
    SET user_id = :user_id,
        claimed_at = NOW()
    WHERE upper(code) = upper(:code)
      AND is_active = TRUE
      AND user_id IS NULL
    RETURNING {_CODE_COLUMNS}
""")

_GET_ACTIVE_CODE_FOR_USER_SQL = text(f"""
    SELECT {_CODE_COLUMNS}
    FROM influencer_codes
    WHERE user_id = :user_id AND is_active = TRUE
""")

_LOCK_ACTIVE_CODE_FOR_USER_SQL = text(f"""
    SELECT {_CODE_COLUMNS}
    FROM influencer_codes
    WHERE user_id = :user_id AND is_active = TRUE
    FOR UPDATE
""")

_SUM_SAVINGS_SQL = text("""
    SELECT COALESCE(SUM(savings_cents), 0) AS total
    FROM discount_usage
    WHERE user_id = :user_id
      AND month_year = :month_year
""")

_INSERT_USAGE_SQL = text("""
    INSERT INTO discount_usage
        (code_id, user_id, claim_id, item_price_cents, savings_cents, month_year)
    VALUES
        (:code_id, :user_id, :claim_id, :item_price_cents, :savings_cents, :month_year)
    RETURNING id, code_id, user_id, claim_id, item_price_cents, savings_cents,
              month_year, created_at
""")


def _row_to_code(row: object) -> DiscountCode:
    user_id = row.user_id  # type: ignore[attr-defined]
    return DiscountCode(
        id=str(row.id),  # type: ignore[attr-defined]
        code=row.code,  # type: ignore[attr-defined]
        user_id=str(user_id) if user_id is not None else None,
        discount_rate=float(row.discount_rate),  # type: ignore[attr-defined]
        monthly_cap_cents=row.monthly_cap_cents,  # type: ignore[attr-defined]
        is_active=row.is_active,  # type: ignore[attr-defined]
        claimed_at=row.claimed_at,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


def _row_to_usage(row: object) -> DiscountUsage:
    return DiscountUsage(
        id=row.id,  # type: ignore[attr-defined]
        code_id=str(row.code_id),  # type: ignore[attr-defined]
        user_id=str(row.user_id),  # type: ignore[attr-defined]
        claim_id=row.claim_id,  # type: ignore[attr-defined]
        item_price_cents=row.item_price_cents,  # type: ignore[attr-defined]
        savings_cents=row.savings_cents,  # type: ignore[attr-defined]
        month_year=row.month_year,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class DiscountRepository:
    async def get_active_code_for_user(
        self, db: AsyncSession, user_id: str, for_update: bool = False
    ) -> DiscountCode | None:
        sql = _LOCK_ACTIVE_CODE_FOR_USER_SQL if for_update else _GET_ACTIVE_CODE_FOR_USER_SQL
        result = await db.execute(sql, {"user_id": user_id})
        row = result.fetchone()
        return _row_to_code(row) if row else None

    async def claim_code(
        self, db: AsyncSession, code: str, user_id: str
    ) -> DiscountCode | None:
        result = await db.execute(_CLAIM_CODE_SQL, {"code": code, "user_id": user_id})
        row = result.fetchone()
        return _row_to_code(row) if row else None

    async def sum_savings(self, db: AsyncSession, user_id: str, month_year: str) -> int:
        result = await db.execute(
            _SUM_SAVINGS_SQL, {"user_id": user_id, "month_year": month_year}
        )
        return int(result.scalar_one())

    async def insert_usage(
        self,
        db: AsyncSession,
        code_id: str,
        user_id: str,
        item_price_cents: int,
        savings_cents: int,
        month_year: str,
        claim_id: str | None,
    ) -> DiscountUsage:
        result = await db.execute(
            _INSERT_USAGE_SQL,
            {
                "code_id": code_id,
                "user_id": user_id,
                "claim_id": claim_id,
                "item_price_cents": item_price_cents,
                "savings_cents": savings_cents,
                "month_year": month_year,
            },
        )
        row = result.fetchone()
        if row is None:
            raise InternalError("discount_usage insert returned no rows")
        return _row_to_usage(row)
