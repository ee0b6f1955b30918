"""ListingRepository: read-only queries feeding the homepage sections.

Rows come back in the primary ranking order; fairness is applied afterwards
in Python and never pushed into SQL.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.enums import ListingStatus
from src.cm_listing.domain.models import Listing, SellerProfile

_SELECT_LISTINGS = """
    SELECT l.id, l.user_id, l.title, l.price_cents, l.image_url, l.created_at,
           p.user_id AS profile_user_id, p.display_name, p.username
    FROM listings l
    LEFT JOIN profiles p ON p.user_id = l.user_id
    WHERE l.status = :status
"""

_NEWEST_ACTIVE_SQL = text(_SELECT_LISTINGS + """
    ORDER BY l.created_at DESC, l.id DESC
    LIMIT :limit
""")

_TOP_PRICED_ACTIVE_SQL = text(_SELECT_LISTINGS + """
    ORDER BY l.price_cents DESC, l.created_at DESC
    LIMIT :limit
""")


def _row_to_listing(row: object) -> Listing:
    profile_user_id = row.profile_user_id  # type: ignore[attr-defined]
    profile = None
    if profile_user_id is not None:
        profile = SellerProfile(
            user_id=str(profile_user_id),
            display_name=row.display_name,  # type: ignore[attr-defined]
            username=row.username,  # type: ignore[attr-defined]
        )
    user_id = row.user_id  # type: ignore[attr-defined]
    return Listing(
        id=str(row.id),  # type: ignore[attr-defined]
        user_id=str(user_id) if user_id is not None else None,
        title=row.title,  # type: ignore[attr-defined]
        price_cents=row.price_cents,  # type: ignore[attr-defined]
        image_url=row.image_url,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        profiles=profile,
    )


class ListingRepository:
    async def list_newest_active(self, db: AsyncSession, limit: int) -> list[Listing]:
        result = await db.execute(
            _NEWEST_ACTIVE_SQL, {"status": ListingStatus.ACTIVE.value, "limit": limit}
        )
        return [_row_to_listing(r) for r in result.fetchall()]

    async def list_top_priced_active(self, db: AsyncSession, limit: int) -> list[Listing]:
        result = await db.execute(
            _TOP_PRICED_ACTIVE_SQL, {"status": ListingStatus.ACTIVE.value, "limit": limit}
        )
        return [_row_to_listing(r) for r in result.fetchall()]
