"""Pydantic response schemas for cm_listing API."""

from pydantic import BaseModel

from src.cm_common.cents import cents_to_display
from src.cm_listing.domain.models import Listing
from src.cm_listing.domain.seller import get_seller_id, get_seller_slug


class ListingItem(BaseModel):
    id: str
    title: str
    price_cents: int
    price_display: str
    image_url: str | None
    seller_id: str | None
    seller_slug: str | None
    created_at: str | None  # ISO8601 string

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingItem":
        profile = listing.profiles
        return cls(
            id=listing.id,
            title=listing.title,
            price_cents=listing.price_cents,
            price_display=cents_to_display(listing.price_cents),
            image_url=listing.image_url,
            seller_id=get_seller_id(listing),
            seller_slug=get_seller_slug(profile.display_name, profile.username) if profile else None,
            created_at=listing.created_at.isoformat() if listing.created_at else None,
        )


class HomepageSectionResponse(BaseModel):
    section: str
    items: list[ListingItem]
    from_cache: bool
