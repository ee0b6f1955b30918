"""Domain models for cm_listing: read-only listing rows."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SellerProfile:
    user_id: str | None
    display_name: str | None = None
    username: str | None = None


@dataclass(frozen=True)
class Listing:
    id: str
    user_id: str | None            # seller
    title: str
    price_cents: int
    image_url: str | None = None
    created_at: datetime | None = None
    profiles: SellerProfile | None = None
