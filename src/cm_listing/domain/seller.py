"""Seller helpers shared by fairness ranking and listing responses."""

import re
from collections.abc import Mapping
from typing import Any


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def get_seller_id(listing: Any) -> str | None:
    """Seller of a listing: user_id, then seller_id, then profiles.user_id.

    profiles may be a single mapping/object or a list of them (joined rows come
    back list-wrapped); only the first element counts. Works for dicts and for
    attribute-bearing objects alike.
    """
    for name in ("user_id", "seller_id"):
        value = _field(listing, name)
        if value:
            return str(value)

    profile = _field(listing, "profiles")
    if isinstance(profile, (list, tuple)):
        profile = profile[0] if profile else None
    if profile is not None:
        value = _field(profile, "user_id")
        if value:
            return str(value)
    return None


def get_seller_slug(display_name: str | None, username: str | None) -> str:
    """URL slug for a seller; display_name wins, email addresses keep the local part."""
    name = display_name or username or "seller"
    if "@" in name:
        return re.sub(r"[^a-z0-9]+", "-", name.split("@")[0].lower())
    slug = re.sub(r"[^a-z0-9\s-]", "", name.lower()).strip()
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)
