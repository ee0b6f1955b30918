"""Global enums. Values must match DB CHECK constraints exactly."""

from enum import Enum


class ShippingMethod(str, Enum):
    SHIP_NATIONWIDE = "ship_nationwide"
    LOCAL_PICKUP = "local_pickup"


class ListingStatus(str, Enum):
    ACTIVE = "active"
    SOLD = "sold"
    DRAFT = "draft"


class HomepageSection(str, Enum):
    NEWLY_LISTED = "newly-listed"
    FEATURED_GRAILS = "featured-grails"
