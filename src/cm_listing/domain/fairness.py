"""Seller fairness for homepage listing order.

Both functions only reorder: the output is always a permutation of the
input, and listings themselves are never touched. Per-seller counts live in
a local dict for the duration of one call.
"""

from collections.abc import Sequence
from typing import TypeVar

from src.cm_listing.domain.seller import get_seller_id

T = TypeVar("T")

DEFAULT_MAX_PER_SELLER_IN_TOP = 4
DEFAULT_TOP_WINDOW_SIZE = 50
DEFAULT_MAX_CONSECUTIVE = 2


def apply_homepage_fairness(
    listings: Sequence[T],
    max_per_seller_in_top: int = DEFAULT_MAX_PER_SELLER_IN_TOP,
    top_window_size: int = DEFAULT_TOP_WINDOW_SIZE,
) -> list[T]:
    """Cap each seller's listings inside the top window, pushing the excess to the tail.

    Input order is taken as the primary ranking. A listing joins the fair bucket
    while the bucket is smaller than top_window_size and its seller has fewer
    than max_per_seller_in_top listings there; otherwise it is deferred. Listings
    without a seller always join the fair bucket.

    Once the window is full every remaining seller-bearing listing is deferred,
    including a seller's only listing. Result: fair bucket + deferred bucket,
    each in original relative order.
    """
    if not listings:
        return []

    seller_counts: dict[str, int] = {}
    fair: list[T] = []
    deferred: list[T] = []

    for listing in listings:
        seller_id = get_seller_id(listing)
        if seller_id is None:
            fair.append(listing)
            continue

        count = seller_counts.get(seller_id, 0)
        if len(fair) < top_window_size and count < max_per_seller_in_top:
            fair.append(listing)
            seller_counts[seller_id] = count + 1
        else:
            deferred.append(listing)

    return fair + deferred


def interleave_by_seller_for_carousel(
    listings: Sequence[T],
    max_consecutive: int = DEFAULT_MAX_CONSECUTIVE,
) -> list[T]:
    """Break up same-seller runs longer than max_consecutive, best effort.

    Greedy: take listings in order, but once the current run hits
    max_consecutive pull forward the first remaining listing from another
    seller. With no other seller left the run simply continues. Listings
    without a seller never extend or start a run.
    """
    if len(listings) <= 1:
        return list(listings)

    result: list[T] = []
    remaining = list(listings)
    last_seller: str | None = None
    run_length = 0

    while remaining:
        index = 0
        if run_length >= max_consecutive:
            index = next(
                (i for i, item in enumerate(remaining) if get_seller_id(item) != last_seller),
                0,
            )

        selected = remaining.pop(index)
        seller = get_seller_id(selected)
        if seller is None:
            last_seller, run_length = None, 0
        elif seller == last_seller:
            run_length += 1
        else:
            last_seller, run_length = seller, 1
        result.append(selected)

    return result
