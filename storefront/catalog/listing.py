"""
Catalog Listing

Collection tabs over the product listing.
"""

from typing import List, Sequence

from ..common.constants import ALL_COLLECTIONS
from ..models.schema import Product


def filter_by_collection(products: Sequence[Product], active_collection: str = ALL_COLLECTIONS) -> List[Product]:
    """Products belonging to the collection titled `active_collection`, in listing order."""
    if active_collection == ALL_COLLECTIONS:
        return list(products)
    return [
        p for p in products
        if any(c.title == active_collection for c in p.collections)
    ]


def toggle_collection(active_collection: str, title: str) -> str:
    """Tab click: selecting the active tab again goes back to all products."""
    if active_collection == title:
        return ALL_COLLECTIONS
    return title
