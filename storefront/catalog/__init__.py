"""
Catalog logic over validated snapshots.

Modules:
    normalize      - Derived colors/sizes for products, merchandise and carts
    variants       - Variant resolution and quantity clamping
    product_detail - Product page selection state
    listing        - Collection filtering for the product listing
    display        - Price and description formatting
"""

from .normalize import normalize_cart, normalize_merchandise, normalize_product
from .variants import (
    VariantMatch,
    clamp_quantity,
    find_variant,
    initial_variant,
    is_product_available,
    resolve_variant,
)
from .product_detail import ProductDetailState
from .listing import filter_by_collection, toggle_collection

__all__ = [
    # Normalization
    'normalize_product',
    'normalize_merchandise',
    'normalize_cart',
    # Variant resolution
    'VariantMatch',
    'find_variant',
    'resolve_variant',
    'initial_variant',
    'is_product_available',
    'clamp_quantity',
    # Product page
    'ProductDetailState',
    # Listing
    'filter_by_collection',
    'toggle_collection',
]
