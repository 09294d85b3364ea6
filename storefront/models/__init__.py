"""
Data models for catalog and cart snapshots.

This module contains the schema definitions and their validation entry points.
"""

from .schema import (
    Cart,
    CartCost,
    CartLine,
    CartLineCost,
    Collection,
    Image,
    Merchandise,
    MerchandiseProduct,
    MoneyAmount,
    OptionDefinition,
    Product,
    SelectedOption,
    Variant,
    to_record,
    validate_cart,
    validate_merchandise,
    validate_product,
)

__all__ = [
    'MoneyAmount', 'Image', 'OptionDefinition', 'SelectedOption', 'Collection',
    'Variant', 'Product', 'MerchandiseProduct', 'Merchandise',
    'CartLineCost', 'CartLine', 'CartCost', 'Cart',
    'to_record', 'validate_product', 'validate_merchandise', 'validate_cart',
]
