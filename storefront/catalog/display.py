"""
Display Helpers

Text shown for products in the listing and on the product page.
"""

from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from bs4 import BeautifulSoup

from ..models.schema import Product


def format_price(amount: Optional[str]) -> str:
    """
    Format a decimal amount string for display.

    Example:
        >>> format_price("12.5")
        '$12.50'
    """
    try:
        value = Decimal(amount) if amount else Decimal("0")
    except InvalidOperation:
        value = Decimal("0")
    return f"${value:.2f}"


def product_card(product: Product) -> Dict[str, str]:
    """Summary used by the catalog listing: title, link, first-variant price, first image."""
    first_variant = product.variants[0] if product.variants else None
    amount = first_variant.price.amount if first_variant and first_variant.price else None
    first_image = next((img for img in product.images if img is not None), None)

    return {
        "title": product.title,
        "url": f"/product/{product.handle}",
        "price": format_price(amount),
        "image_url": first_image.url if first_image else "",
    }


def description_text(product: Product) -> str:
    """Plain-text description, from descriptionHtml when available."""
    if product.description_html:
        soup = BeautifulSoup(product.description_html, "html.parser")
        return soup.get_text(" ", strip=True)
    return product.description or ""
