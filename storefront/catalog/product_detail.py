"""
Product Detail State

Selection state behind the product page: chosen color/size, quantity,
the resolved variant and the add-to-basket loading flag.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from ..common.constants import MAX_QUANTITY, MIN_QUANTITY
from ..models.schema import Product, Variant
from .display import format_price
from .variants import (
    clamp_quantity,
    find_variant,
    initial_variant,
    is_product_available,
    is_variant_available,
)

if TYPE_CHECKING:
    from ..cart.store import CartStore

logger = logging.getLogger(__name__)

SELECTED_OUT_OF_STOCK = "Selected variant out of stock"
OUT_OF_STOCK = "Out of stock"


class ProductDetailState:
    """
    Interaction state for one normalized product.

    Usage:
        state = ProductDetailState(product)
        state.select_color("Blue")
        state.set_quantity("3")
        if state.can_add_to_basket:
            state.add_to_basket(cart_store)
    """

    def __init__(self, product: Product):
        self.product = product

        initial = initial_variant(product.variants)
        self.current_variant: Optional[Variant] = initial
        self.exact_match = initial is not None
        self.selected_color = initial.color if initial else None
        self.selected_size = initial.size if initial else None

        self.quantity = MIN_QUANTITY
        self.is_loading = False

        # Fixed at load; later selections do not change it
        self.is_product_available = is_product_available(product.variants)

    def _resolve(self) -> None:
        match = find_variant(
            self.product.variants,
            self.selected_color,
            self.selected_size,
            sizes=self.product.sizes,
        )
        self.current_variant = match.variant
        self.exact_match = match.exact
        if not match.exact:
            logger.debug("No variant of %s matches color=%r size=%r, showing %s",
                         self.product.handle, self.selected_color, self.selected_size,
                         match.variant.id if match.variant else None)

    def select_color(self, color: Optional[str]) -> None:
        if self.is_loading:
            return
        self.selected_color = color
        self._resolve()

    def select_size(self, size: Optional[str]) -> None:
        if self.is_loading:
            return
        self.selected_size = size
        self._resolve()

    def set_quantity(self, value: Any) -> int:
        if not self.is_loading:
            self.quantity = clamp_quantity(value)
        return self.quantity

    def increment_quantity(self) -> int:
        return self.set_quantity(min(MAX_QUANTITY, self.quantity + 1))

    def decrement_quantity(self) -> int:
        return self.set_quantity(max(MIN_QUANTITY, self.quantity - 1))

    @property
    def is_variant_available(self) -> bool:
        return is_variant_available(self.current_variant)

    @property
    def can_add_to_basket(self) -> bool:
        return not self.is_loading and self.is_variant_available

    def add_to_basket(self, cart_store: "CartStore") -> bool:
        """
        Add the current variant to the cart.

        The loading flag is held for the single in-flight request, so a second
        call made meanwhile is ignored. Errors propagate to the caller.

        Returns:
            True if a request was issued
        """
        if not self.can_add_to_basket:
            return False

        self.is_loading = True
        try:
            cart_store.add_cart_item(self.current_variant.id, self.quantity)
        finally:
            self.is_loading = False
        return True

    @property
    def price_label(self) -> str:
        variant = self.current_variant
        amount = variant.price.amount if variant and variant.price else None
        return format_price(amount)

    @property
    def stock_message(self) -> Optional[str]:
        """None while the current variant can be bought."""
        if self.is_variant_available:
            return None
        return SELECTED_OUT_OF_STOCK if self.is_product_available else OUT_OF_STOCK

    @property
    def button_label(self) -> str:
        if self.is_variant_available:
            plural = "s" if self.quantity > 1 else ""
            return f"Add {self.quantity} Item{plural} to Basket"
        return self.stock_message
