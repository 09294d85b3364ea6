"""
Cart Store

Process-wide cart state. One CartStore owns the current cart snapshot and
notifies subscribers whenever it is replaced. Only the cart ID is kept
between sessions (optionally in a small JSON file); the cart itself lives
server-side and is re-fetched by ID.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from ..models.schema import Cart
from ..shopify.operations import Storefront

logger = logging.getLogger(__name__)

Subscriber = Callable[[Optional[Cart]], None]


def load_cart_id(path: Path) -> Optional[str]:
    """Load a saved cart ID from file. An unreadable file counts as no cart."""
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable cart file %s: %s", path, e)
        return None

    cart_id = data.get("cart_id") if isinstance(data, dict) else None
    if not isinstance(cart_id, str) or not cart_id:
        logger.warning("Ignoring cart file %s without a cart ID", path)
        return None
    return cart_id


def save_cart_id(path: Path, cart_id: Optional[str]) -> None:
    """Save the cart ID to file (removes the file when there is no cart)."""
    if cart_id is None:
        if path.exists():
            path.unlink()
        return
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"cart_id": cart_id}, f, indent=2)


class CartStore:
    """
    Owned cart state with a read/write/subscribe contract.

    Usage:
        store = CartStore(storefront, cart_id_path=Path(".storefront_cart.json"))
        unsubscribe = store.subscribe(lambda cart: print(cart.total_quantity if cart else 0))
        store.init_cart()
        store.add_cart_item(variant_id, quantity=2)
        unsubscribe()
    """

    def __init__(self, storefront: Storefront, cart_id_path: Optional[Union[str, Path]] = None):
        self.storefront = storefront
        self.cart_id_path = Path(cart_id_path) if cart_id_path else None

        self._cart: Optional[Cart] = None
        self._cart_id: Optional[str] = load_cart_id(self.cart_id_path) if self.cart_id_path else None
        self._subscribers: List[Subscriber] = []

    @property
    def cart_id(self) -> Optional[str]:
        return self._cart_id

    def get(self) -> Optional[Cart]:
        return self._cart

    def set(self, cart: Optional[Cart]) -> None:
        """Replace the cart snapshot and notify subscribers."""
        self._cart = cart
        self._set_cart_id(cart.id if cart else None)
        for callback in list(self._subscribers):
            callback(cart)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call `callback` with the new snapshot on every change.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_cart_id(self, cart_id: Optional[str]) -> None:
        if cart_id == self._cart_id:
            return
        self._cart_id = cart_id
        if self.cart_id_path:
            save_cart_id(self.cart_id_path, cart_id)

    def init_cart(self) -> Optional[Cart]:
        """Re-fetch the remembered cart. A cart that no longer exists is forgotten."""
        if not self._cart_id:
            return None

        cart = self.storefront.get_cart(self._cart_id)
        if cart is None:
            logger.info("Cart %s no longer exists", self._cart_id)
        self.set(cart)
        return cart

    def add_cart_item(self, merchandise_id: str, quantity: int) -> Optional[Cart]:
        """Add a variant to the cart, creating the cart on first use."""
        if self._cart_id:
            cart = self.storefront.add_cart_lines(self._cart_id, merchandise_id, quantity)
        else:
            cart = self.storefront.create_cart(merchandise_id, quantity)
        logger.debug("Added %d x %s to cart", quantity, merchandise_id)
        self.set(cart)
        return cart

    def remove_cart_items(self, line_ids: Sequence[str]) -> Optional[Cart]:
        if not self._cart_id:
            return None
        cart = self.storefront.remove_cart_lines(self._cart_id, line_ids)
        self.set(cart)
        return cart

    def remove_cart_item(self, line_id: str) -> Optional[Cart]:
        return self.remove_cart_items([line_id])

    def clear(self) -> None:
        """Forget the cart locally. The server-side cart is left untouched."""
        self.set(None)
