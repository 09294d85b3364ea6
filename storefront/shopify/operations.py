"""
Storefront Operations

Catalog and cart operations over the Storefront API. Every payload is
validated and normalized before it is returned.

Only the catalog listing degrades gracefully (to an empty list); every other
operation raises a StorefrontError to its caller. Nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..catalog.normalize import normalize_cart, normalize_product
from ..common.constants import DEFAULT_PAGE_SIZE
from ..exceptions import GraphQLError, NotFoundError, StorefrontError
from ..models.schema import Cart, Collection, Product, connection_nodes, validate_model
from . import queries
from .api_client import StorefrontAPIClient

logger = logging.getLogger(__name__)


class Storefront:
    """
    Product catalog and cart access.

    Usage:
        storefront = Storefront(StorefrontAPIClient(shop="my-store", private_access_token="..."))
        products = storefront.get_all_products(limit=20)
        cart = storefront.create_cart(products[0].variants[0].id, quantity=1)
    """

    def __init__(self, client: StorefrontAPIClient):
        self.client = client

    def get_all_products(self, limit: int = DEFAULT_PAGE_SIZE, buyer_ip: str = "") -> List[Product]:
        """
        Fetch the first `limit` products, normalized.

        Any failure (transport, API errors, invalid payload) is logged and an
        empty list is returned instead.
        """
        try:
            data = self.client.graphql_request(queries.PRODUCTS_QUERY, {"first": limit}, buyer_ip=buyer_ip)
            if not isinstance(data, dict):
                raise StorefrontError("Unexpected response data")
            nodes = connection_nodes(data.get("products"))
            if not isinstance(nodes, list):
                raise StorefrontError("No products found or invalid data structure")
            return [normalize_product(node) for node in nodes]
        except StorefrontError as e:
            logger.error("Error in get_all_products: %s", e)
            return []

    def get_product_by_handle(self, handle: str, buyer_ip: str = "") -> Product:
        """
        Fetch one product by handle.

        Raises:
            NotFoundError: no product has this handle
        """
        data = self.client.graphql_request(queries.PRODUCT_BY_HANDLE_QUERY, {"handle": handle}, buyer_ip=buyer_ip)
        product = data.get("product")
        if not product:
            raise NotFoundError(f"No product found for handle {handle!r}")

        return normalize_product(product)

    def get_collections(self, limit: int = DEFAULT_PAGE_SIZE, buyer_ip: str = "") -> List[Collection]:
        data = self.client.graphql_request(queries.COLLECTIONS_QUERY, {"first": limit}, buyer_ip=buyer_ip)
        nodes = connection_nodes(data.get("collections")) or []
        return [validate_model(Collection, node) for node in nodes]

    def _cart_from_mutation(self, data: Dict[str, Any], field: str) -> Optional[Cart]:
        payload = data.get(field) or {}
        user_errors = payload.get("userErrors") or []
        if user_errors:
            raise GraphQLError([str(err.get("message", "")) for err in user_errors])
        return normalize_cart(payload.get("cart"))

    def create_cart(self, merchandise_id: str, quantity: int) -> Optional[Cart]:
        """Create a cart holding one line and return it."""
        data = self.client.graphql_request(
            queries.CREATE_CART_MUTATION, {"id": merchandise_id, "quantity": quantity}
        )
        cart = self._cart_from_mutation(data, "cartCreate")
        logger.info("Created cart %s", cart.id if cart else None)
        return cart

    def add_cart_lines(self, cart_id: str, merchandise_id: str, quantity: int) -> Optional[Cart]:
        """Add a line to an existing cart and return the updated cart."""
        data = self.client.graphql_request(queries.ADD_CART_LINES_MUTATION, {
            "cartId": cart_id,
            "merchandiseId": merchandise_id,
            "quantity": quantity,
        })
        return self._cart_from_mutation(data, "cartLinesAdd")

    def remove_cart_lines(self, cart_id: str, line_ids: Sequence[str]) -> Optional[Cart]:
        """Remove lines (by line ID) from a cart and return the updated cart."""
        data = self.client.graphql_request(queries.REMOVE_CART_LINES_MUTATION, {
            "cartId": cart_id,
            "lineIds": list(line_ids),
        })
        return self._cart_from_mutation(data, "cartLinesRemove")

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Fetch a cart by ID. Returns None when the cart no longer exists."""
        data = self.client.graphql_request(queries.GET_CART_QUERY, {"id": cart_id})
        return normalize_cart(data.get("cart"))
