#!/usr/bin/env python3
"""
Storefront CLI

Browse the catalog and manage a cart from the terminal.

Usage:
    storefront products --limit 20 --collection "T-Shirts"
    storefront collections
    storefront product classic-tee --color Blue --size M --quantity 2
    storefront cart add gid://shopify/ProductVariant/1 --quantity 2
    storefront cart show
    storefront cart remove gid://shopify/CartLine/1
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cart.store import CartStore
from .catalog.display import description_text, format_price, product_card
from .catalog.listing import filter_by_collection
from .catalog.product_detail import ProductDetailState
from .catalog.variants import clamp_quantity
from .common.config_loader import load_settings
from .common.constants import ALL_COLLECTIONS, DEFAULT_PAGE_SIZE
from .common.log_config import setup_logging
from .exceptions import StorefrontError
from .models.schema import Cart, Product
from .shopify.api_client import StorefrontAPIClient
from .shopify.operations import Storefront

logger = logging.getLogger(__name__)

DEFAULT_CART_FILE = ".storefront_cart.json"


def print_products(products: List[Product]) -> None:
    print(f"\nPRODUCTS ({len(products)} items):")
    for idx, product in enumerate(products, 1):
        card = product_card(product)
        print(f"  {idx:>3}. {card['title'][:50]:50} {card['price']:>10}  {card['url']}")


def print_product(state: ProductDetailState) -> None:
    product = state.product

    print("\n" + "=" * 80)
    print(product.title)
    print("=" * 80)

    print(f"\nPrice: {state.price_label}")
    if state.stock_message:
        print(f"  {state.stock_message}")

    description = description_text(product)
    if description:
        print(f"\n{description}")

    if product.colors:
        print(f"\nColors: {', '.join(product.colors)}  (selected: {state.selected_color or '-'})")
    if product.sizes:
        print(f"Sizes:  {', '.join(product.sizes)}  (selected: {state.selected_size or '-'})")

    variant = state.current_variant
    if variant:
        match = "" if state.exact_match else " (no exact match)"
        print(f"\nVariant: {variant.title or variant.id}{match}")
        print(f"  ID: {variant.id}")

    print(f"\nQuantity: {state.quantity}")
    print(f"[ {state.button_label} ]")
    print("\n" + "=" * 80)


def print_cart(cart: Optional[Cart]) -> None:
    if cart is None:
        print("\nCart is empty.")
        return

    print(f"\nCART ({cart.total_quantity} items)")
    print("-" * 80)
    for line in cart.lines:
        merchandise = line.merchandise
        axes = ", ".join(v for v in (merchandise.color, merchandise.size) if v)
        label = f"{merchandise.product.title} - {merchandise.title}"
        if axes:
            label += f" ({axes})"
        print(f"  {line.quantity:>3} x {label[:50]:50} {format_price(line.cost.total_amount.amount):>10}")
        print(f"        line: {line.id}")
    print("-" * 80)
    print(f"  Subtotal: {format_price(cart.cost.subtotal_amount.amount)}")
    print(f"  Checkout: {cart.checkout_url}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a Shopify storefront catalog and manage a cart"
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--env-file", help=".env file with Shopify credentials")
    parser.add_argument(
        "--cart-file",
        default=DEFAULT_CART_FILE,
        help=f"File remembering the cart ID (default: {DEFAULT_CART_FILE})"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only warnings and errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    products = subparsers.add_parser("products", help="List products")
    products.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE)
    products.add_argument("--collection", default=ALL_COLLECTIONS, help="Collection title filter")

    collections = subparsers.add_parser("collections", help="List collections")
    collections.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE)

    product = subparsers.add_parser("product", help="Show one product")
    product.add_argument("handle")
    product.add_argument("--color")
    product.add_argument("--size")
    product.add_argument("--quantity", default="1")
    product.add_argument("--add", action="store_true", help="Add the selected variant to the cart")

    cart = subparsers.add_parser("cart", help="Show or change the cart")
    cart_actions = cart.add_subparsers(dest="action", required=True)
    cart_actions.add_parser("show")
    add = cart_actions.add_parser("add")
    add.add_argument("variant_id")
    add.add_argument("--quantity", default="1")
    remove = cart_actions.add_parser("remove")
    remove.add_argument("line_ids", nargs="+")
    cart_actions.add_parser("clear")

    return parser


def run(args: argparse.Namespace, storefront: Storefront) -> int:
    store = CartStore(storefront, cart_id_path=args.cart_file)

    if args.command == "products":
        products = storefront.get_all_products(limit=args.limit)
        print_products(filter_by_collection(products, args.collection))

    elif args.command == "collections":
        for collection in storefront.get_collections(limit=args.limit):
            print(f"  {collection.title}")

    elif args.command == "product":
        state = ProductDetailState(storefront.get_product_by_handle(args.handle))
        if args.color:
            state.select_color(args.color)
        if args.size:
            state.select_size(args.size)
        state.set_quantity(args.quantity)
        print_product(state)

        if args.add:
            if not state.add_to_basket(store):
                logger.error("%s cannot be added: %s", args.handle, state.button_label)
                return 1
            print_cart(store.get())

    elif args.command == "cart":
        if args.action == "show":
            print_cart(store.init_cart())
        elif args.action == "add":
            print_cart(store.add_cart_item(args.variant_id, clamp_quantity(args.quantity)))
        elif args.action == "remove":
            print_cart(store.remove_cart_items(args.line_ids))
        elif args.action == "clear":
            store.clear()
            print("Cart cleared.")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_settings(config_path=args.config, env_file=args.env_file)
        client = StorefrontAPIClient(
            shop=settings.shop,
            public_access_token=settings.public_access_token,
            private_access_token=settings.private_access_token,
            api_version=settings.api_version,
        )
        with client:
            return run(args, Storefront(client))
    except StorefrontError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
