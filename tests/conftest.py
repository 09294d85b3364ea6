"""Shared test fixtures."""

import pytest

from storefront.catalog.normalize import normalize_cart, normalize_product

ENV_VARS = (
    "SHOPIFY_SHOP",
    "PUBLIC_SHOPIFY_ACCESS_TOKEN",
    "PRIVATE_SHOPIFY_ACCESS_TOKEN",
    "SHOPIFY_API_VERSION",
)


def money(amount: str = "20.00") -> dict:
    return {"amount": amount, "currencyCode": "USD"}


def variant_node(variant_id: str, color=None, size=None, available=True, amount="20.00") -> dict:
    """Raw variant as returned by the API (no derived fields)."""
    selected = []
    if color is not None:
        selected.append({"name": "Color", "value": color})
    if size is not None:
        selected.append({"name": "Size", "value": size})

    node = {
        "id": f"gid://shopify/ProductVariant/{variant_id}",
        "title": " / ".join(v for v in (color, size) if v) or "Default Title",
        "selectedOptions": selected,
        "price": money(amount),
    }
    if available is not None:
        node["availableForSale"] = available
    return node


@pytest.fixture
def make_variant():
    """Factory for raw variant payloads."""
    return variant_node


@pytest.fixture
def raw_product():
    """Two-axis product (Color x Size) in API shape."""
    return {
        "id": "gid://shopify/Product/1",
        "title": "Classic Tee",
        "handle": "classic-tee",
        "description": "Soft cotton tee.",
        "descriptionHtml": "<p>Soft <strong>cotton</strong> tee.</p>",
        "options": [
            {"name": "Color", "values": ["Red", "Blue"]},
            {"name": "Size", "values": ["S", "M"]},
        ],
        "featuredImage": None,
        "images": {
            "nodes": [
                {"altText": None, "url": "https://cdn.shopify.com/tee.jpg", "width": 800, "height": 600},
            ]
        },
        "collections": {
            "nodes": [
                {"id": "gid://shopify/Collection/1", "title": "T-Shirts", "handle": "t-shirts"},
            ]
        },
        "variants": {
            "nodes": [
                variant_node("1", "Red", "S"),
                variant_node("2", "Red", "M", available=False),
                variant_node("3", "Blue", "S"),
                variant_node("4", "Blue", "M", amount="22.50"),
            ]
        },
    }


@pytest.fixture
def single_variant_product():
    """Product without options and one default variant."""
    return {
        "id": "gid://shopify/Product/2",
        "title": "Sticker Pack",
        "handle": "sticker-pack",
        "options": [],
        "images": {"nodes": []},
        "variants": {"nodes": [variant_node("10", amount="5.00")]},
    }


@pytest.fixture
def product(raw_product):
    return normalize_product(raw_product)


@pytest.fixture
def raw_cart():
    """Cart with one line whose merchandise has no derived fields."""
    return {
        "id": "gid://shopify/Cart/c1",
        "checkoutUrl": "https://shop.example.com/cart/c/c1",
        "totalQuantity": 2,
        "cost": {"subtotalAmount": money("40.00")},
        "lines": {
            "nodes": [
                {
                    "id": "gid://shopify/CartLine/l1",
                    "quantity": 2,
                    "cost": {
                        "amountPerQuantity": money("20.00"),
                        "subtotalAmount": money("40.00"),
                        "totalAmount": money("40.00"),
                    },
                    "merchandise": {
                        "id": "gid://shopify/ProductVariant/3",
                        "title": "Blue / S",
                        "availableForSale": True,
                        "selectedOptions": [
                            {"name": "Color", "value": "Blue"},
                            {"name": "Size", "value": "S"},
                        ],
                        "price": money("20.00"),
                        "image": None,
                        "product": {
                            "id": "gid://shopify/Product/1",
                            "title": "Classic Tee",
                            "handle": "classic-tee",
                            "options": [
                                {"name": "Color", "values": ["Red", "Blue"]},
                                {"name": "Size", "values": ["S", "M"]},
                            ],
                        },
                    },
                }
            ]
        },
    }


@pytest.fixture
def cart(raw_cart):
    return normalize_cart(raw_cart)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Shopify settings from the environment, including ones a .env file sets later."""
    for name in ENV_VARS:
        # setenv first so teardown deletes whatever load_dotenv puts there
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch
