"""Tests for storefront/cart/store.py"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from storefront.cart.store import CartStore, load_cart_id, save_cart_id
from storefront.exceptions import TransportError
from storefront.shopify.operations import Storefront


@pytest.fixture
def storefront():
    return MagicMock(spec=Storefront)


@pytest.fixture
def cart_file(tmp_path):
    return tmp_path / "cart.json"


class TestCartIdFile:
    def test_missing_file(self, cart_file):
        assert load_cart_id(cart_file) is None

    def test_save_and_load(self, cart_file):
        save_cart_id(cart_file, "gid://shopify/Cart/c1")
        assert json.loads(cart_file.read_text(encoding="utf-8")) == {"cart_id": "gid://shopify/Cart/c1"}
        assert load_cart_id(cart_file) == "gid://shopify/Cart/c1"

    def test_save_none_removes_file(self, cart_file):
        save_cart_id(cart_file, "gid://shopify/Cart/c1")
        save_cart_id(cart_file, None)
        assert not cart_file.exists()

    @pytest.mark.parametrize("content", ["{not json", "[\"gid://shopify/Cart/c1\"]", "{\"cart_id\": 42}", ""])
    def test_unreadable_file_means_no_cart(self, cart_file, content, caplog):
        cart_file.write_text(content, encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="storefront"):
            assert load_cart_id(cart_file) is None
        assert "cart file" in caplog.text

    def test_corrupt_file_replaced_by_next_cart(self, storefront, cart, cart_file):
        cart_file.write_text("{not json", encoding="utf-8")
        storefront.create_cart.return_value = cart
        store = CartStore(storefront, cart_id_path=cart_file)

        assert store.cart_id is None
        store.add_cart_item("gid://shopify/ProductVariant/3", 1)

        storefront.create_cart.assert_called_once()
        assert load_cart_id(cart_file) == cart.id


class TestAddCartItem:
    def test_first_add_creates_cart(self, storefront, cart):
        storefront.create_cart.return_value = cart
        store = CartStore(storefront)

        result = store.add_cart_item("gid://shopify/ProductVariant/3", 2)

        assert result is cart
        assert store.get() is cart
        assert store.cart_id == cart.id
        storefront.create_cart.assert_called_once_with("gid://shopify/ProductVariant/3", 2)
        storefront.add_cart_lines.assert_not_called()

    def test_later_adds_use_existing_cart(self, storefront, cart):
        storefront.create_cart.return_value = cart
        storefront.add_cart_lines.return_value = cart
        store = CartStore(storefront)

        store.add_cart_item("gid://shopify/ProductVariant/3", 1)
        store.add_cart_item("gid://shopify/ProductVariant/1", 1)

        storefront.create_cart.assert_called_once()
        storefront.add_cart_lines.assert_called_once_with(cart.id, "gid://shopify/ProductVariant/1", 1)

    def test_failure_keeps_previous_snapshot(self, storefront, cart):
        storefront.create_cart.return_value = cart
        storefront.add_cart_lines.side_effect = TransportError(500, "boom")
        store = CartStore(storefront)
        store.add_cart_item("gid://shopify/ProductVariant/3", 1)

        with pytest.raises(TransportError):
            store.add_cart_item("gid://shopify/ProductVariant/1", 1)
        assert store.get() is cart


class TestSubscribe:
    def test_subscribers_notified_on_set(self, storefront, cart):
        store = CartStore(storefront)
        seen = []
        store.subscribe(seen.append)

        store.set(cart)
        store.set(None)

        assert seen == [cart, None]

    def test_subscribe_does_not_fire_immediately(self, storefront):
        seen = []
        CartStore(storefront).subscribe(seen.append)
        assert seen == []

    def test_unsubscribe(self, storefront, cart):
        store = CartStore(storefront)
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        store.set(cart)

        assert seen == []

    def test_add_notifies_subscribers(self, storefront, cart):
        storefront.create_cart.return_value = cart
        store = CartStore(storefront)
        totals = []
        store.subscribe(lambda c: totals.append(c.total_quantity if c else 0))

        store.add_cart_item("gid://shopify/ProductVariant/3", 2)

        assert totals == [2]


class TestPersistence:
    def test_cart_id_survives_restart(self, storefront, cart, cart_file):
        storefront.create_cart.return_value = cart
        CartStore(storefront, cart_id_path=cart_file).add_cart_item("gid://shopify/ProductVariant/3", 2)

        storefront.get_cart.return_value = cart
        store = CartStore(storefront, cart_id_path=cart_file)

        assert store.cart_id == cart.id
        assert store.get() is None
        assert store.init_cart() is cart
        storefront.get_cart.assert_called_once_with(cart.id)

    def test_init_without_cart(self, storefront, cart_file):
        assert CartStore(storefront, cart_id_path=cart_file).init_cart() is None
        storefront.get_cart.assert_not_called()

    def test_expired_cart_forgotten(self, storefront, cart_file):
        save_cart_id(cart_file, "gid://shopify/Cart/gone")
        storefront.get_cart.return_value = None
        store = CartStore(storefront, cart_id_path=cart_file)

        assert store.init_cart() is None
        assert store.cart_id is None
        assert not cart_file.exists()

    def test_clear(self, storefront, cart, cart_file):
        storefront.create_cart.return_value = cart
        store = CartStore(storefront, cart_id_path=cart_file)
        store.add_cart_item("gid://shopify/ProductVariant/3", 1)

        store.clear()

        assert store.get() is None
        assert store.cart_id is None
        assert not cart_file.exists()


class TestRemove:
    def test_remove_item(self, storefront, cart):
        storefront.create_cart.return_value = cart
        emptied = cart.model_copy(update={"lines": [], "total_quantity": 0})
        storefront.remove_cart_lines.return_value = emptied
        store = CartStore(storefront)
        store.add_cart_item("gid://shopify/ProductVariant/3", 2)

        assert store.remove_cart_item("gid://shopify/CartLine/l1") is emptied
        storefront.remove_cart_lines.assert_called_once_with(cart.id, ["gid://shopify/CartLine/l1"])
        assert store.get() is emptied

    def test_remove_without_cart(self, storefront):
        assert CartStore(storefront).remove_cart_items(["gid://shopify/CartLine/l1"]) is None
        storefront.remove_cart_lines.assert_not_called()
