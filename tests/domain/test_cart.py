"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import UnavailableError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

BOOK = Product(id="1", title="Dế Mèn Phiêu Lưu Ký", price=Money(45000), quantity_in_stock=10)
CD = Product(id="2", title="Greatest Hits CD", price=Money(120000), quantity_in_stock=1)


class TestCartContents:

    def test_add_keeps_insertion_order(self):
        cart = Cart()
        cart.add(CD, 1)
        cart.add(BOOK, 2)
        assert [i.product_id for i in cart.list_items()] == ["2", "1"]

    def test_add_same_product_merges_quantity(self):
        cart = Cart()
        cart.add(BOOK, 2)
        cart.add(BOOK, 3)
        assert len(cart.list_items()) == 1
        assert cart.list_items()[0].quantity.value == 5

    def test_add_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(BOOK, 0)

    def test_total_amount(self):
        cart = Cart()
        cart.add(BOOK, 2)
        cart.add(CD, 1)
        assert cart.total_amount() == Money(210000)

    def test_remove(self):
        cart = Cart()
        cart.add(BOOK, 1)
        cart.remove("1")
        assert cart.is_empty

    def test_remove_missing_rejected(self):
        with pytest.raises(ValidationError, match="not in the cart"):
            Cart().remove("42")

    def test_empty(self):
        cart = Cart()
        cart.add(BOOK, 1)
        cart.add(CD, 1)
        cart.empty()
        assert cart.list_items() == []
        assert cart.total_amount() == Money.zero()


class TestCartAvailability:

    def test_available(self):
        cart = Cart()
        cart.add(BOOK, 10)
        cart.check_availability({"1": BOOK})

    def test_short_stock_reported(self):
        cart = Cart()
        cart.add(BOOK, 1)
        cart.add(CD, 2)
        with pytest.raises(UnavailableError, match=r"Greatest Hits CD \(need 2, have 1 in stock\)"):
            cart.check_availability({"1": BOOK, "2": CD})

    def test_discontinued_product_reported(self):
        cart = Cart()
        cart.add(CD, 1)
        with pytest.raises(UnavailableError, match="no longer sold"):
            cart.check_availability({})

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            Cart().check_availability({"1": BOOK})
