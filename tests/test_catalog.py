import dataclasses

import pytest

from designdemos.catalog import Cart, Product, Seller, User

SHIRT = Product("SK001", "Embroidered Shalwar Kameez", 3500.0, "Clothing")
PHONE = Product("PH001", "Samsung Galaxy A14", 45000.0, "Electronics")


def test_cart_without_seller_ignores_products():
    cart = Cart()
    assert cart.add_product(SHIRT) is False
    assert cart.is_empty()
    assert cart.total_cost() == 0.0


def test_cart_with_seller_accumulates_total():
    cart = Cart()
    cart.seller = Seller("Anarkali Shop", "Lahore", [SHIRT, PHONE])
    assert cart.add_product(SHIRT)
    assert cart.add_product(PHONE)
    assert cart.products == [SHIRT, PHONE]
    assert cart.total_cost() == pytest.approx(SHIRT.price + PHONE.price)
    assert not cart.is_empty()


def test_cart_clear_resets_everything_but_seller():
    cart = Cart()
    seller = Seller("Anarkali Shop", "Lahore", [SHIRT])
    cart.seller = seller
    cart.add_product(SHIRT)
    cart.clear()
    assert cart.is_empty()
    assert cart.total_cost() == 0.0
    assert cart.seller is seller


def test_seller_ids_are_distinct_and_prefixed():
    first = Seller("A", "Lahore")
    second = Seller("B", "Karachi")
    assert first.id.startswith("SEL")
    assert second.id.startswith("SEL")
    assert int(second.id[3:]) == int(first.id[3:]) + 1


def test_users_have_separate_empty_carts():
    ahmed = User("1001", "Ahmed", "Karachi")
    sara = User("1002", "Sara", "Lahore")
    ahmed.cart.seller = Seller("Shop", "Karachi", [SHIRT])
    ahmed.cart.add_product(SHIRT)
    assert ahmed.cart is not sara.cart
    assert sara.cart.is_empty()
    assert ahmed.cart.products == [SHIRT]


def test_product_is_immutable():
    product = Product("SK001", "Embroidered Shalwar Kameez", 3500.0, "Clothing")
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.price = 1.0
    assert product.price == 3500.0
    assert product == SHIRT