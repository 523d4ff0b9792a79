from designdemos.catalog import Product, Seller, User
from designdemos.managers import OrderManager, SellerManager
from designdemos.orders import NowOrderFactory

SHIRT = Product("SK001", "Embroidered Shalwar Kameez", 3500.0, "Clothing")
SCARF = Product("SK002", "Silk Scarf", 900.0, "Clothing")
PHONE = Product("PH001", "Samsung Galaxy A14", 45000.0, "Electronics")


def test_get_instance_returns_same_object():
    assert SellerManager.get_instance() is SellerManager.get_instance()
    assert OrderManager.get_instance() is OrderManager.get_instance()
    assert SellerManager.get_instance() is not OrderManager.get_instance()


def test_search_by_location_matches_substring():
    manager = SellerManager()
    lahore = Seller("Anarkali Shop", "Anarkali Bazaar, Lahore", [SHIRT])
    karachi = Seller("Saddar Shop", "Saddar, Karachi", [PHONE])
    manager.add_seller(lahore)
    manager.add_seller(karachi)
    assert manager.search_by_location("Lahore") == [lahore]
    assert manager.search_by_location("Karachi") == [karachi]
    assert manager.search_by_location("Quetta") == []


def test_search_by_category_lists_each_seller_once():
    manager = SellerManager()
    clothes = Seller("Anarkali Shop", "Lahore", [SHIRT, SCARF])
    phones = Seller("Phone Shop", "Karachi", [PHONE])
    manager.add_seller(clothes)
    manager.add_seller(phones)
    assert manager.search_by_category("Clothing") == [clothes]
    assert manager.search_by_category("Electronics") == [phones]
    assert manager.search_by_category("Books") == []


def test_list_orders_keeps_order_and_is_a_copy():
    manager = OrderManager()
    user = User("1001", "Ahmed", "Karachi")
    seller = Seller("Anarkali Shop", "Lahore", [SHIRT])
    factory = NowOrderFactory()
    first = factory.create_order(user, seller, [SHIRT], None, "Delivery", 3500.0)
    second = factory.create_order(user, seller, [SHIRT], None, "Pickup", 3500.0)
    manager.add_order(first)
    manager.add_order(second)
    listed = manager.list_orders()
    assert listed == [first, second]
    listed.clear()
    assert manager.list_orders() == [first, second]