"""An online bazaar: search sellers, fill a cart, check out and pay."""

from __future__ import annotations

from .catalog import Product, Seller, User
from .managers import OrderManager, SellerManager
from .notifications import NotificationService
from .orders import NowOrderFactory, Order, OrderFactory, ScheduledOrderFactory
from .payments import JazzCashPayment, PaymentStrategy


class EmptyCartError(RuntimeError):
    """Checkout was attempted with an empty cart."""


class NoSellerSelectedError(RuntimeError):
    """A product was added before a seller was chosen."""


class Bazaar:
    """Front end tying sellers, carts, orders, payments and notifications together."""

    def __init__(
        self,
        seller_manager: SellerManager | None = None,
        order_manager: OrderManager | None = None,
    ) -> None:
        self.seller_manager = seller_manager or SellerManager.get_instance()
        self.order_manager = order_manager or OrderManager.get_instance()
        self.notification_service = NotificationService()
        self._initialize_sellers()

    def _initialize_sellers(self) -> None:
        products = [
            Product("SK001", "Embroidered Shalwar Kameez", 3500.0, "Clothing"),
            Product("PH001", "Samsung Galaxy A14", 45000.0, "Electronics"),
        ]
        self.seller_manager.add_seller(Seller("Anarkali Shop", "Lahore", products))

    def search_products_by_category(self, category: str) -> list[Seller]:
        return self.seller_manager.search_by_category(category)

    def search_products_by_location(self, location: str) -> list[Seller]:
        return self.seller_manager.search_by_location(location)

    def select_seller(self, user: User, seller: Seller) -> None:
        user.cart.seller = seller

    def add_to_cart(self, user: User, product_code: str) -> None:
        """Add the selected seller's products with ``product_code`` to the cart."""
        seller = user.cart.seller
        if seller is None:
            raise NoSellerSelectedError("Please select a seller first!")
        for product in seller.products:
            if product.code == product_code:
                user.cart.add_product(product)

    def checkout_now(
        self, user: User, payment: PaymentStrategy | None, order_type: str
    ) -> Order:
        return self._checkout(user, payment, order_type, NowOrderFactory())

    def checkout_scheduled(
        self,
        user: User,
        payment: PaymentStrategy | None,
        order_type: str,
        scheduled_time: str,
    ) -> Order:
        # The scheduled factory labels every order with its own fixed time.
        return self._checkout(user, payment, order_type, ScheduledOrderFactory())

    def _checkout(
        self,
        user: User,
        payment: PaymentStrategy | None,
        order_type: str,
        factory: OrderFactory,
    ) -> Order:
        cart = user.cart
        if cart.is_empty():
            raise EmptyCartError("Cart is empty!")
        order = factory.create_order(
            user, cart.seller, list(cart.products), payment, order_type, cart.total_cost()
        )
        self.order_manager.add_order(order)
        return order

    def pay_for_order(self, order: Order) -> bool:
        """Pay, announce the order and empty the user's cart."""
        order.process_payment()
        self.notification_service.notify(order)
        order.user.cart.clear()
        return True

    def print_user_cart(self, user: User) -> None:
        cart = user.cart
        if cart.is_empty():
            print("Cart is empty!")
            return
        print("Cart Contents:")
        for product in cart.products:
            print(f"{product.name} ({product.price:g} PKR)")
        print(f"Total: {cart.total_cost():g} PKR")


def main(argv: list[str] | None = None) -> int:
    bazaar = Bazaar()
    user = User("1001", "Ahmed", "Karachi")
    print(f"User {user.name} is active.")

    sellers = bazaar.search_products_by_category("Clothing")
    if not sellers:
        print("No sellers found!")
        return 0
    for seller in sellers:
        print(f"Found Seller: {seller.name}")

    bazaar.select_seller(user, sellers[0])
    print(f"Selected Seller: {sellers[0].name}")

    bazaar.add_to_cart(user, "SK001")
    bazaar.add_to_cart(user, "PH001")
    bazaar.print_user_cart(user)

    order = bazaar.checkout_now(user, JazzCashPayment("demo-wallet"), "Delivery")
    bazaar.pay_for_order(order)
    print("Payment done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())