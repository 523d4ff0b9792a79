"""Orders and the factories that create them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import count

from .catalog import Product, Seller, User
from .payments import PaymentStrategy

_order_ids = count(1)

SCHEDULED_TIME = "Scheduled Time"


class PaymentError(RuntimeError):
    """An order cannot be paid for."""


class UnknownOrderTypeError(ValueError):
    """An order type other than Delivery or Pickup was requested."""


def current_time() -> str:
    """Return the label used for orders placed now."""
    return "Current Time"


class Order(ABC):
    """An order of products from one seller for one user."""

    def __init__(
        self,
        user: User,
        seller: Seller,
        products: list[Product],
        payment: PaymentStrategy | None,
        total: float,
        scheduled_time: str,
    ) -> None:
        self.id = f"ORD{next(_order_ids)}"
        self.user = user
        self.seller = seller
        self.products = list(products)
        self.payment = payment
        self.total = total
        self.scheduled_time = scheduled_time

    @property
    @abstractmethod
    def order_type(self) -> str:
        """The kind of order, such as ``"Delivery"``."""

    def process_payment(self) -> None:
        """Pay the order total; raise PaymentError if no payment mode is set."""
        if self.payment is None:
            raise PaymentError("Please choose payment mode first!")
        self.payment.pay(self.total)


class DeliveryOrder(Order):
    """An order delivered to the user's address."""

    def __init__(self, user, seller, products, payment, total, scheduled_time) -> None:
        super().__init__(user, seller, products, payment, total, scheduled_time)
        self.user_address = user.address

    @property
    def order_type(self) -> str:
        return "Delivery"


class PickupOrder(Order):
    """An order collected from the seller's address."""

    def __init__(self, user, seller, products, payment, total, scheduled_time) -> None:
        super().__init__(user, seller, products, payment, total, scheduled_time)
        self.seller_address = seller.address

    @property
    def order_type(self) -> str:
        return "Pickup"


_ORDER_TYPES: dict[str, type[Order]] = {
    "Delivery": DeliveryOrder,
    "Pickup": PickupOrder,
}


def _build_order(
    user: User,
    seller: Seller,
    products: list[Product],
    payment: PaymentStrategy | None,
    order_type: str,
    total_cost: float,
    scheduled_time: str,
) -> Order:
    try:
        order_class = _ORDER_TYPES[order_type]
    except KeyError:
        raise UnknownOrderTypeError(f"Unknown order type: {order_type}") from None
    return order_class(user, seller, products, payment, total_cost, scheduled_time)


class OrderFactory(ABC):
    """Creates orders of a requested type."""

    @abstractmethod
    def create_order(self, user, seller, products, payment, order_type, total_cost) -> Order:
        """Create a Delivery or Pickup order."""


class NowOrderFactory(OrderFactory):
    """Creates orders to be fulfilled right away."""

    def create_order(self, user, seller, products, payment, order_type, total_cost) -> Order:
        return _build_order(
            user, seller, products, payment, order_type, total_cost, current_time()
        )


class ScheduledOrderFactory(OrderFactory):
    """Creates orders to be fulfilled at a scheduled time."""

    def create_order(self, user, seller, products, payment, order_type, total_cost) -> Order:
        return _build_order(
            user, seller, products, payment, order_type, total_cost, SCHEDULED_TIME
        )