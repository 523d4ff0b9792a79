"""Shared registries of sellers and orders."""

from __future__ import annotations

from .catalog import Seller
from .orders import Order


class SellerManager:
    """Registry of sellers with search by location and product category."""

    _instance: SellerManager | None = None

    def __init__(self) -> None:
        self.sellers: list[Seller] = []

    @classmethod
    def get_instance(cls) -> SellerManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_seller(self, seller: Seller) -> None:
        self.sellers.append(seller)

    def search_by_location(self, location: str) -> list[Seller]:
        """Sellers whose address contains ``location``."""
        return [seller for seller in self.sellers if location in seller.address]

    def search_by_category(self, category: str) -> list[Seller]:
        """Sellers offering at least one product in ``category``."""
        return [
            seller
            for seller in self.sellers
            if any(product.category == category for product in seller.products)
        ]


class OrderManager:
    """Registry of placed orders."""

    _instance: OrderManager | None = None

    def __init__(self) -> None:
        self.orders: list[Order] = []

    @classmethod
    def get_instance(cls) -> OrderManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def list_orders(self) -> list[Order]:
        return list(self.orders)