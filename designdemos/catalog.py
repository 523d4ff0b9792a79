"""Products, sellers, shopping carts and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count

_seller_ids = count(1)


@dataclass(frozen=True)
class Product:
    code: str
    name: str
    price: float
    category: str


@dataclass
class Seller:
    """A shop with an address and the products it sells."""

    name: str
    address: str
    products: list[Product] = field(default_factory=list)
    id: str = field(init=False, default_factory=lambda: f"SEL{next(_seller_ids)}")


class Cart:
    """Products chosen from a single seller, with their running total."""

    def __init__(self) -> None:
        self.seller: Seller | None = None
        self.products: list[Product] = []
        self._total = 0.0

    def add_product(self, product: Product) -> bool:
        """Add ``product`` if a seller is chosen; return whether it was added."""
        if self.seller is None:
            return False
        self.products.append(product)
        self._total += product.price
        return True

    def is_empty(self) -> bool:
        return not self.products

    def clear(self) -> None:
        self.products.clear()
        self._total = 0.0

    def total_cost(self) -> float:
        return self._total


@dataclass
class User:
    user_id: str
    name: str
    address: str
    cart: Cart = field(default_factory=Cart)