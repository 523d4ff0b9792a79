"""Ways of paying for an order."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentStrategy(ABC):
    """A means of paying an amount in rupees."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay ``amount`` PKR and return the receipt line."""


class CreditCardPayment(PaymentStrategy):
    """Pays with a credit card."""

    def __init__(self, card_number: str) -> None:
        self.card_number = card_number

    def pay(self, amount: float) -> str:
        message = f"Paid {amount:g} PKR using Credit Card {self.card_number}"
        print(message)
        return message


class JazzCashPayment(PaymentStrategy):
    """Pays through a JazzCash mobile account."""

    def __init__(self, mobile_number: str) -> None:
        self.mobile_number = mobile_number

    def pay(self, amount: float) -> str:
        message = f"Paid {amount:g} PKR using JazzCash with mobile {self.mobile_number}"
        print(message)
        return message