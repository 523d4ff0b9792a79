"""Announcements of newly placed orders."""

from __future__ import annotations

from .orders import Order


def format_notification(order: Order) -> str:
    """Return the text announcing ``order``."""
    products = "".join(f"{product.name} ({product.price:g} PKR), " for product in order.products)
    return (
        f"Notification: New {order.order_type} order placed!\n"
        f"Order ID: {order.id}\n"
        f"User: {order.user.name}\n"
        f"Seller: {order.seller.name}\n"
        f"Products: {products}\n"
        f"Total: {order.total:g} PKR\n"
        f"Scheduled for: {order.scheduled_time}"
    )


class NotificationService:
    """Prints a notification for each order it is told about."""

    def notify(self, order: Order) -> str:
        message = format_notification(order)
        print(message)
        return message