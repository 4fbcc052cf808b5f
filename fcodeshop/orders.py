"""Listing recorded orders to buyers and sellers."""

from __future__ import annotations

from .console import GREEN, RESET, Console
from .models import Order, Session
from .store import DataStore, StoreError

_RULE = "--------------------------------\n"
_END = "============END============\n\n"


def _green(value: object) -> str:
    return f"{GREEN}{value}{RESET}"


def orders_for_seller(store: DataStore, username: str) -> list[Order]:
    """Orders whose seller is the given user."""
    return [order for order in store.read_orders() if order.seller == username]


def _product_names(console: Console, store: DataStore) -> list[str]:
    try:
        return [product.name for product in store.read_products()]
    except StoreError:
        console.error("Error opening products file for reading!\n")
        return []


def _print_orders(console: Console, orders: list[Order], names: list[str]) -> None:
    for number, order in enumerate(orders, start=1):
        console.write(
            f"Order #{number}:\n"
            f"-> Seller Username: {_green(order.seller)}\n"
            f"-> Buyer Username: {_green(order.buyer)}\n"
            f"-> Email: {_green(order.email)}\n"
            f"-> Phone: {_green(order.phone)}\n"
            f"-> Full Name: {_green(order.full_name)}\n"
            f"-> Address: {_green(order.address)}\n"
            f"-> Total Payment: {_green(f'${order.total:.2f}')}\n"
            f"-> Order Date: {_green(order.date)}\n"
            f"-> Notes: {_green(order.notes)}\n"
            "-> Products:\n"
        )
        if 1 <= order.product_id <= len(names):
            console.write(
                f"   - Product Name: {_green(names[order.product_id - 1])}, "
                f"Quantity: {_green(order.quantity)}\n"
            )
        else:
            console.write(
                f"   - Product ID: {order.product_id}, "
                f"Quantity: {order.quantity} (Invalid ID)\n"
            )
        console.write(_RULE)


def view_order_history(console: Console, store: DataStore) -> list[Order]:
    """Print every recorded order; return them."""
    names = _product_names(console, store)
    try:
        orders = store.read_orders()
    except StoreError:
        console.error("Error opening orders file for reading!\n")
        return []
    console.write("\n========== Order History ==========\n")
    _print_orders(console, orders, names)
    if not orders:
        console.error("No orders found!\n")
    console.write(_END)
    return orders


def view_all_orders(console: Console, store: DataStore, session: Session) -> list[Order]:
    """Print the orders sold by the logged-in seller; return them."""
    names = _product_names(console, store)
    username = session.user.username if session.user is not None else ""
    try:
        orders = orders_for_seller(store, username)
    except StoreError:
        console.error("Error opening orders file for reading!\n")
        return []
    console.write("\n========== Sold Orders ==========\n")
    _print_orders(console, orders, names)
    if not orders:
        console.error("No orders found for the current seller!\n")
    console.write(_END)
    return orders