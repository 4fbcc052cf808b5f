"""Turning a buyer's cart into recorded orders."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from .buyer_views import show_address_selection
from .cart import show_cart
from .console import Console
from .models import Cart, Order, Session, User
from .store import DataStore, StoreError, trim_trailing

_END = "\n============END============\n\n"


def seller_of(store: DataStore, product_id: int) -> str | None:
    """Username of the seller of a product by its 1-based id, or None."""
    try:
        products = store.read_products()
    except StoreError:
        return None
    if 1 <= product_id <= len(products):
        return products[product_id - 1].seller
    return None


def user_cart(store: DataStore, username: str) -> Cart:
    """A copy of the user's cart; empty if the user has none."""
    try:
        carts = store.read_carts()
    except StoreError:
        return Cart(username)
    return next(
        (Cart(cart.username, dict(cart.items)) for cart in carts if cart.username == username),
        Cart(username),
    )


def place_order(
    store: DataStore,
    username: str,
    recipient: User,
    notes: str,
    when: datetime | None = None,
) -> list[Order]:
    """Record one order per product in the user's cart, then empty the cart."""
    when = when or datetime.now()
    date = when.strftime("%d-%m-%Y %H:%M:%S")
    cart = user_cart(store, username)
    orders = [
        Order(
            seller=seller_of(store, product_id) or "",
            buyer=username,
            email=recipient.email,
            phone=recipient.phone,
            full_name=recipient.full_name,
            address=recipient.address,
            date=date,
            notes=notes,
            total=float(product_id * quantity),
            product_id=product_id,
            quantity=quantity,
        )
        for product_id, quantity in cart.items.items()
    ]
    store.append_orders(orders)
    store.remove_cart(username)
    return orders


def _read_int(console: Console, prompt: str, default: int) -> int:
    try:
        return console.read_int(prompt)
    except ValueError:
        return default


def _read_unique(console: Console, prompt: str, exists: Callable[[str], bool], message: str) -> str:
    while True:
        value = console.read_token(prompt)
        if not exists(value):
            return value
        console.error(message)


def _read_recipient(console: Console, store: DataStore, username: str) -> User:
    email = _read_unique(
        console, "Email: ", store.email_exists,
        "Email already exists! Please enter another email.\n",
    )
    phone = _read_unique(
        console, "Phone Number: ", store.phone_exists,
        "Phone already exists! Please enter another phone.\n",
    )
    full_name = console.read_line("Full Name: ")
    address = console.read_line("Address: ")
    return User(
        username=username,
        password="",
        email=email,
        phone=phone,
        full_name=full_name,
        address=address,
    )


def view_check_out(console: Console, store: DataStore, session: Session) -> list[Order] | None:
    """Confirm the cart, collect notes and delivery details, and place the orders."""
    total = show_cart(console, store, session)
    console.error("\n========== Check Out ==========\n\n")
    if total <= 0:
        console.error("There are no orders in the shopping cart!\n")
        console.error(_END)
        return None

    while True:
        choice = _read_int(
            console,
            "Please confirm you want to purchase the above items? (1. Yes 0. No): ",
            -1,
        )
        if choice == 0:
            return None
        if choice == 1:
            break

    notes = trim_trailing(console.read_line("Enter notes for order (If any): ")) or "No notes"

    user = session.user if session.user is not None else User(username="", password="")
    show_address_selection(console)
    if _read_int(console, "", 1) == 2:
        recipient = _read_recipient(console, store, user.username)
    else:
        recipient = user

    console.success("Order successfully!\n")
    console.success("Please wait for the shipper to confirm the order!\n")
    console.error(_END)

    try:
        return place_order(store, user.username, recipient, notes)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return None