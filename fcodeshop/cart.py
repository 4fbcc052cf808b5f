"""Buyers' shopping carts: adding, showing and removing products."""

from __future__ import annotations

import re

from .buyer_views import show_delete_menu
from .catalog import browse_products
from .console import GREEN, RED, RESET, Console
from .models import Cart, Session
from .store import DataStore, StoreError, trim_trailing

SHIPPING_FEE = 5.00

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class CartError(Exception):
    """A cart change was refused."""


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _green(value: object) -> str:
    return f"{GREEN}{value}{RESET}"


def _username(session: Session) -> str:
    return session.user.username if session.user is not None else ""


def stock_of(store: DataStore, product_id: int) -> int:
    """Quantity in stock of a product by its 1-based id; 0 if there is none."""
    try:
        products = store.read_products()
    except StoreError:
        return 0
    if 1 <= product_id <= len(products):
        return products[product_id - 1].quantity
    return 0


def add_to_cart(store: DataStore, username: str, product_id: int, quantity: int) -> Cart:
    """Add a quantity of a product to a user's cart and save; return that cart."""
    try:
        product_count = len(store.read_products())
    except StoreError:
        product_count = 0
    if product_id <= 0 or product_id > product_count:
        raise CartError(f"Invalid product id {product_id}!")
    stock = stock_of(store, product_id)
    if quantity <= 0 or quantity > stock:
        raise CartError(f"Our stock only has {stock} products left!")

    carts = store.read_carts()
    own = [cart for cart in carts if cart.username == username]
    for cart in own:
        in_cart = cart.quantity_of(product_id)
        if in_cart and in_cart + quantity > stock:
            raise CartError(
                f"Currently, there are {in_cart} products in the cart. "
                f"Adding {quantity} will exceed the quantity in the stock."
            )
    for cart in own:
        cart.add(product_id, quantity)
    if not own:
        cart = Cart(username)
        cart.add(product_id, quantity)
        carts.append(cart)
        own.append(cart)
    store.write_carts(carts)
    return own[0]


def _read_choice(console: Console, prompt: str) -> int:
    try:
        return console.read_int(prompt)
    except ValueError:
        return 0


def view_add_to_cart(console: Console, store: DataStore, session: Session) -> Cart | None:
    """Let the buyer pick a product and a quantity and put them in the cart."""
    try:
        store.read_carts()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return None
    product_count = browse_products(console, store)
    if product_count <= 0:
        console.error(
            "Currently, there are no products available. Add to cart is not possible.\n"
        )
        return None

    while True:
        product_id = _read_choice(console, "Enter the product id to add to cart: ")
        if 0 < product_id <= product_count:
            break
        console.error("Invalid product id ")
        console.write(f"{product_id}!\n")

    stock = stock_of(store, product_id)
    while True:
        quantity = _read_choice(console, "Enter the quantity of the product: ")
        if 0 < quantity <= stock:
            break
        console.error("Our stock only has ")
        console.write(f"{stock} ")
        console.error("products left!\n")

    try:
        return add_to_cart(store, _username(session), product_id, quantity)
    except (CartError, StoreError) as exc:
        console.error(f"{exc}\n")
        return None


def show_cart(console: Console, store: DataStore, session: Session) -> float:
    """Print the logged-in user's cart with totals; return the order total."""
    try:
        carts = store.read_carts()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return 0.0
    try:
        products = store.read_products()
    except StoreError:
        products = []

    username = _username(session)
    console.write("\n========== Shopping Cart ==========\n")
    total = 0.0
    shown = 0
    for cart in carts:
        if cart.username != username:
            continue
        for product_id, quantity in cart.items.items():
            shown += 1
            if 1 <= product_id <= len(products):
                product = products[product_id - 1]
                subtotal = product.price * quantity
                total += subtotal
                console.write(
                    f"{shown}. Product: {_green(product.name)}\n"
                    f"   Category: {_green(product.category)}\n"
                    f"   Quantity: {_green(quantity)}\n"
                    f"   Price per unit: {_green(f'${product.price:.2f}')}\n"
                    f"   Subtotal: {_green(f'${subtotal:.2f}')}\n\n"
                )
            else:
                console.write(f"{shown}. Product ID {_green(product_id)} not found\n\n")

    if not shown:
        console.error("Your cart is empty!\n")
    else:
        console.write(
            f"Order total: {_green(f'${total:.2f}')}\n"
            f"Shipping: {_green(f'${SHIPPING_FEE:.2f}')}\n"
            f"Total: {RED}${total + SHIPPING_FEE:.2f}{RESET}\n"
        )
    console.write("============END============\n\n")
    return total


def is_product_in_cart(store: DataStore, username: str, product_id: int) -> bool:
    """Whether the user's cart holds the product."""
    try:
        carts = store.read_carts()
    except StoreError:
        return False
    return any(
        cart.username == username and product_id in cart.items for cart in carts
    )


def remove_product(store: DataStore, username: str, product_id: int) -> bool:
    """Remove a product from the user's cart, dropping the cart once empty."""
    carts = store.read_carts()
    removed = False
    kept = []
    for cart in carts:
        if cart.username == username:
            removed = cart.remove(product_id) or removed
            if not cart.items:
                continue
        kept.append(cart)
    store.write_carts(kept)
    return removed


def delete_specific_products(console: Console, store: DataStore, session: Session) -> list[int]:
    """Ask for product ids and remove them all, or none if any is not in the cart."""
    try:
        store.read_carts()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    username = _username(session)
    text = trim_trailing(
        console.read_line("Enter the product ID(s) to delete, separated by spaces: ")
    )
    ids = []
    failed = False
    for token in filter(None, text.split(" ")):
        product_id = _to_int(token)
        if is_product_in_cart(store, username, product_id):
            ids.append(product_id)
        else:
            console.error("Product ID ")
            console.write(f"{product_id} ")
            console.error("is not found in cart!\n")
            failed = True
    if failed:
        return []
    try:
        for product_id in ids:
            remove_product(store, username, product_id)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return []
    return ids


def view_delete_cart(console: Console, store: DataStore, session: Session) -> None:
    """Show the cart and empty it whole or remove chosen products."""
    try:
        store.read_carts()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return
    if int(show_cart(console, store, session)) == 0:
        console.error("No product in cart!\n")
        return
    show_delete_menu(console)
    choice = _read_choice(console, "")
    if choice == 1:
        try:
            store.remove_cart(_username(session))
        except StoreError as exc:
            console.error(f"{exc}\n")
        else:
            console.success("Delete cart successfully!\n")
    elif choice == 2:
        delete_specific_products(console, store, session)
    console.error("========================================\n")