"""A seller's own products: listing, adding, editing and deleting them."""

from __future__ import annotations

import re

from .categories import view_all_category
from .console import GREEN, RESET, Console
from .models import Product, Session
from .store import DataStore, StoreError, trim_trailing

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_END = "============END============\n\n"


class ProductError(Exception):
    """A product change was refused."""


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _green(value: object) -> str:
    return f"{GREEN}{value}{RESET}"


def _username(session: Session) -> str:
    return session.user.username if session.user is not None else ""


def seller_products(store: DataStore, username: str) -> list[Product]:
    """The products listed by one seller, in file order."""
    return [product for product in store.read_products() if product.seller == username]


def add_product(
    store: DataStore,
    username: str,
    category: str,
    name: str,
    price: float,
    quantity: int,
    description: str,
) -> Product:
    """List a new product for the seller and save it; return it."""
    name = trim_trailing(name)
    if not name:
        raise ProductError("Product name cannot be empty!")
    if quantity < 0:
        raise ProductError("Quantity cannot be negative!")
    product = Product(username, category, name, float(price), int(quantity), description)
    store.append_product(product)
    return product


def _parse_ids(text: str, limit: int) -> list[int]:
    ids = [_to_int(token) for token in text.split()]
    invalid = [value for value in ids if value < 1 or value > limit]
    if invalid:
        raise ProductError("\n".join(f"Invalid product id {value}!" for value in invalid))
    return sorted(set(ids))


def delete_products(store: DataStore, username: str, ids: list[int]) -> list[Product]:
    """Remove the seller's products at the given 1-based positions; return them."""
    products = store.read_products()
    owned = sum(1 for product in products if product.seller == username)
    invalid = [value for value in ids if value < 1 or value > owned]
    if invalid:
        raise ProductError("\n".join(f"Invalid product id {value}!" for value in invalid))
    wanted = set(ids)
    kept: list[Product] = []
    removed: list[Product] = []
    position = 0
    for product in products:
        if product.seller == username:
            position += 1
            if position in wanted:
                removed.append(product)
                continue
        kept.append(product)
    store.write_products(kept)
    return removed


def view_all_product(console: Console, store: DataStore, session: Session) -> int:
    """Print the seller's products with 1-based ids; return how many there are."""
    try:
        products = seller_products(store, _username(session))
    except StoreError:
        console.error("Error opening file for reading!\n")
        return 0
    console.write("\n========== All Product ==========\n")
    for number, product in enumerate(products, start=1):
        console.write(
            f"{number}. Category: {_green(product.category)}\n"
            f"\tPrice: {_green(f'${product.price:.2f}')}\n"
            f"\tName Product: {_green(product.name)}\n"
            f"\tQuantity: {_green(product.quantity)}\n"
            f"\tDescription: {_green(product.description)}\n"
        )
    if not products:
        console.error("No category found!\n")
    console.write(_END)
    return len(products)


def _read_category_id(console: Console, count: int) -> int:
    while True:
        try:
            category_id = console.read_int("Enter id category: ")
        except ValueError:
            console.error("Invalid input! Please enter a valid id category.\n")
            continue
        if 1 <= category_id <= count:
            return category_id
        console.error("Category not found! Please enter again.\n")


def view_add_product(console: Console, store: DataStore, session: Session) -> Product | None:
    """Ask for a category and product details and list the product."""
    username = _username(session)
    console.write("\n========== Add Product ==========\n")
    count = view_all_category(console, store, session)
    category_id = _read_category_id(console, count)

    while True:
        name = trim_trailing(console.read_line("Enter product name: "))
        if name:
            break
        console.error("Product name cannot be empty! Please enter again.\n")

    while True:
        try:
            price = console.read_float("Enter product price: ")
            break
        except ValueError:
            console.error("Invalid input! Please enter a valid price.\n")

    while True:
        try:
            quantity = console.read_int("Enter product quantity: ")
        except ValueError:
            console.error("Invalid input! Please enter a valid quantity.\n")
            continue
        if quantity >= 0:
            break
        console.error("Quantity cannot be negative! Please enter again.\n")

    while True:
        description = trim_trailing(console.read_line("Enter product description: "))
        if description:
            break
        console.error("Description cannot be empty! Please enter again.\n")

    category = store.category_name(username, category_id) or ""
    try:
        product = add_product(store, username, category, name, price, quantity, description)
    except ProductError as exc:
        console.error(f"{exc}\n\n")
        return None
    except StoreError:
        console.error("Error opening file for appending!\n")
        return None
    console.success("Product added successfully!\n\n")
    return product


def view_delete_product(console: Console, store: DataStore, session: Session) -> list[Product]:
    """Show the seller's products, ask which to delete and delete them."""
    try:
        store.read_products()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    count = view_all_product(console, store, session)
    if not count:
        console.error(
            "Currently, there are no products available. Deletion is not possible.\n"
        )
        return []
    text = console.read_line(
        "Please enter the product IDs you wish to delete, separated by spaces: "
    )
    try:
        ids = _parse_ids(text, count)
    except ProductError as exc:
        console.error(f"{exc}\n")
        console.error("Cannot delete because id is invalid!\n")
        return []
    try:
        removed = delete_products(store, _username(session), ids)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return []
    console.success("Delete product successfully!\n")
    return removed


def _edit_product(
    console: Console, store: DataStore, session: Session, product: Product, position: int
) -> None:
    username = _username(session)
    count = view_all_category(console, store, session)
    while True:
        category_id = _to_int(
            trim_trailing(console.read_line(f"Enter new category ID for ID {position}: "))
        )
        if 1 <= category_id <= count:
            break
        console.error("Category ID is invalid!\n")
    product.category = store.category_name(username, category_id) or product.category

    while True:
        name = trim_trailing(console.read_line(f"Enter new product name for ID {position}: "))
        if name:
            break
        console.error("Product name cannot be empty!\n")
    product.name = name

    while True:
        price = _to_float(
            trim_trailing(console.read_line(f"Enter new price for ID {position}: "))
        )
        if price >= 0:
            break
        console.error("Price must be greater than 0!\n")
    product.price = price

    while True:
        quantity = _to_int(
            trim_trailing(console.read_line(f"Enter new quantity for ID {position}: "))
        )
        if quantity >= 1:
            break
        console.error("Quantity must be greater than 0!\n")
    product.quantity = quantity

    while True:
        description = trim_trailing(
            console.read_line(f"Enter new description for ID {position}: ")
        )
        if description:
            break
    product.description = description


def view_update_product(console: Console, store: DataStore, session: Session) -> list[Product]:
    """Edit the chosen products of the seller field by field; return them."""
    try:
        store.read_products()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    count = view_all_product(console, store, session)
    if not count:
        console.error(
            "Currently, there are no products available. Update is not possible.\n"
        )
        return []
    text = console.read_line(
        "Please enter the product IDs you wish to update, separated by spaces: "
    )
    try:
        ids = set(_parse_ids(text, count))
    except ProductError as exc:
        console.error(f"{exc}\n")
        console.error("Cannot update because id is invalid!\n")
        return []

    username = _username(session)
    products = store.read_products()
    updated: list[Product] = []
    position = 0
    for product in products:
        if product.seller != username:
            continue
        position += 1
        if position in ids:
            _edit_product(console, store, session, product, position)
            updated.append(product)

    console.success("Update successfully!\n")
    try:
        store.write_products(products)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return []
    return updated