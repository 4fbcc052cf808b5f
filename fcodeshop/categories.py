"""Sellers' categories: listing, adding, renaming and deleting them."""

from __future__ import annotations

import re

from .console import GREEN, RESET, Console
from .models import Category, Session
from .store import DataStore, StoreError, trim_trailing

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_END = "============END============\n\n"


class CategoryError(Exception):
    """A category change was refused."""


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _username(session: Session) -> str:
    return session.user.username if session.user is not None else ""


def parse_ids(text: str, limit: int) -> list[int]:
    """Parse space-separated 1-based ids, each at most ``limit``; return them sorted."""
    ids = [_to_int(token) for token in text.split()]
    invalid = [value for value in ids if value < 1 or value > limit]
    if invalid:
        raise CategoryError(
            "\n".join(f"Invalid category id {value}!" for value in invalid)
        )
    return sorted(set(ids))


def is_existing_category(store: DataStore, username: str, name: str) -> bool:
    """Whether the user already owns a category with this name."""
    name = trim_trailing(name)
    try:
        categories = store.read_categories()
    except StoreError:
        return False
    return any(c.username == username and c.name == name for c in categories)


def add_category(store: DataStore, username: str, name: str) -> Category:
    """Add a category for the user and save it; return it."""
    name = trim_trailing(name)
    if not name:
        raise CategoryError("Category name cannot be empty!")
    if is_existing_category(store, username, name):
        raise CategoryError("Category already exists!")
    try:
        categories = store.read_categories()
    except StoreError:
        categories = []
    category = Category(username, name)
    categories.append(category)
    store.write_categories(categories)
    return category


def view_add_category(console: Console, store: DataStore, session: Session) -> Category | None:
    """Ask for a category name until one is added; return the new category."""
    username = _username(session)
    while True:
        console.write("\n========== Add Category ==========\n")
        name = console.read_line("Enter category name: ")
        try:
            category = add_category(store, username, name)
        except CategoryError as exc:
            console.error(f"{exc}\n\n")
            continue
        except StoreError:
            console.error("Error opening file for appending!\n")
            return None
        console.success("Category added successfully!\n\n")
        return category


def view_all_category(console: Console, store: DataStore, session: Session) -> int:
    """Print the user's categories with 1-based ids; return how many there are."""
    try:
        categories = store.read_categories()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return 0
    username = _username(session)
    console.write("\n========== All Category ==========\n")
    names = [c.name for c in categories if c.username == username]
    for number, name in enumerate(names, start=1):
        console.write(f"{number}. {GREEN}{name}{RESET}\n")
    if not names:
        console.error("No category found!\n")
    console.write(_END)
    return len(names)


def delete_categories(store: DataStore, username: str, ids: list[int]) -> list[Category]:
    """Remove the user's categories at the given 1-based positions; return them."""
    wanted = set(ids)
    kept: list[Category] = []
    removed: list[Category] = []
    position = 0
    for category in store.read_categories():
        if category.username == username:
            position += 1
            if position in wanted:
                removed.append(category)
                continue
        kept.append(category)
    store.write_categories(kept)
    return removed


def view_delete_category(console: Console, store: DataStore, session: Session) -> list[Category]:
    """Show the user's categories, ask which to delete and delete them."""
    try:
        store.read_categories()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    count = view_all_category(console, store, session)
    if not count:
        console.error(
            "Currently, there are no categories available. Deletion is not possible.\n"
        )
        return []
    text = console.read_line("Enter the category IDs to delete, separated by spaces: ")
    try:
        ids = parse_ids(text, count)
    except CategoryError as exc:
        console.error(f"{exc}\n")
        console.error("Cannot delete because id is invalid!\n")
        return []
    try:
        removed = delete_categories(store, _username(session), ids)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return []
    console.success("Delete category successfully!\n")
    return removed


def rename_product_category(store: DataStore, username: str, old_name: str, new_name: str) -> int:
    """Move the user's products from one category name to another; return how many."""
    if old_name == new_name or not old_name or not new_name:
        return 0
    products = store.read_products()
    affected = 0
    for product in products:
        if product.seller == username and product.category == old_name:
            product.category = new_name
            affected += 1
    store.write_products(products)
    return affected


def view_update_category(
    console: Console, store: DataStore, session: Session
) -> list[tuple[str, str]]:
    """Rename chosen categories and the products filed under them; return (old, new) pairs."""
    try:
        store.read_categories()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    count = view_all_category(console, store, session)
    if not count:
        console.error(
            "Currently, there are no categories available. Update is not possible.\n"
        )
        return []
    text = console.read_line(
        "Please enter the category IDs you wish to update, separated by spaces: "
    )
    try:
        ids = parse_ids(text, count)
    except CategoryError as exc:
        console.error(f"{exc}\n")
        console.error("Cannot update because id is invalid!\n")
        return []

    username = _username(session)
    wanted = set(ids)
    categories = store.read_categories()
    changes: list[tuple[str, str]] = []
    position = 0
    for category in categories:
        if category.username != username:
            continue
        position += 1
        if position in wanted:
            new_name = trim_trailing(
                console.read_line(f"Enter new category name for ID {position}: ")
            )
            changes.append((category.name, new_name))
            category.name = new_name

    console.success("Update successfully!\n")
    for old_name, new_name in changes:
        if old_name == new_name or not old_name or not new_name:
            continue
        try:
            affected = rename_product_category(store, username, old_name, new_name)
        except StoreError:
            console.error("Error opening file for reading!\n")
            continue
        console.write(f"Affected {affected} products. \n\n")
    try:
        store.write_categories(categories)
    except StoreError as exc:
        console.error(f"{exc}\n")
        return []
    return changes