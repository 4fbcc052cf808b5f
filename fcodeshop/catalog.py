"""Listing and searching every product in the shop."""

from __future__ import annotations

from .console import GREEN, RESET, Console
from .models import Product
from .store import DataStore, StoreError, trim_trailing


def _green(value: object) -> str:
    return f"{GREEN}{value}{RESET}"


def browse_products(console: Console, store: DataStore) -> int:
    """Print every product with its 1-based id; return how many there are."""
    try:
        products = store.read_products()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return 0
    console.error("\n========== All Product ==========\n\n")
    for product_id, product in enumerate(products, start=1):
        console.write(
            f"ID Product: {_green(product_id)}\n"
            f"->\tSeller: {_green(product.seller)}\n"
            f"->\tCategory: {_green(product.category)}\n"
            f"->\tPrice: {_green(f'${product.price:.2f}')}\n"
            f"->\tName Product: {_green(product.name)}\n"
            f"->\tQuantity in stock: {_green(product.quantity)}\n"
            f"->\tDescription: {_green(product.description)}\n"
            "--------------------------------\n"
        )
    if not products:
        console.error("No category found!\n")
    console.error("\n============END============\n\n")
    return len(products)


def find_products(products: list[Product], keyword: str) -> list[tuple[int, Product]]:
    """Products whose name contains the keyword, ignoring case, with 1-based ids."""
    needle = keyword.lower()
    return [
        (product_id, product)
        for product_id, product in enumerate(products, start=1)
        if needle in product.name.lower()
    ]


def search_products(console: Console, store: DataStore) -> list[tuple[int, Product]]:
    """Ask for a keyword, print the matching products and return them."""
    try:
        products = store.read_products()
    except StoreError:
        console.error("Error opening file for reading!\n")
        return []
    keyword = trim_trailing(console.read_line("Enter search keyword: ")).lower()
    console.write("\n========== Search Results ==========\n")
    matches = find_products(products, keyword)
    for product_id, product in matches:
        console.write(
            f"->\tProduct ID: {_green(product_id)}\n"
            f"->\tProduct Name: {_green(product.name)}\n"
            f"->\tSeller: {_green(product.seller)}\n"
            f"->\tPrice: {_green(f'${product.price:.2f}')}\n"
            f"->\tQuantity: {_green(product.quantity)}\n"
            f"->\tDescription: {_green(product.description)}\n"
            "--------------------------------\n"
        )
    if not matches:
        console.error("No products found with the keyword ")
        console.write(f"{keyword}\n")
    console.write("============END============\n\n")
    return matches