"""Screens shown to buyers."""

from __future__ import annotations

from .console import Console


def show_buyer_header(console: Console) -> None:
    console.write(
        "\n========== Welcome to Your Shopping Portal! ==========\n"
        "We are excited to assist you in finding the best products tailored to your needs.\n"
        "=====================================================\n\n"
        "\n========== Dashboard! ==========\n"
        "Explore our wide range of products available for you.\n"
        "Total items available: [quantity]\n"
        "Number of orders placed: [number of orders]\n"
        "Total amount spent: [total amount]\n"
        "=====================================================\n\n"
    )


def show_buyer_menu(console: Console) -> None:
    console.write(
        "\n========== Buyer Menu ==========\n"
        "1. Browse Products\n"
        "2. Search for products\n"
        "\n"
        "3. View cart\n"
        "4. Add to cart\n"
        "5. Delete from cart\n"
        "6. Checkout\n"
        "\n"
        "7. View Orders\n"
        "\n"
        "0. Logout\n"
        "Enter your choice: "
    )


def show_address_selection(console: Console) -> None:
    console.write(
        "\n========== Address Selection ==========\n"
        "1. Use current information to receive goods\n"
        "2. Use other information to receive goods\n"
        "Enter your choice: "
    )


def show_delete_menu(console: Console) -> None:
    console.error("\n========== Delete from cart ==========\n")
    console.write(
        "1. Delete all products\n"
        "2. Delete a specific product\n"
        "Enter your choice: "
    )