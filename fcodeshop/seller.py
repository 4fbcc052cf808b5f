"""The seller's main menu."""

from __future__ import annotations

from .categories import (
    view_add_category,
    view_all_category,
    view_delete_category,
    view_update_category,
)
from .console import Console
from .models import Session
from .orders import view_all_orders
from .products import (
    view_add_product,
    view_all_product,
    view_delete_product,
    view_update_product,
)
from .store import DataStore


def show_seller_header(console: Console) -> None:
    console.write(
        "\n========== Welcome to the system! ==========\n"
        "We are excited to support you in your selling journey.\n"
        "=====================================================\n\n"
        "\n========== Dashboard! ==========\n"
        "Stock available: [quantity]\n"
        "Number of orders sold: [number_of_orders]\n"
        "Total sales amount: [total_amount]\n"
        "=====================================================\n\n"
    )


def show_seller_menu(console: Console) -> None:
    console.bold("\n========== Seller Menu ==========\n")
    console.write(
        "1. View All Category\n"
        "2. Add Category\n"
        "3. Update Category\n"
        "4. Delete Category\n"
        "\n"
        "5. View All Product\n"
        "6. Add Product\n"
        "7. Update Product\n"
        "8. Delete Product\n"
        "\n"
        "9. View All Order\n"
        "10. Update Order Status\n"
        "\n"
        "0. Logout\n"
        "Enter your choice: "
    )


_ACTIONS = {
    1: view_all_category,
    2: view_add_category,
    3: view_update_category,
    4: view_delete_category,
    5: view_all_product,
    6: view_add_product,
    7: view_update_product,
    8: view_delete_product,
    9: view_all_orders,
}


def seller(console: Console, store: DataStore, session: Session) -> None:
    """Run the seller menu until the user logs out."""
    show_seller_header(console)
    while True:
        show_seller_menu(console)
        try:
            choice = console.read_int()
        except ValueError:
            choice = None
        if choice == 0:
            session.logout()
            return
        action = _ACTIONS.get(choice)
        if action is None:
            console.error("Invalid choice!\n\n")
            continue
        console.clear()
        action(console, store, session)