"""The buyer's main menu."""

from __future__ import annotations

from .buyer_views import show_buyer_header, show_buyer_menu
from .cart import show_cart, view_add_to_cart, view_delete_cart
from .catalog import browse_products, search_products
from .checkout import view_check_out
from .console import Console
from .models import Session
from .orders import view_order_history
from .store import DataStore


def buyer(console: Console, store: DataStore, session: Session) -> None:
    """Run the buyer menu until the user logs out."""
    show_buyer_header(console)
    while True:
        show_buyer_menu(console)
        try:
            choice = console.read_int()
        except ValueError:
            choice = None
        if choice == 0:
            session.logout()
            return
        if choice == 1:
            console.clear()
            browse_products(console, store)
        elif choice == 2:
            search_products(console, store)
        elif choice == 3:
            console.clear()
            show_cart(console, store, session)
        elif choice == 4:
            console.clear()
            view_add_to_cart(console, store, session)
        elif choice == 5:
            console.clear()
            view_delete_cart(console, store, session)
        elif choice == 6:
            console.clear()
            view_check_out(console, store, session)
        elif choice == 7:
            console.clear()
            view_order_history(console, store)
        else:
            console.error("Invalid choice!\n\n")