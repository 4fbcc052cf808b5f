import io

import pytest

from fcodeshop.console import BOLD, Console
from fcodeshop.models import Category, Product, Session, User
from fcodeshop.seller import seller, show_seller_header, show_seller_menu
from fcodeshop.store import DataStore

password = "password"


@pytest.fixture
def store(tmp_path):
    data = DataStore(tmp_path)
    data.write_categories([Category("alice", "Books"), Category("bob", "Food")])
    data.write_products([
        Product("alice", "Books", "Novel", 12.5, 4, "A story"),
        Product("bob", "Food", "Apple", 1.0, 10, "Red"),
    ])
    return data


def make_console(text=""):
    return Console(io.StringIO(text), io.StringIO())


def make_session():
    return Session(User(username="alice", password=password, account_type=2))


def test_menu_lists_all_entries_in_bold_header():
    console = make_console()
    show_seller_menu(console)
    output = console.stdout.getvalue()
    assert output.startswith(f"{BOLD}\n========== Seller Menu ==========\n")
    assert "10. Update Order Status\n" in output
    assert output.endswith("Enter your choice: ")


def test_header_welcomes_seller():
    console = make_console()
    show_seller_header(console)
    assert "Welcome to the system!" in console.stdout.getvalue()


def test_logout_ends_session(store):
    session = make_session()
    seller(make_console("0\n"), store, session)
    assert session.logged_in is False


@pytest.mark.parametrize("choice", ["10", "x", "-3"])
def test_invalid_choice(store, choice):
    console = make_console(f"{choice}\n0\n")
    seller(console, store, make_session())
    assert "Invalid choice!" in console.stdout.getvalue()


def test_view_categories(store):
    console = make_console("1\n0\n")
    seller(console, store, make_session())
    output = console.stdout.getvalue()
    assert "Books" in output
    assert "Food" not in output


def test_view_products(store):
    console = make_console("5\n0\n")
    seller(console, store, make_session())
    output = console.stdout.getvalue()
    assert "Novel" in output
    assert "Apple" not in output


def test_add_category_through_menu(store):
    console = make_console("2\nGames\n0\n")
    seller(console, store, make_session())
    assert store.seller_categories("alice") == ["Books", "Games"]


def test_orders_without_file(store):
    console = make_console("9\n0\n")
    seller(console, store, make_session())
    assert "Error opening orders file for reading!" in console.stdout.getvalue()