import io

import pytest

from fcodeshop.buyer import buyer
from fcodeshop.console import Console
from fcodeshop.models import Cart, Product, Session, User
from fcodeshop.store import DataStore

PASSWORD = "password"


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.fixture
def store(tmp_path):
    s = DataStore(tmp_path)
    s.append_product(Product("alice", "Books", "Novel", 12.5, 10, "A story"))
    s.write_carts([])
    return s


@pytest.fixture
def session():
    return Session(User(username="carol", password=PASSWORD))


def test_logout_ends_menu(store, session):
    console, out = make_console("0\n")
    buyer(console, store, session)
    assert session.user is None
    assert "Buyer Menu" in out.getvalue()


def test_invalid_choice_reported(store, session):
    console, out = make_console("42\nabc\n0\n")
    buyer(console, store, session)
    assert out.getvalue().count("Invalid choice!") == 2
    assert session.user is None


def test_browse_products(store, session):
    console, out = make_console("1\n0\n")
    buyer(console, store, session)
    assert "Novel" in out.getvalue()


def test_view_empty_cart(store, session):
    console, out = make_console("3\n0\n")
    buyer(console, store, session)
    assert "Your cart is empty!" in out.getvalue()


def test_add_to_cart_through_menu(store, session):
    console, _ = make_console("4\n1\n2\n0\n")
    buyer(console, store, session)
    assert store.read_carts() == [Cart("carol", {1: 2})]


def test_end_of_input_raises(store, session):
    console, _ = make_console("")
    with pytest.raises(EOFError):
        buyer(console, store, session)