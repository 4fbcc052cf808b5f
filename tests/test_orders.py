import io

import pytest

from fcodeshop.console import Console
from fcodeshop.models import Order, Product, Session, User
from fcodeshop.orders import orders_for_seller, view_all_orders, view_order_history
from fcodeshop.store import DataStore

PASSWORD = "password"


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def make_order(seller, product_id, quantity):
    return Order(
        seller=seller,
        buyer="carol",
        email="carol@example.com",
        phone="123",
        full_name="Carol Smith",
        address="1 Main St",
        date="05-03-2024 07:08:09",
        notes="No notes",
        total=float(product_id * quantity),
        product_id=product_id,
        quantity=quantity,
    )


@pytest.fixture
def store(tmp_path):
    s = DataStore(tmp_path)
    s.append_product(Product("alice", "Books", "Novel", 12.5, 10, "A story"))
    s.append_orders([make_order("alice", 1, 2), make_order("bob", 7, 1)])
    return s


def test_orders_for_seller_filters(store):
    assert orders_for_seller(store, "alice") == [make_order("alice", 1, 2)]
    assert orders_for_seller(store, "bob") == [make_order("bob", 7, 1)]
    assert orders_for_seller(store, "nobody") == []


def test_view_order_history_lists_everything(store):
    console, out = make_console()
    orders = view_order_history(console, store)
    assert orders == [make_order("alice", 1, 2), make_order("bob", 7, 1)]
    text = out.getvalue()
    assert "Order History" in text
    assert "Novel" in text
    assert "Product ID: 7, Quantity: 1 (Invalid ID)" in text
    assert "Order #2:" in text


def test_view_all_orders_for_seller(store):
    console, out = make_console()
    session = Session(User(username="alice", password=PASSWORD))
    orders = view_all_orders(console, store, session)
    assert [o.seller for o in orders] == ["alice"]
    assert "Sold Orders" in out.getvalue()
    assert "Order #2:" not in out.getvalue()


def test_view_all_orders_none_for_seller(store):
    console, out = make_console()
    session = Session(User(username="dave", password=PASSWORD))
    assert view_all_orders(console, store, session) == []
    assert "No orders found for the current seller!" in out.getvalue()


def test_missing_orders_file(tmp_path):
    console, out = make_console()
    assert view_order_history(console, DataStore(tmp_path)) == []
    assert "Error opening orders file for reading!" in out.getvalue()