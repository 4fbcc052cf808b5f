import pytest

from fcodeshop.models import AccountType, Cart, Session, User

PASSWORD = "password"


def test_seller_account_is_seller():
    user = User("bob", password=PASSWORD, account_type=AccountType.SELLER)
    assert user.is_seller() is True


def test_buyer_account_is_not_seller():
    user = User("ann", password=PASSWORD, account_type=AccountType.BUYER)
    assert user.is_seller() is False


def test_plain_int_account_type_matches_enum():
    user = User("bob", password=PASSWORD, account_type=2)
    assert user.is_seller() is True


def test_buyer_defaults_shop_fields_to_dot():
    user = User("ann", password=PASSWORD)
    assert (user.shop_name, user.warehouse_address) == (".", ".")


def test_cart_add_accumulates_quantity():
    cart = Cart("ann")
    cart.add(3, 2)
    cart.add(3, 4)
    assert cart.quantity_of(3) == 6


def test_cart_add_keeps_ids_sorted():
    cart = Cart("ann")
    for product_id in (9, 2, 5):
        cart.add(product_id, 1)
    assert list(cart.items) == sorted(cart.items)


def test_cart_quantity_of_missing_is_zero():
    assert Cart("ann").quantity_of(7) == 0


@pytest.mark.parametrize("present", [True, False])
def test_cart_remove_reports_presence(present):
    cart = Cart("ann")
    if present:
        cart.add(4, 1)
    assert cart.remove(4) is present
    assert cart.quantity_of(4) == 0


def test_cart_len_counts_distinct_products():
    cart = Cart("ann")
    cart.add(1, 5)
    cart.add(1, 5)
    cart.add(2, 1)
    assert len(cart) == 2


def test_session_login_and_logout():
    session = Session()
    assert session.logged_in is False
    user = User("ann", password=PASSWORD)
    session.login(user)
    assert session.logged_in is True
    assert session.user is user
    session.logout()
    assert session.user is None