import io

from fcodeshop.auth import login_form, register_form
from fcodeshop.console import Console
from fcodeshop.models import AccountType, Session, User
from fcodeshop.store import DataStore


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def existing_user(email="bob@example.com", phone="0002"):
    password = "password"
    return User(
        username="bob", password=password, email=email, phone=phone,
        full_name="Bob", address="Somewhere", account_type=AccountType.BUYER,
    )


def test_register_buyer_saves_and_logs_in(tmp_path):
    store = DataStore(tmp_path)
    session = Session()
    console, _ = make_console(
        "alice\npassword\npassword\nalice@example.com\n0001\n"
        "Alice Smith\n1 Main St\n1\n"
    )
    user = register_form(console, store, session)
    password = "password"
    expected = User(
        username="alice", password=password, email="alice@example.com",
        phone="0001", full_name="Alice Smith", address="1 Main St",
        account_type=AccountType.BUYER, shop_name=".", warehouse_address=".",
    )
    assert user == expected
    assert store.read_users() == [expected]
    assert session.user == expected


def test_register_retries_password_confirmation(tmp_path):
    store = DataStore(tmp_path)
    console, out = make_console(
        "alice\npassword\nwrong\npassword\nalice@example.com\n0001\n"
        "Alice\nStreet\n1\n"
    )
    user = register_form(console, store, Session())
    assert user.password == "password"
    assert "Passwords do not match!" in out.getvalue()


def test_register_rejects_existing_email_and_phone(tmp_path):
    store = DataStore(tmp_path)
    store.append_user(existing_user())
    console, out = make_console(
        "alice\npassword\npassword\nbob@example.com\nalice@example.com\n"
        "0002\n0001\nAlice\nStreet\n1\n"
    )
    user = register_form(console, store, Session())
    assert user.email == "alice@example.com"
    assert user.phone == "0001"
    text = out.getvalue()
    assert "Email already exists! Please enter another email." in text
    assert "Phone already exists! Please enter another phone." in text
    assert [u.username for u in store.read_users()] == ["bob", "alice"]


def test_register_seller_asks_shop_details(tmp_path):
    store = DataStore(tmp_path)
    console, out = make_console(
        "sam\npassword\npassword\nsam@example.com\n0003\n"
        "Sam Seller\nMarket Road\n3\n2\nSam's Shop\nDepot Lane 4\n"
    )
    user = register_form(console, store, Session())
    assert user.is_seller()
    assert user.shop_name == "Sam's Shop"
    assert user.warehouse_address == "Depot Lane 4"
    assert "Invalid account type!" in out.getvalue()
    assert store.read_users()[0].shop_name == "Sam's Shop"


def test_register_failure_leaves_session_empty(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory")
    store = DataStore(blocker)
    session = Session()
    console, out = make_console(
        "alice\npassword\npassword\nalice@example.com\n0001\nAlice\nStreet\n1\n"
    )
    assert register_form(console, store, session) is None
    assert session.logged_in is False
    assert "Registration Failed!" in out.getvalue()


def test_login_success(tmp_path):
    store = DataStore(tmp_path)
    store.append_user(existing_user())
    session = Session()
    console, out = make_console("bob\npassword\n")
    assert login_form(console, store, session) is True
    assert session.user.username == "bob"
    assert "Login successful!" in out.getvalue()


def test_login_failure_and_give_up(tmp_path):
    store = DataStore(tmp_path)
    store.append_user(existing_user())
    session = Session()
    console, out = make_console("bob\nwrong\n2\n")
    assert login_form(console, store, session) is False
    assert session.logged_in is False
    assert "Invalid username or password!" in out.getvalue()


def test_login_retry_then_success(tmp_path):
    store = DataStore(tmp_path)
    store.append_user(existing_user())
    session = Session()
    console, out = make_console("bob\nwrong\n5\n1\nbob\npassword\n")
    assert login_form(console, store, session) is True
    assert session.user.email == "bob@example.com"
    assert "Invalid choice!" in out.getvalue()


def test_login_without_users_file(tmp_path):
    store = DataStore(tmp_path)
    session = Session()
    console, _ = make_console("bob\npassword\n2\n")
    assert login_form(console, store, session) is False
    assert session.user is None