"""Registration and login forms."""

from __future__ import annotations

from .console import Console, ask_relogin
from .models import AccountType, Session, User
from .store import DataStore, StoreError

_RULE = "====================================\n"
_ASK_HIDDEN = "Password: "


def _read_unique(console: Console, prompt: str, exists, message: str) -> str:
    """Ask for a value until one is given that is not already registered."""
    while True:
        value = console.read_token(prompt)
        if not exists(value):
            return value
        console.error(message)


def _read_account_type(console: Console) -> int:
    while True:
        try:
            value = console.read_int("Account Type (1: Buyer, 2: Seller): ")
        except ValueError:
            value = 0
        if value in (AccountType.BUYER, AccountType.SELLER):
            return AccountType(value)
        console.write("Invalid account type!\n")


def register_form(console: Console, store: DataStore, session: Session) -> User | None:
    """Collect a new account, save it and log it in; return it, or None on failure."""
    console.write(f"{_RULE}       USER REGISTRATION        \n{_RULE}")
    username = console.read_token("Username: ")
    password = console.read_token(_ASK_HIDDEN)
    confirm = console.read_token("Confirm Password: ")
    while confirm != password:
        confirm = console.read_token("Passwords do not match! Please re-enter: ")

    email = _read_unique(
        console, "Email: ", store.email_exists,
        "Email already exists! Please enter another email.\n",
    )
    phone = _read_unique(
        console, "Phone Number: ", store.phone_exists,
        "Phone already exists! Please enter another phone.\n",
    )
    full_name = console.read_line("Full Name: ")
    address = console.read_line("Address: ")
    account_type = _read_account_type(console)

    shop_name = warehouse_address = "."
    if account_type == AccountType.SELLER:
        shop_name = console.read_line("Shop Name: ")
        warehouse_address = console.read_line("Warehouse Address: ")

    user = User(
        username=username,
        password=password,
        email=email,
        phone=phone,
        full_name=full_name,
        address=address,
        account_type=account_type,
        shop_name=shop_name,
        warehouse_address=warehouse_address,
    )
    try:
        store.append_user(user)
    except StoreError:
        console.error("Registration Failed!\n")
        console.write(_RULE)
        return None
    session.login(user)
    console.success("\nRegistration Successful!\n")
    console.write(_RULE)
    return user


def login_form(console: Console, store: DataStore, session: Session) -> bool:
    """Ask for credentials until they match or the user gives up; return success."""
    while True:
        console.write(f"{_RULE}               LOGIN        \n{_RULE}")
        username = console.read_token("Username: ")
        password = console.read_token(_ASK_HIDDEN)
        user = store.authenticate(username, password)
        if user is not None:
            session.login(user)
            console.success("Login successful!\n")
            return True
        console.error("Invalid username or password!\n")
        if not ask_relogin(console):
            return False