"""Plain-text data files holding users, categories, products, carts and orders."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from .models import Cart, Category, Order, Product, User

_C_SPACE = " \t\n\v\f\r"
_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT = re.compile(r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_USER_LINES = 9
_CATEGORY_LINES = 2
_PRODUCT_LINES = 6
_ORDER_LINES = 11


class StoreError(Exception):
    """A data file could not be read or written."""


def trim_trailing(text: str) -> str:
    """Remove trailing whitespace, including the line break."""
    return text.rstrip(_C_SPACE)


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _records(lines: list[str], size: int) -> Iterable[list[str]]:
    """Yield fixed-size records, skipping blank lines between records."""
    index = 0
    while index < len(lines):
        if not lines[index]:
            index += 1
            continue
        record = lines[index:index + size]
        if len(record) < size:
            return
        yield record
        index += size


class DataStore:
    """Access to the shop's data directory."""

    def __init__(self, root: str | Path = "data"):
        self.root = Path(root)

    @property
    def users_path(self) -> Path:
        return self.root / "users.txt"

    @property
    def categories_path(self) -> Path:
        return self.root / "categories.txt"

    @property
    def products_path(self) -> Path:
        return self.root / "products.txt"

    @property
    def carts_path(self) -> Path:
        return self.root / "carts.txt"

    @property
    def orders_path(self) -> Path:
        return self.root / "orders.txt"

    def _read_lines(self, path: Path, what: str) -> list[str]:
        try:
            with path.open(encoding="utf-8") as handle:
                return [trim_trailing(line) for line in handle]
        except OSError as exc:
            raise StoreError(f"Error opening {what} file for reading!") from exc

    def _write(self, path: Path, text: str, mode: str, what: str) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with path.open(mode, encoding="utf-8", newline="\n") as handle:
                handle.write(text)
        except OSError as exc:
            raise StoreError(f"Error opening {what} file for writing!") from exc

    # users

    def read_users(self) -> list[User]:
        users = []
        for record in _records(self._read_lines(self.users_path, "users"), _USER_LINES):
            (username, password, email, phone, full_name, address,
             account_type, shop_name, warehouse_address) = record
            users.append(User(
                username=username,
                password=password,
                email=email,
                phone=phone,
                full_name=full_name,
                address=address,
                account_type=_atoi(account_type),
                shop_name=shop_name,
                warehouse_address=warehouse_address,
            ))
        return users

    def append_user(self, user: User) -> None:
        fields = (
            user.username, user.password, user.email, user.phone,
            user.full_name, user.address, str(int(user.account_type)),
            user.shop_name, user.warehouse_address,
        )
        self._write(self.users_path, "".join(f"{value}\n" for value in fields), "a", "users")

    def _users_or_none(self) -> list[User]:
        try:
            return self.read_users()
        except StoreError:
            return []

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user with these credentials, or None."""
        return next(
            (user for user in self._users_or_none()
             if user.username == username and user.password == password),
            None,
        )

    def email_exists(self, email: str) -> bool:
        return any(user.email == email for user in self._users_or_none())

    def phone_exists(self, phone: str) -> bool:
        return any(user.phone == phone for user in self._users_or_none())

    # categories

    def read_categories(self) -> list[Category]:
        lines = self._read_lines(self.categories_path, "categories")
        return [Category(username, name)
                for username, name in _records(lines, _CATEGORY_LINES)]

    def write_categories(self, categories: Iterable[Category]) -> None:
        text = "".join(f"{c.username}\n{c.name}\n" for c in categories if c.username)
        self._write(self.categories_path, text, "w", "categories")

    def seller_categories(self, username: str) -> list[str]:
        return [c.name for c in self.read_categories() if c.username == username]

    def category_name(self, username: str, category_id: int) -> str | None:
        """Name of a seller's category by its 1-based position, or None."""
        names = self.seller_categories(username)
        if 1 <= category_id <= len(names):
            return names[category_id - 1]
        return None

    # products

    def read_products(self) -> list[Product]:
        products = []
        lines = self._read_lines(self.products_path, "products")
        for record in _records(lines, _PRODUCT_LINES):
            seller, category, name, price, quantity, description = record
            products.append(Product(
                seller, category, name, _atof(price), _atoi(quantity), description,
            ))
        return products

    @staticmethod
    def _product_text(product: Product) -> str:
        return (
            f"{product.seller}\n{product.category}\n{product.name}\n"
            f"{product.price:.2f}\n{product.quantity}\n{product.description}\n"
        )

    def write_products(self, products: Iterable[Product]) -> None:
        text = "".join(self._product_text(p) for p in products if p.seller)
        self._write(self.products_path, text, "w", "products")

    def append_product(self, product: Product) -> None:
        self._write(self.products_path, self._product_text(product), "a", "products")

    # carts

    def read_carts(self) -> list[Cart]:
        carts: list[Cart] = []
        current: Cart | None = None
        for line in self._read_lines(self.carts_path, "carts"):
            if current is None:
                if line:
                    current = Cart(line)
                continue
            if not line:
                carts.append(current)
                current = None
                continue
            tokens = line.split()
            product_id = _atoi(tokens[0])
            quantity = _atoi(tokens[1]) if len(tokens) > 1 else 0
            current.items[product_id] = current.items.get(product_id, 0) + quantity
        if current is not None:
            carts.append(current)
        return carts

    def write_carts(self, carts: Iterable[Cart]) -> None:
        parts = []
        for cart in carts:
            parts.append(f"{cart.username}\n")
            parts.extend(f"{pid} {qty}\n" for pid, qty in cart.items.items())
            parts.append("\n")
        self._write(self.carts_path, "".join(parts), "w", "carts")

    def remove_cart(self, username: str) -> bool:
        """Drop a user's cart from the carts file; return whether it was there."""
        carts = self.read_carts()
        kept = [cart for cart in carts if cart.username != username]
        self.write_carts(kept)
        return len(kept) != len(carts)

    # orders

    def read_orders(self) -> list[Order]:
        orders = []
        lines = self._read_lines(self.orders_path, "orders")
        for record in _records(lines, _ORDER_LINES):
            (seller, buyer, email, phone, full_name, address,
             date, notes, total, product_id, quantity) = record
            orders.append(Order(
                seller=seller, buyer=buyer, email=email, phone=phone,
                full_name=full_name, address=address, date=date, notes=notes,
                total=_atof(total), product_id=_atoi(product_id),
                quantity=_atoi(quantity),
            ))
        return orders

    def append_orders(self, orders: Iterable[Order]) -> None:
        text = "".join(
            f"{o.seller}\n{o.buyer}\n{o.email}\n{o.phone}\n{o.full_name}\n"
            f"{o.address}\n{o.date}\n{o.notes}\n{o.total:.2f}\n"
            f"{o.product_id}\n{o.quantity}\n\n"
            for o in orders
        )
        self._write(self.orders_path, text, "a", "orders")