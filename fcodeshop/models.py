"""Domain objects shared by the shop: users, catalogue entries, carts and orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_PRODUCTS = 1000


class AccountType(IntEnum):
    """Kind of account a user registers with."""

    BUYER = 1
    SELLER = 2


@dataclass
class User:
    """A registered account; sellers also carry shop details."""

    username: str
    password: str
    email: str = ""
    phone: str = ""
    full_name: str = ""
    address: str = ""
    account_type: int = AccountType.BUYER
    shop_name: str = "."
    warehouse_address: str = "."

    def is_seller(self) -> bool:
        return self.account_type == AccountType.SELLER


@dataclass
class Category:
    """A category owned by one seller."""

    username: str
    name: str


@dataclass
class Product:
    """A product listed by a seller."""

    seller: str
    category: str
    name: str
    price: float
    quantity: int
    description: str


@dataclass
class Cart:
    """A buyer's cart: product id mapped to quantity."""

    username: str
    items: dict[int, int] = field(default_factory=dict)

    def add(self, product_id: int, quantity: int) -> None:
        """Add a quantity of a product, keeping items ordered by product id."""
        self.items[product_id] = self.items.get(product_id, 0) + quantity
        self.items = dict(sorted(self.items.items()))

    def remove(self, product_id: int) -> bool:
        """Remove a product; return whether it was in the cart."""
        return self.items.pop(product_id, None) is not None

    def quantity_of(self, product_id: int) -> int:
        return self.items.get(product_id, 0)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class Order:
    """One ordered line: a single product bought from a single seller."""

    seller: str
    buyer: str
    email: str
    phone: str
    full_name: str
    address: str
    date: str
    notes: str
    total: float
    product_id: int
    quantity: int


@dataclass
class Session:
    """The currently logged-in user, if any."""

    user: User | None = None

    @property
    def logged_in(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> None:
        self.user = user

    def logout(self) -> None:
        self.user = None