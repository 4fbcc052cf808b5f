# fcodeshop

A small marketplace that runs in the terminal. People register as a
**buyer** or a **seller**, log in, and work through numbered menus.
Everything is kept in plain text files, so the shop's state is easy to
inspect and back up. It needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
fcodeshop
```

By default the shop keeps its files in `data/` under the current
directory. Use `--data-dir` to point it elsewhere:

```
fcodeshop --data-dir /path/to/shop-data
```

The start menu offers:

1. Register
2. Login
3. Exit

Registration asks for a username, a password (typed twice), an e-mail
address and a phone number (both must not be registered yet), a full
name, an address and the account type. Sellers also give a shop name and
a warehouse address. A new account is logged in straight away. After
logging in you are taken to the menu for your account type. Ending the
input (Ctrl-D) or pressing Ctrl-C leaves the program.

### Buyers

- Browse all products, or search product names by keyword
  (case-insensitive).
- View the cart, with a subtotal per item, the order total, a flat
  $5.00 shipping fee and the grand total.
- Add products to the cart; the quantity asked for may not exceed the
  stock, and neither may the quantity already in the cart plus the
  quantity added.
- Delete the whole cart, or only chosen product IDs. If any of the
  chosen IDs is not in the cart, nothing is deleted.
- Check out, with an optional note and either your own contact details
  or another recipient's (whose e-mail address and phone number must not
  belong to a registered account). Every cart line becomes its own
  order, and the cart is then emptied.
- View the order history: this lists every order recorded in the shop.

### Sellers

- View, add, rename and delete your categories. Renaming a category
  also renames it on every one of your products that used it. Deleting
  a category leaves your products unchanged.
- View, add, update and delete your products. When deleting or
  updating, an ID outside your list cancels the whole operation.
- View the orders placed for your products.

Choose `0` in either menu to log out.

## Data files

The shop reads and writes these files in its data directory:

| File             | Holds                                                   |
|------------------|---------------------------------------------------------|
| `users.txt`      | registered accounts, nine lines per user                |
| `categories.txt` | seller categories, two lines each (owner, name)         |
| `products.txt`   | products, six lines each                                |
| `carts.txt`      | one block per buyer, ended by a blank line              |
| `orders.txt`     | placed orders, eleven lines per ordered product, then a blank line |

Products are numbered from 1 in the order they appear in
`products.txt`; a seller's categories and products are numbered from 1
among that seller's own entries. Those numbers are the IDs the menus ask
for.

## Using it as a library

The pieces behind the menus can be used directly:

- `fcodeshop.store.DataStore(root)` reads and writes the files above
  (`read_users`, `append_user`, `authenticate`, `read_products`,
  `write_products`, `read_carts`, `write_carts`, `remove_cart`,
  `read_orders`, `append_orders` and so on). It raises
  `fcodeshop.store.StoreError` when a file cannot be read or written.
- `fcodeshop.models` defines `User`, `Category`, `Product`, `Cart`,
  `Order`, the `AccountType` enum and the `Session` of the logged-in user.
- `fcodeshop.cart.add_to_cart(store, username, product_id, quantity)`
  and `fcodeshop.cart.remove_product(...)` change a cart; refusals raise
  `fcodeshop.cart.CartError`.
- `fcodeshop.checkout.place_order(store, username, recipient, notes, when=None)`
  records the orders for a cart and empties it.
- `fcodeshop.catalog.find_products(products, keyword)` searches names.
- `fcodeshop.categories.add_category`, `delete_categories` and
  `rename_product_category` manage categories (`CategoryError` on
  refusal); `fcodeshop.products.add_product` and `delete_products`
  manage products (`ProductError` on refusal).
- `fcodeshop.console.Console(stdin, stdout)` is the terminal reader and
  writer used by every screen, so the menus can be driven from any text
  streams.

## What it does not do

- Passwords are stored and compared as plain text, and are echoed while
  typed.
- The seller menu lists "10. Update Order Status", but there is no such
  action: choosing it reports an invalid choice.
- The dashboards shown after login are fixed text with placeholders, not
  real figures.
- The total written for each order is the product ID multiplied by the
  quantity, not the product's price times the quantity.
- There is no locking: two people using the same data directory at once
  can overwrite each other's changes.