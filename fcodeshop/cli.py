"""Command-line entry point: the start menu with registration and login."""

from __future__ import annotations

import argparse

from .auth import login_form, register_form
from .buyer import buyer
from .console import Console, show_start_menu
from .models import AccountType, Session
from .seller import seller
from .store import DataStore


def _run(console: Console, store: DataStore, session: Session) -> int:
    while True:
        show_start_menu(console)
        try:
            choice = console.read_int()
        except ValueError:
            choice = None
        if choice == 1:
            register_form(console, store, session)
        elif choice == 2:
            login_form(console, store, session)
        elif choice == 3:
            console.write("Exit successfully\n")
            return 0
        else:
            console.error("Invalid choice. Please try again. \n")

        if session.user is not None:
            if session.user.account_type == AccountType.BUYER:
                buyer(console, store, session)
            elif session.user.account_type == AccountType.SELLER:
                seller(console, store, session)
            else:
                console.error("Invalid account type. Please try again. \n")
                return 0


def main(argv: list[str] | None = None) -> int:
    """Run the shop interactively; return the exit status."""
    parser = argparse.ArgumentParser(prog="fcodeshop", description="Terminal shop for buyers and sellers.")
    parser.add_argument("--data-dir", default="data", help="directory holding the shop's data files")
    args = parser.parse_args(argv)
    console = Console()
    try:
        return _run(console, DataStore(args.data_dir), Session())
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())