"""A terminal marketplace for buyers and sellers, stored in plain text files."""

__version__ = "0.1.0"