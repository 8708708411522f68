"""Encoding of Python values as PostgreSQL literals and decoding of text-format values."""

__version__ = "0.1.0"