"""Bookshelf: a CRUD HTTP service for books."""

__version__ = "0.1.0"
