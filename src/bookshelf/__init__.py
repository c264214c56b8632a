"""Bookshelf API: a small Book CRUD service with JWT token issuance."""

__version__ = "0.1.0"
