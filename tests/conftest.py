"""Test configuration.

Environment variables are set before any application module is imported so
that config.yaml resolves to an in-memory database and cheap password hashing.
"""

import os

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["PROTECT_BOOKS"] = "false"

pytest_plugins = ["tests.fixtures"]
