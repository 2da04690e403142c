"""Fixtures for SQLite-backed repository tests."""

from tests.shared.fixtures.database import sqlite_engine, sqlite_session  # noqa: F401
