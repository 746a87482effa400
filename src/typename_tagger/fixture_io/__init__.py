"""Fixture I/O exports."""

from .fixture_files import FixtureError, read_fixture, write_fixture

__all__ = ["FixtureError", "read_fixture", "write_fixture"]
