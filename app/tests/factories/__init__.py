"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_context,
    make_settings,
    write_group,
    write_json,
)

__all__ = [
    "make_context",
    "make_settings",
    "write_group",
    "write_json",
]
