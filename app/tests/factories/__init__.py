"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_settings,
    make_registry,
    make_translation_tree,
)

__all__ = [
    "make_locale_settings",
    "make_registry",
    "make_translation_tree",
]
