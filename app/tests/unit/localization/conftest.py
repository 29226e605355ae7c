"""Feature-level fixtures for localization tests.

Provides registries, translators and translation files for resolution,
override and loading scenarios.
"""

import json

import pytest
import yaml

from localization import ScopedTranslator
from tests.factories.i18n import make_registry, make_translation_tree


@pytest.fixture
def registry():
    """Empty registry with "en" as its locale."""
    return make_registry()


@pytest.fixture
def populated_registry():
    """Registry holding the sample tree under "en"."""
    return make_registry(make_translation_tree())


@pytest.fixture
def translate(registry):
    """Top-level translator over the empty registry."""
    return ScopedTranslator(registry)


@pytest.fixture
def override_scopes(translate):
    """Base, override and third translators seeded with defaults."""
    base = translate.scoped(
        "lib-locale.tests.override.base.scope",
        {
            "baseOnly": "base only",
            "topLevel": "top level base",
            "nested": {"value": "nested value base"},
        },
    )
    overriding = translate.scoped(
        "lib-locale.tests.override.override.scope",
        {
            "overrideOnly": "override only",
            "topLevel": "top level",
            "nested": {"value": "nested value"},
        },
    )
    third = translate.scoped(
        "lib-locale.tests.override.third.scope",
        {
            "thirdOnly": "thirdLevelOnly",
            "topLevel": "top level third",
            "nested": {"value": "nested third value"},
        },
    )
    return base, overriding, third


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - course.en.yml
    - common.en.json
    - course.fr.yml
    """
    with open(tmp_path / "course.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"course": {"contact-info": {"link0": "Contact us"}}},
            f,
        )

    with open(tmp_path / "common.en.json", "w", encoding="utf-8") as f:
        json.dump({"common.ok": "OK", "course": {"contact-info": {"link1": "Help"}}}, f)

    with open(tmp_path / "course.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"course": {"contact-info": {"link0": "Contactez-nous"}}},
            f,
            allow_unicode=True,
        )

    return tmp_path
