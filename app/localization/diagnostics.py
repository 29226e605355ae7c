"""Tooling helpers for inspecting registered translations.

Not used for resolution. Useful from a shell or debugger:

    find_locale_keys(registry.translations, "contact")
    find_locale_keys(registry.translations, re.compile(r"%\\(\\w+\\)s"))
    get_available_translations(registry, "course.contact-info")
"""

from typing import Any, Optional

from localization.models import TranslationTree, is_branch
from localization.paths import lookup
from localization.registry import TranslationRegistry


def matches(value: str, predicate: Any) -> bool:
    """Test a string value against a predicate.

    Args:
        value: String leaf.
        predicate: Substring (case-insensitive), callable, compiled regex or
            a list/tuple of any of these (any match wins).

    Returns:
        True if the value matches.
    """
    if isinstance(predicate, (list, tuple)):
        return any(matches(value, p) for p in predicate)

    if isinstance(predicate, str):
        return predicate.lower() in value.lower()

    if hasattr(predicate, "search"):
        return predicate.search(value) is not None

    if callable(predicate):
        return bool(predicate(value))

    return False


def find_locale_keys(tree: TranslationTree, predicate: Any) -> Optional[TranslationTree]:
    """Filter a tree down to string leaves matching predicate.

    Args:
        tree: Nested tree, e.g. registry.translations (locale at the top).
        predicate: See matches().

    Returns:
        Tree holding only matching leaves and their parents, or None if
        nothing matched.
    """
    filtered: TranslationTree = {}

    for key, value in tree.items():
        if is_branch(value):
            subtree = find_locale_keys(value, predicate)
            if subtree:
                filtered[key] = subtree
        elif isinstance(value, str) and matches(value, predicate):
            filtered[key] = value

    return filtered or None


def get_available_translations(
    registry: TranslationRegistry,
    scope: str,
    locale: Optional[str] = None,
) -> Any:
    """Return the subtree or leaf registered at scope, or None."""
    return lookup(scope, registry.get_translations(locale))
