"""Translators resolving dotted keys against a translation registry.

Usage:
    registry = TranslationRegistry()
    translate = ScopedTranslator(registry)

    DEFAULT_TEXT = {"link1": "hello", "figure": "Figure %(index)s"}
    t = translate.scoped("course.contact-info", DEFAULT_TEXT)

    translate("course.contact-info.link0")
    t("link1")
    t("figure", index=3)

Scopes are dotted namespaces such as
"<package-name>.path-organization.ComponentName". When a locale file later
supplies a value for a seeded key, the locale file wins because defaults are
only written where the registry had nothing.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from core.logging import get_module_logger
from localization.models import (
    InterpolationError,
    TranslationOptions,
    TranslationTree,
    is_branch,
    join_path,
    missing_translation,
)
from localization.paths import flatten, gen
from localization.registry import TranslationRegistry

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"%\((\w+)\)s")
MISSING_VALUE_PATTERN = re.compile(r"^missing", re.IGNORECASE)


def is_missing_value(value: str) -> bool:
    """Return True if a resolved string is a missing-translation sentinel."""
    return bool(MISSING_VALUE_PATTERN.match(value))


def interpolate(message: str, variables: Dict[str, Any]) -> str:
    """Replace %(name)s placeholders with values from variables.

    Args:
        message: String with %(name)s placeholders.
        variables: Dict of variable name -> value.

    Returns:
        Message with variables interpolated.

    Raises:
        InterpolationError: If a placeholder has no matching variable.
    """
    for name in PLACEHOLDER_PATTERN.findall(message):
        if name not in variables:
            logger.error(
                "missing_interpolation_variable",
                variable=name,
                available_variables=list(variables.keys()),
            )
            raise InterpolationError(name, message)

    return PLACEHOLDER_PATTERN.sub(lambda m: str(variables[m.group(1)]), message)


class Translator(ABC):
    """Callable resolving keys to strings, plus its composition helpers."""

    @abstractmethod
    def __call__(self, key: str, **options: Any) -> str:
        """Resolve key to a string.

        Args:
            key: Dotted key, relative to the translator's scope.
            **options: "scope" and "fallback" are options, every other
                keyword is an interpolation variable. "scope" only applies
                to a translator without a bound scope.
        """

    @abstractmethod
    def is_missing(self, key: str) -> bool:
        """Return True if key has no value for the current locale."""

    @abstractmethod
    def scoped(
        self, scope: str, defaults: Optional[TranslationTree] = None
    ) -> "Translator":
        """Return a translator for a deeper scope."""

    def override(self, other: Optional["Translator"]) -> "Translator":
        """Return a translator preferring other and falling back to self.

        Args:
            other: Translator whose values take precedence. None returns self.
        """
        if other is None:
            return self

        # pylint: disable=import-outside-toplevel
        from localization.overrides import OverrideTranslator

        return OverrideTranslator(self, other)


class ScopedTranslator(Translator):
    """Translator bound to a registry and an optional scope.

    A translator with no scope resolves full keys and is the top-level
    translator. Creating a scoped translator with defaults registers every
    default whose path is missing, once, for the current locale.

    Attributes:
        registry: TranslationRegistry the translator reads from.
    """

    def __init__(
        self,
        registry: TranslationRegistry,
        scope: Optional[str] = None,
        defaults: Optional[TranslationTree] = None,
    ):
        self.registry = registry
        self._scope = scope

        if scope is not None and (not scope or "." not in scope):
            logger.warning("bad_locale_scope", scope=scope)

        if defaults is not None:
            self._seed_defaults(defaults)

    @property
    def scope(self) -> Optional[str]:
        """Dotted scope prefix, None for the top-level translator."""
        return self._scope

    def __call__(self, key: str, **options: Any) -> str:
        opts = TranslationOptions.from_kwargs(options)
        locale = self.registry.get_locale()
        # A bound scope replaces any per-call scope option
        scope = self._scope if self._scope is not None else opts.scope
        path = join_path(scope, key)

        value = self.registry.lookup(locale, path)
        if value is not None and not is_branch(value):
            return interpolate(str(value), opts.variables)

        if opts.fallback:
            return interpolate(opts.fallback, opts.variables)

        return missing_translation(locale, path)

    def is_missing(self, key: str) -> bool:
        try:
            return is_missing_value(self(key))
        except InterpolationError:
            # A template with unbound placeholders exists
            return False

    def scoped(
        self, scope: str, defaults: Optional[TranslationTree] = None
    ) -> "ScopedTranslator":
        return ScopedTranslator(
            self.registry, join_path(self._scope, scope), defaults
        )

    def _seed_defaults(self, defaults: TranslationTree) -> None:
        root = ScopedTranslator(self.registry)
        locale = self.registry.get_locale()
        seeded = 0

        for path, value in flatten(defaults, self._scope).items():
            if root.is_missing(path):
                self.registry.register_translations(locale, gen(path, value))
                seeded += 1

        if seeded:
            logger.debug(
                "seeded_default_translations",
                scope=self._scope,
                locale=locale,
                count=seeded,
            )

    def __repr__(self) -> str:
        return f"ScopedTranslator(scope={self._scope!r})"
