"""Override composition of translators.

Given two translators, a key is resolved from the overriding translator when
it has a value, otherwise from the overridden one. Chains are right-biased:
base.override(a).override(b) asks b first, then a, then base.
"""

from typing import Any, Optional

from localization.models import TranslationTree
from localization.translator import Translator


class OverrideTranslator(Translator):
    """Translator combining an overridden and an overriding translator.

    Neither input is modified.

    Attributes:
        base: Translator consulted when the override has no value.
        overriding: Translator whose values take precedence.
    """

    def __init__(self, base: Translator, overriding: Translator):
        self.base = base
        self.overriding = overriding

    def __call__(self, key: str, **options: Any) -> str:
        if not self.overriding.is_missing(key):
            return self.overriding(key, **options)

        if not self.base.is_missing(key):
            return self.base(key, **options)

        # Missing on both sides: report both sentinels
        return f"{self.base(key, **options)}, {self.overriding(key, **options)}"

    def is_missing(self, key: str) -> bool:
        return self.base.is_missing(key) and self.overriding.is_missing(key)

    def scoped(
        self, scope: str, defaults: Optional[TranslationTree] = None
    ) -> "OverrideTranslator":
        """Scope both sides, seeding defaults on the base side only."""
        return OverrideTranslator(
            self.base.scoped(scope, defaults), self.overriding.scoped(scope)
        )

    def __repr__(self) -> str:
        return f"OverrideTranslator(base={self.base!r}, overriding={self.overriding!r})"


def override(base: Translator, overriding: Optional[Translator]) -> Translator:
    """Return a translator preferring overriding and falling back to base."""
    return base.override(overriding)
