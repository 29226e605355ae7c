"""Translation models for the localization library.

Defines the translation tree types, the options accepted by a translator
call and the library's error types.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

# A node is either a leaf (usually a string) or a nested tree. Only exact
# dicts are trees; lists, dict subclasses and other objects are opaque leaves.
TranslationNode = Any
TranslationTree = Dict[str, TranslationNode]

ChangeListener = Callable[[str], Any]

MISSING_PREFIX = "missing translation"


def is_branch(node: Any) -> bool:
    """Return True if node is a nested translation tree."""
    return type(node) is dict  # pylint: disable=unidiomatic-typecheck


def missing_translation(locale: str, path: str) -> str:
    """Build the sentinel returned for a key with no translation.

    Args:
        locale: Locale the lookup ran against.
        path: Full dotted path that was looked up.

    Returns:
        String of the form "missing translation: <locale>.<path>".
    """
    return f"{MISSING_PREFIX}: {locale}.{path}"


def join_path(*segments: Optional[str]) -> str:
    """Join dotted path segments, skipping empty ones."""
    return ".".join(s for s in segments if s)


class InterpolationError(ValueError):
    """Raised when a translation placeholder has no matching variable."""

    def __init__(self, variable: str, message: str):
        super().__init__(f"Missing interpolation variable: {variable}")
        self.variable = variable
        self.message = message


@dataclass(frozen=True)
class TranslationOptions:
    """Options for a single translator call.

    Attributes:
        scope: Extra dotted prefix applied after the translator's own scope.
        fallback: String used when the registry holds no value for the key.
        variables: Interpolation bindings, every other keyword of the call.
    """

    scope: Optional[str] = None
    fallback: Optional[str] = None
    variables: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_kwargs(cls, options: Dict[str, Any]) -> "TranslationOptions":
        """Split call keywords into recognized options and variables.

        Args:
            options: Keyword arguments passed to a translator.

        Returns:
            TranslationOptions instance.
        """
        variables = dict(options)
        scope = variables.pop("scope", None)
        fallback = variables.pop("fallback", None)
        return cls(scope=scope, fallback=fallback, variables=variables)
