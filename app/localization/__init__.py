"""Localization library - scoped translation lookup with overrides.

Resolves dotted translation keys against an in-memory registry of locale
string trees, with scoped translators that seed defaults, override chains
across translation sources, and locale-aware currency strings.

Main components:
- models: tree types, TranslationOptions, InterpolationError
- paths: flatten, traverse, gen and other dotted path helpers
- registry: TranslationRegistry with change listeners
- translator: Translator, ScopedTranslator, interpolate
- overrides: OverrideTranslator
- currency: get_localized_currency_string
- diagnostics: find_locale_keys, get_available_translations
- loader: FileTranslationLoader, HTTPTranslationLoader
- factory: create_registry, create_translator, init_locale
"""

from localization.currency import get_localized_currency_string
from localization.diagnostics import find_locale_keys, get_available_translations
from localization.factory import (
    create_loader,
    create_registry,
    create_translator,
    get_default_registry,
    init_locale,
    reset_default_registry,
)
from localization.loader import (
    FileTranslationLoader,
    HTTPTranslationLoader,
    TranslationLoader,
    load_locale_strings,
)
from localization.models import InterpolationError, TranslationOptions
from localization.overrides import OverrideTranslator, override
from localization.paths import flatten, gen, traverse
from localization.registry import TranslationRegistry
from localization.translator import ScopedTranslator, Translator, interpolate

__all__ = [
    "TranslationRegistry",
    "Translator",
    "ScopedTranslator",
    "OverrideTranslator",
    "override",
    "interpolate",
    "InterpolationError",
    "TranslationOptions",
    "flatten",
    "traverse",
    "gen",
    "get_localized_currency_string",
    "find_locale_keys",
    "get_available_translations",
    "TranslationLoader",
    "FileTranslationLoader",
    "HTTPTranslationLoader",
    "load_locale_strings",
    "create_registry",
    "create_translator",
    "create_loader",
    "init_locale",
    "get_default_registry",
    "reset_default_registry",
]
