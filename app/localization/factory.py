"""Factory functions for creating localization components.

Provides convenience functions for building registries, translators and
loaders from settings, plus the entry-point initialization applications call
at startup.
"""

from pathlib import Path
from threading import Lock
from typing import Optional

from core.config import LocaleSettings, settings
from core.logging import get_module_logger
from localization.loader import (
    FileTranslationLoader,
    HTTPTranslationLoader,
    TranslationLoader,
    load_locale_strings,
)
from localization.registry import TranslationRegistry
from localization.translator import ScopedTranslator

logger = get_module_logger()

_DEFAULT_REGISTRY: Optional[TranslationRegistry] = None
_registry_lock = Lock()


def create_registry(
    locale_settings: Optional[LocaleSettings] = None,
) -> TranslationRegistry:
    """Create an empty registry configured from settings.

    Args:
        locale_settings: Settings to use (default: settings.locale).

    Returns:
        TranslationRegistry with the configured default locale and host
        locale override.
    """
    config = locale_settings or settings.locale
    return TranslationRegistry(
        default_locale=config.DEFAULT_LOCALE,
        locale_override=config.LOCALE,
    )


def create_translator(
    registry: Optional[TranslationRegistry] = None,
) -> ScopedTranslator:
    """Create a top-level translator (default: over the default registry)."""
    return ScopedTranslator(registry or get_default_registry())


def create_loader(
    locale_settings: Optional[LocaleSettings] = None,
) -> Optional[TranslationLoader]:
    """Create the configured locale string loader.

    LOCALE_STRINGS_URL selects the HTTP loader, LOCALE_STRINGS_DIR the file
    loader. Returns None when neither is configured.
    """
    config = locale_settings or settings.locale
    if config.STRINGS_URL:
        return HTTPTranslationLoader(config.STRINGS_URL, timeout=config.LOADER_TIMEOUT)
    if config.STRINGS_DIR:
        return FileTranslationLoader(Path(config.STRINGS_DIR))
    return None


def init_locale(
    registry: Optional[TranslationRegistry] = None,
    loader: Optional[TranslationLoader] = None,
) -> bool:
    """Initialize the locale environment. Applications call this at startup.

    Loads strings for the current locale using loader, or the configured
    loader when none is given.

    Returns:
        True if strings were loaded and registered.
    """
    registry = registry or get_default_registry()
    loader = loader or create_loader()

    if loader is None:
        logger.info("no_locale_loader_configured", locale=registry.get_locale())
        return False

    return load_locale_strings(registry, loader)


def get_default_registry() -> TranslationRegistry:
    """Get or create the process-wide registry."""
    global _DEFAULT_REGISTRY  # pylint: disable=global-statement
    if _DEFAULT_REGISTRY is None:
        with _registry_lock:
            if _DEFAULT_REGISTRY is None:
                _DEFAULT_REGISTRY = create_registry()
                logger.debug("created_default_registry")
    return _DEFAULT_REGISTRY


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next access creates a new one."""
    global _DEFAULT_REGISTRY  # pylint: disable=global-statement
    with _registry_lock:
        _DEFAULT_REGISTRY = None
