"""In-memory translation registry with change notification.

The registry maps locale identifiers to nested translation trees and is the
only place translation data is mutated. Translators are views over a
registry and hold no data of their own.
"""

import copy
from threading import RLock
from typing import Any, Dict, List, Optional

from core.logging import get_module_logger
from localization.models import ChangeListener, TranslationTree
from localization.paths import deep_merge, lookup

logger = get_module_logger()


class TranslationRegistry:
    """Store of locale -> nested translation tree.

    Merges, locale reads and lookups share one re-entrant lock. Change
    listeners run synchronously on the mutating thread, in subscription
    order, after the merge has completed and outside the lock. A listener
    that registers translations again recurses before the outer delivery
    loop finishes.

    Attributes:
        default_locale: Locale used when no host override is set.
        locale_override: Host-provided locale. Wins over the tracked locale
            when non-empty.
    """

    def __init__(
        self,
        default_locale: str = "en",
        locale_override: Optional[str] = None,
    ):
        self.default_locale = default_locale
        self.locale_override = locale_override
        self._locale = default_locale
        self._translations: Dict[str, TranslationTree] = {}
        self._listeners: List[ChangeListener] = []
        self._lock = RLock()
        logger.debug(
            "initialized_translation_registry",
            default_locale=default_locale,
            locale_override=locale_override,
        )

    def get_locale(self) -> str:
        """Return the current locale.

        Returns:
            The host override if set and non-empty, else the tracked locale.
        """
        with self._lock:
            return self.locale_override or self._locale

    def set_locale(self, locale: str) -> None:
        """Change the tracked locale, notifying listeners if it changed.

        Args:
            locale: New locale identifier.
        """
        with self._lock:
            previous = self._locale
            self._locale = locale

        if previous != locale:
            logger.info("locale_changed", locale=locale, previous_locale=previous)
            self._notify(locale)

    def register_translations(self, locale: str, data: TranslationTree) -> None:
        """Deep-merge translation data for a locale, then notify listeners.

        Args:
            locale: Locale identifier.
            data: Nested translation tree to merge.
        """
        with self._lock:
            tree = self._translations.setdefault(locale, {})
            deep_merge(tree, data)

        logger.debug("registered_translations", locale=locale, key_count=len(data))
        self._notify(locale)

    def lookup(self, locale: str, path: str) -> Any:
        """Return the node at a dotted path for a locale, or None."""
        with self._lock:
            return lookup(path, self._translations.get(locale))

    def get_translations(self, locale: Optional[str] = None) -> TranslationTree:
        """Return a copy of one locale's tree (current locale by default)."""
        with self._lock:
            locale = locale or self.get_locale()
            return copy.deepcopy(self._translations.get(locale, {}))

    @property
    def translations(self) -> Dict[str, TranslationTree]:
        """Copy of every registered locale's tree."""
        with self._lock:
            return copy.deepcopy(self._translations)

    @property
    def locales(self) -> List[str]:
        """Locales that have translations registered."""
        with self._lock:
            return list(self._translations.keys())

    def add_change_listener(self, fn: ChangeListener) -> None:
        """Subscribe fn to translation changes.

        Subscribing the same callable twice delivers every event to it twice.
        """
        self._listeners.append(fn)

    def remove_change_listener(self, fn: ChangeListener) -> None:
        """Drop the most recent subscription of fn. Unknown listeners are ignored."""
        for index in range(len(self._listeners) - 1, -1, -1):
            if self._listeners[index] == fn:
                del self._listeners[index]
                return

    @property
    def listener_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._listeners)

    def reset(self, keep_listeners: bool = False) -> None:
        """Clear all translations and restore the default locale.

        Args:
            keep_listeners: Keep current change listeners subscribed.
        """
        with self._lock:
            self._translations.clear()
            self._locale = self.default_locale
            if not keep_listeners:
                self._listeners.clear()
        logger.info("reset_translation_registry", keep_listeners=keep_listeners)

    def _notify(self, locale: str) -> None:
        # Snapshot so listeners can unsubscribe while being called. Listener
        # errors reach the caller.
        for listener in list(self._listeners):
            listener(locale)
