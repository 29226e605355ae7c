"""Locale string loading interface and implementations.

Loaders fetch a translation document for one locale. Documents may use
nested or dotted keys; both are normalized to nested trees before they reach
the registry.
"""

import json
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import Any, Optional

import requests
import yaml

from core.logging import get_module_logger
from localization.models import TranslationTree, is_branch
from localization.paths import deep_merge, expand
from localization.registry import TranslationRegistry

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for locale string loaders."""

    @abstractmethod
    def load(self, locale: str) -> TranslationTree:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            Nested translation tree.

        Raises:
            FileNotFoundError: If no translations exist for the locale.
            ValueError: If the document format is invalid.
        """


def _as_tree(data: Any, source: str) -> TranslationTree:
    if data is None:
        return {}
    if not is_branch(data):
        raise ValueError(f"Translation document must be a mapping: {source}")
    return expand(data)


class FileTranslationLoader(TranslationLoader):
    """Loader for YAML and JSON translation files.

    Expects files named <locale>.yml, <domain>.<locale>.yml, or the .yaml and
    .json equivalents, in translations_dir. All files for a locale are merged
    in sorted order.

    Attributes:
        translations_dir: Path to directory containing translation files.
    """

    SUFFIXES = (".yml", ".yaml", ".json")

    def __init__(self, translations_dir: Path):
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_file_loader", translations_dir=str(self.translations_dir)
        )

    def _files_for(self, locale: str) -> list:
        files = []
        for suffix in self.SUFFIXES:
            files.extend(self.translations_dir.glob(f"{locale}{suffix}"))
            files.extend(self.translations_dir.glob(f"*.{locale}{suffix}"))
        return sorted(set(files))

    def load(self, locale: str) -> TranslationTree:
        """Load and merge every translation file for a locale.

        Raises:
            FileNotFoundError: If no files exist for the locale.
            ValueError: If a file cannot be parsed.
        """
        files = self._files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        tree: TranslationTree = {}
        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    if path.suffix == ".json":
                        data = json.load(f)
                    else:
                        data = yaml.safe_load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                logger.error("translation_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e

            if data is not None and not is_branch(data):
                logger.warning(
                    "invalid_translation_format", file=str(path), expected="dict"
                )
                continue

            deep_merge(tree, _as_tree(data, str(path)))

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(files),
            namespace_count=len(tree),
        )
        return tree


class HTTPTranslationLoader(TranslationLoader):
    """Loader fetching strings.<locale>.json from a web server.

    A date-based "r" query parameter busts caches once per day.

    Attributes:
        base_url: URL of the directory holding the string files.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def url_for(self, locale: str) -> str:
        """Return the strings document URL for a locale."""
        return f"{self.base_url}/strings.{locale}.json"

    def load(self, locale: str) -> TranslationTree:
        """Fetch the strings document for a locale.

        Raises:
            FileNotFoundError: If the server does not return a successful response.
            ValueError: If the body is not a JSON object.
            requests.RequestException: On connection errors and timeouts.
        """
        url = self.url_for(locale)
        response = self._session.get(
            url,
            params={"r": date.today().strftime("%Y%m%d")},
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )

        if not response.ok:
            logger.warning(
                "translation_fetch_failed",
                url=url,
                status_code=response.status_code,
            )
            raise FileNotFoundError(
                f"Could not fetch {url}: HTTP {response.status_code}"
            )

        tree = _as_tree(response.json(), url)
        logger.info("fetched_translations", locale=locale, url=url)
        return tree


def load_locale_strings(
    registry: TranslationRegistry,
    loader: TranslationLoader,
    locale: Optional[str] = None,
) -> bool:
    """Load strings for a locale and register them.

    Failures are logged and leave the registry unchanged.

    Args:
        registry: Registry to register into.
        loader: Loader to fetch the strings with.
        locale: Locale to load. Defaults to the registry's current locale.

    Returns:
        True if strings were registered.
    """
    locale = locale or registry.get_locale()
    try:
        data = loader.load(locale)
    except (OSError, ValueError, requests.RequestException) as e:
        logger.error(
            "localized_strings_failed_to_load",
            locale=locale,
            loader=type(loader).__name__,
            error=str(e),
        )
        return False

    registry.register_translations(locale, data)
    return True
