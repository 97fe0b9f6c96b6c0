"""Catalog based translator.

Reads ``<locale>.json`` files shaped like ``{"translations": {source: target}}``
and substitutes ``%s`` (sequential) or ``%1$s`` (positional) placeholders.
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence

from ..domain.collaborators import Translator
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r'%(?:(\d+)\$)?s')


def substitute(template: str, args: Sequence[str]) -> str:
    """Replace placeholders in ``template`` with ``args`` in a single pass.

    Placeholders without a matching argument are left untouched, and
    substituted text is never scanned again.
    """
    values = [str(arg) for arg in args]
    sequential: Iterator[str] = iter(values)

    def replace(match: re.Match) -> str:
        position = match.group(1)
        if position is not None:
            index = int(position) - 1
            return values[index] if 0 <= index < len(values) else match.group(0)
        return next(sequential, match.group(0))

    return PLACEHOLDER.sub(replace, template)


class CatalogTranslator(Translator):
    """Translator backed by an in-memory catalog for one locale."""

    def __init__(self, locale: str = "en", translations: Optional[Dict[str, str]] = None):
        self.locale = locale
        self._translations = dict(translations or {})

    def t(self, text: str, args: Sequence[str] = ()) -> str:
        template = self._translations.get(text) or text
        return substitute(template, args)

    def add(self, source: str, target: str) -> None:
        self._translations[source] = target

    def __len__(self) -> int:
        return len(self._translations)

    @classmethod
    def from_file(cls, catalog_path: Path, locale: Optional[str] = None) -> "CatalogTranslator":
        """Load a catalog file.

        Raises:
            ConfigurationError: If the file is unreadable or malformed
        """
        catalog_path = Path(catalog_path)
        try:
            with open(catalog_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{catalog_path}: invalid JSON at line {e.lineno}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read translations {catalog_path}: {e}") from e

        translations = data.get("translations") if isinstance(data, dict) else None
        if not isinstance(translations, dict):
            raise ConfigurationError(f"{catalog_path}: missing 'translations' object")

        logger.info(f"Loaded {len(translations)} translations from {catalog_path}")
        return cls(locale or catalog_path.stem, {str(k): str(v) for k, v in translations.items()})

    @classmethod
    def for_locale(cls, l10n_dir: Optional[Path], locale: str) -> "CatalogTranslator":
        """Load the catalog for ``locale`` from ``l10n_dir``, falling back to source texts."""
        if l10n_dir is None:
            return cls(locale)

        catalog_path = Path(l10n_dir) / f"{locale}.json"
        if not catalog_path.exists():
            logger.info(f"No translations for {locale} in {l10n_dir}, using source texts")
            return cls(locale)
        return cls.from_file(catalog_path, locale)
