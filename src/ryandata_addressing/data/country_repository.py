from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

from ryandata_addressing import locales
from ryandata_addressing.data.base import BaseRepository
from ryandata_addressing.data.constants import COUNTRIES_FILE
from ryandata_addressing.data.json_source import JsonDataSource
from ryandata_addressing.models import Country

logger = logging.getLogger(__name__)


class JsonCountryRepository(BaseRepository):
    """Country repository backed by ``countries.json``.

    Country names are stored per locale. A lookup never fails: an unknown
    country code yields a Country whose name is the code itself.
    """

    def __init__(
        self,
        default_locale: str = locales.DEFAULT_LOCALE,
        fallback_locale: str = locales.DEFAULT_LOCALE,
        data_dir: Union[str, Path] | None = None,
        source: JsonDataSource | None = None,
    ) -> None:
        """Initialize the country repository.

        Args:
            default_locale: Locale used when a call does not pass one.
            fallback_locale: Locale tried when the requested one has no names.
            data_dir: Directory with reference data (see BaseRepository).
            source: Pre-built data source.
        """
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self._definitions: dict[str, dict[str, Any]] = {}
        super().__init__(data_dir=data_dir, source=source)

    def _load_data(self) -> None:
        document = self._source.read(COUNTRIES_FILE) or {}
        for country_code, definition in document.items():
            if not isinstance(definition, dict) or not definition.get("names"):
                logger.warning("Skipping malformed country definition: %s", country_code)
                continue
            self._definitions[country_code.upper()] = definition
        logger.debug("Loaded %d country definitions", len(self._definitions))

    def _resolve_name(self, definition: dict[str, Any], locale: str | None) -> tuple[str, str]:
        names: dict[str, str] = definition["names"]
        resolved = locales.resolve(names.keys(), locale or self.default_locale, self.fallback_locale)
        if resolved is None:
            # First listed name is the last resort
            resolved = next(iter(names))
        return names[resolved], resolved

    def has(self, country_code: str) -> bool:
        """Check whether reference data exists for a country code."""
        self._ensure_loaded()
        return country_code.upper() in self._definitions

    def get(self, country_code: str, locale: str | None = None) -> Country:
        """Get a country by its ISO 3166-1 alpha-2 code.

        Args:
            country_code: Two-letter country code (case-insensitive).
            locale: Locale for the country name. Defaults to default_locale.

        Returns:
            Country with its name in the best matching locale. For an
            unknown code, a Country whose name is the code.
        """
        self._ensure_loaded()
        code = country_code.upper()
        definition = self._definitions.get(code)
        if definition is None:
            logger.debug("Unknown country code %r, using the code as its name", country_code)
            return Country(country_code=code, name=code, locale=locale or self.default_locale)

        name, name_locale = self._resolve_name(definition, locale)
        return Country(
            country_code=code,
            name=name,
            three_letter_code=definition.get("three_letter_code"),
            numeric_code=definition.get("numeric_code"),
            currency_code=definition.get("currency_code"),
            locale=name_locale,
            default_locale=definition.get("locale"),
        )

    def get_all(self, locale: str | None = None) -> dict[str, Country]:
        """Get every known country, keyed by country code."""
        self._ensure_loaded()
        return {code: self.get(code, locale) for code in sorted(self._definitions)}

    def get_list(self, locale: str | None = None) -> dict[str, str]:
        """Get a mapping of country code to name, sorted by name.

        Args:
            locale: Locale for the names.

        Returns:
            Dict of country code -> localized name for known countries.
        """
        self._ensure_loaded()
        names = {
            code: self._resolve_name(definition, locale)[0]
            for code, definition in self._definitions.items()
        }
        return dict(sorted(names.items(), key=lambda item: item[1].casefold()))
