from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

from ryandata_addressing import locales
from ryandata_addressing.data.base import BaseRepository
from ryandata_addressing.data.constants import SUBDIVISIONS_DIR
from ryandata_addressing.data.json_source import JsonDataSource
from ryandata_addressing.models import Subdivision
from ryandata_addressing.protocols import SubdivisionRepositoryProtocol

logger = logging.getLogger(__name__)


class JsonSubdivisionRepository(BaseRepository):
    """Subdivision repository backed by ``subdivisions/<CC>.json`` files.

    Subdivisions form a tree per country: administrative areas contain
    localities, which contain dependent localities. A position in the tree
    is addressed by ``parents``: the country code followed by the codes of
    the ancestor subdivisions, e.g. ``["TW", "Taipei City"]``.

    Lookups never fail; unknown countries or codes yield empty results.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] | None = None,
        source: JsonDataSource | None = None,
        cache_size: int = 256,
    ) -> None:
        """Initialize the subdivision repository.

        Args:
            data_dir: Directory with reference data (see BaseRepository).
            source: Pre-built data source.
            cache_size: Maximum number of countries kept in memory.
        """
        super().__init__(data_dir=data_dir, source=source)
        self._cached_load_country = lru_cache(maxsize=cache_size)(self._load_country)

    def _load_data(self) -> None:
        # Countries are loaded one at a time, on first access
        return None

    def _load_country(self, country_code: str) -> tuple[Subdivision, ...]:
        document = self._source.read(SUBDIVISIONS_DIR, f"{country_code}.json")
        if not document:
            return ()

        group_locale = document.get("locale")
        subdivisions = tuple(
            self._build(definition, (country_code,), group_locale, country_code)
            for definition in document.get("subdivisions", [])
            if self._is_valid(definition, country_code)
        )
        logger.debug("Loaded %d top-level subdivisions for %s", len(subdivisions), country_code)
        return subdivisions

    def _is_valid(self, definition: Any, country_code: str) -> bool:
        if isinstance(definition, dict) and definition.get("code"):
            return True
        logger.warning("Skipping malformed subdivision definition for %s: %r", country_code, definition)
        return False

    def _build(
        self,
        definition: dict[str, Any],
        parents: tuple[str, ...],
        group_locale: str | None,
        country_code: str,
    ) -> Subdivision:
        code = definition["code"]
        local_code = definition.get("local_code")
        locale = definition.get("locale", group_locale)
        children = tuple(
            self._build(child, (*parents, code), locale, country_code)
            for child in definition.get("children", [])
            if self._is_valid(child, country_code)
        )
        return Subdivision(
            country_code=country_code,
            code=code,
            name=definition.get("name") or code,
            local_code=local_code,
            local_name=definition.get("local_name") or local_code,
            iso_code=definition.get("iso_code"),
            postal_code_pattern=definition.get("postal_code_pattern"),
            locale=locale,
            parents=parents,
            children=children,
        )

    def get_all(self, parents: Sequence[str]) -> list[Subdivision]:
        """Get the subdivisions at the given position in the tree.

        Args:
            parents: Country code followed by ancestor subdivision codes.

        Returns:
            List of subdivisions, empty if the country or a parent is unknown.
        """
        if not parents:
            return []
        self._ensure_loaded()
        level = self._cached_load_country(parents[0].upper())
        for code in parents[1:]:
            parent = self._find(level, code)
            if parent is None:
                return []
            level = parent.children
        return list(level)

    def get(self, code: str, parents: Sequence[str]) -> Subdivision | None:
        """Get a single subdivision.

        Matches ``code`` exactly first, then case-insensitively against the
        code, local code and name.

        Args:
            code: Subdivision code (or name) to look up.
            parents: Country code followed by ancestor subdivision codes.

        Returns:
            Matching Subdivision, or None.
        """
        return self._find(self.get_all(parents), code)

    def get_list(self, parents: Sequence[str], locale: str | None = None) -> dict[str, str]:
        """Get a mapping of subdivision code to display name.

        Local names are used when ``locale`` matches the subdivision locale.

        Args:
            parents: Country code followed by ancestor subdivision codes.
            locale: Locale for the names.

        Returns:
            Dict of code -> name, in reference data order.
        """
        return {
            subdivision.code: subdivision.display_name(
                locales.match_candidates(locale, subdivision.locale)
            )
            for subdivision in self.get_all(parents)
        }

    @staticmethod
    def _find(subdivisions: Sequence[Subdivision], value: str) -> Subdivision | None:
        if not value:
            return None
        for subdivision in subdivisions:
            if subdivision.code == value:
                return subdivision

        folded = value.casefold()
        for subdivision in subdivisions:
            candidates = (subdivision.code, subdivision.local_code, subdivision.name)
            if any(candidate and candidate.casefold() == folded for candidate in candidates):
                return subdivision
        return None

    def clear_cache(self) -> None:
        """Clear the per-country cache."""
        self._cached_load_country.cache_clear()


def resolve_subdivisions(
    repository: SubdivisionRepositoryProtocol,
    country_code: str,
    values: Sequence[str],
) -> list[Subdivision]:
    """Match a sequence of subdivision values against the predefined tree.

    Walks from the top level down, one value per level, and stops at the
    first empty value, the first value without a match, or the first
    matched subdivision without children.

    Args:
        repository: Subdivision repository to search.
        country_code: Two-letter country code.
        values: Field values from the top level down, e.g.
            ``[administrative_area, locality, dependent_locality]``.

    Returns:
        The matched subdivisions, one per matched level.
    """
    matched: list[Subdivision] = []
    parents = [country_code.upper()]
    for value in values:
        if not value:
            break
        subdivision = repository.get(value, parents)
        if subdivision is None:
            logger.debug("No predefined subdivision matches %r under %s", value, parents)
            break
        matched.append(subdivision)
        if not subdivision.has_children:
            break
        parents.append(subdivision.code)
    return matched
