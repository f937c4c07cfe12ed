"""Reference data repositories for countries, subdivisions and address formats.

This module provides the JSON-backed repository implementations, their
factories, and shared default instances.
"""

from __future__ import annotations

from functools import lru_cache

from ryandata_addressing.data.address_format_repository import JsonAddressFormatRepository
from ryandata_addressing.data.base import BaseRepository
from ryandata_addressing.data.country_repository import JsonCountryRepository
from ryandata_addressing.data.factory import (
    AddressFormatRepositoryFactory,
    CountryRepositoryFactory,
    SubdivisionRepositoryFactory,
)
from ryandata_addressing.data.json_source import JsonDataSource
from ryandata_addressing.data.subdivision_repository import (
    JsonSubdivisionRepository,
    resolve_subdivisions,
)
from ryandata_addressing.models import AddressFormat, Country, Subdivision

__all__ = [
    "BaseRepository",
    "JsonDataSource",
    "JsonCountryRepository",
    "JsonSubdivisionRepository",
    "JsonAddressFormatRepository",
    "CountryRepositoryFactory",
    "SubdivisionRepositoryFactory",
    "AddressFormatRepositoryFactory",
    "get_default_country_repository",
    "get_default_subdivision_repository",
    "get_default_address_format_repository",
    # Convenience functions
    "get_country",
    "get_country_list",
    "get_address_format",
    "get_subdivisions",
    "resolve_subdivisions",
]


@lru_cache(maxsize=1)
def get_default_country_repository() -> JsonCountryRepository:
    """Get the shared country repository backed by the bundled data."""
    return JsonCountryRepository()


@lru_cache(maxsize=1)
def get_default_subdivision_repository() -> JsonSubdivisionRepository:
    """Get the shared subdivision repository backed by the bundled data."""
    return JsonSubdivisionRepository()


@lru_cache(maxsize=1)
def get_default_address_format_repository() -> JsonAddressFormatRepository:
    """Get the shared address format repository backed by the bundled data."""
    return JsonAddressFormatRepository()


def get_country(country_code: str, locale: str | None = None) -> Country:
    """Get a country by code.

    Args:
        country_code: Two-letter country code.
        locale: Locale for the country name.

    Returns:
        Country; unknown codes yield a Country named after the code.
    """
    return get_default_country_repository().get(country_code, locale)


def get_country_list(locale: str | None = None) -> dict[str, str]:
    """Get a mapping of country code to name, sorted by name."""
    return get_default_country_repository().get_list(locale)


def get_address_format(country_code: str) -> AddressFormat:
    """Get the address format for a country (generic format if unknown)."""
    return get_default_address_format_repository().get(country_code)


def get_subdivisions(*parents: str) -> list[Subdivision]:
    """Get subdivisions below a position in the tree.

    Example:
        >>> get_subdivisions("US")
        >>> get_subdivisions("TW", "Taipei City")
    """
    return get_default_subdivision_repository().get_all(list(parents))
