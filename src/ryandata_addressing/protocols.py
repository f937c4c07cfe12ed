from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_addressing.models import Address, AddressFormat, Country, Subdivision


@runtime_checkable
class CountryRepositoryProtocol(Protocol):
    """Protocol for country reference data.

    Implementations must never fail on an unknown country code.
    """

    def has(self, country_code: str) -> bool:
        """Check whether reference data exists for a country code."""
        ...

    def get(self, country_code: str, locale: str | None = None) -> Country:
        """Get a country by code.

        Args:
            country_code: Two-letter country code.
            locale: Locale for the country name.

        Returns:
            Country; unknown codes yield a Country named after the code.
        """
        ...

    def get_all(self, locale: str | None = None) -> dict[str, Country]:
        ...

    def get_list(self, locale: str | None = None) -> dict[str, str]:
        """Get a mapping of country code to localized name."""
        ...


@runtime_checkable
class SubdivisionRepositoryProtocol(Protocol):
    """Protocol for hierarchical subdivision reference data.

    ``parents`` is the country code followed by the codes of the ancestor
    subdivisions.
    """

    def get(self, code: str, parents: Sequence[str]) -> Subdivision | None:
        """Get a subdivision by code, or None if it does not exist."""
        ...

    def get_all(self, parents: Sequence[str]) -> list[Subdivision]:
        """Get the subdivisions at a position in the tree."""
        ...

    def get_list(self, parents: Sequence[str], locale: str | None = None) -> dict[str, str]:
        ...


@runtime_checkable
class AddressFormatRepositoryProtocol(Protocol):
    """Protocol for per-country address formats.

    Implementations return a generic format for unknown countries.
    """

    def get(self, country_code: str) -> AddressFormat:
        """Get the address format for a country."""
        ...

    def get_all(self) -> dict[str, AddressFormat]:
        ...


@runtime_checkable
class FormatterProtocol(Protocol):
    """Protocol for address formatters."""

    def get_locale(self) -> str:
        ...

    def set_locale(self, locale: str) -> None:
        ...

    def get_options(self) -> dict[str, Any]:
        ...

    def set_options(self, options: Mapping[str, Any]) -> None:
        ...

    def get_option(self, key: str) -> Any:
        ...

    def set_option(self, key: str, value: Any) -> None:
        ...

    def format(self, address: Address, **options: Any) -> str:
        """Format an address.

        Args:
            address: Address to format.
            **options: Per-call option overrides.

        Returns:
            Formatted address as markup or plain text.
        """
        ...
