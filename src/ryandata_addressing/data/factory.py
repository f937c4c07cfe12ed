from __future__ import annotations

from typing import ClassVar

from ryandata_addressing.core.factory import PluginFactory
from ryandata_addressing.protocols import (
    AddressFormatRepositoryProtocol,
    CountryRepositoryProtocol,
    SubdivisionRepositoryProtocol,
)


class CountryRepositoryFactory(PluginFactory[CountryRepositoryProtocol]):
    """Factory for creating country repository instances.

    Example:
        >>> repository = CountryRepositoryFactory.create("json", default_locale="fr")

        # Register custom repository
        >>> CountryRepositoryFactory.register("sqlite", SQLiteCountryRepository)
        >>> repository = CountryRepositoryFactory.create("sqlite", db_path="countries.db")
    """

    _registry: ClassVar[dict[str, type[CountryRepositoryProtocol]]] = {}
    _default_type: ClassVar[str] = "json"
    _entity_name: ClassVar[str] = "country repository"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "json" not in cls._registry:
            from ryandata_addressing.data.country_repository import JsonCountryRepository

            cls._registry["json"] = JsonCountryRepository


class SubdivisionRepositoryFactory(PluginFactory[SubdivisionRepositoryProtocol]):
    """Factory for creating subdivision repository instances."""

    _registry: ClassVar[dict[str, type[SubdivisionRepositoryProtocol]]] = {}
    _default_type: ClassVar[str] = "json"
    _entity_name: ClassVar[str] = "subdivision repository"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "json" not in cls._registry:
            from ryandata_addressing.data.subdivision_repository import (
                JsonSubdivisionRepository,
            )

            cls._registry["json"] = JsonSubdivisionRepository


class AddressFormatRepositoryFactory(PluginFactory[AddressFormatRepositoryProtocol]):
    """Factory for creating address format repository instances."""

    _registry: ClassVar[dict[str, type[AddressFormatRepositoryProtocol]]] = {}
    _default_type: ClassVar[str] = "json"
    _entity_name: ClassVar[str] = "address format repository"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "json" not in cls._registry:
            from ryandata_addressing.data.address_format_repository import (
                JsonAddressFormatRepository,
            )

            cls._registry["json"] = JsonAddressFormatRepository
