from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ryandata_addressing.data.base import BaseRepository
from ryandata_addressing.data.constants import ADDRESS_FORMATS_FILE, GENERIC_COUNTRY_CODE
from ryandata_addressing.data.json_source import JsonDataSource
from ryandata_addressing.models import AddressFormat

logger = logging.getLogger(__name__)

# Used when the data file has no generic entry
GENERIC_FORMAT = (
    "%given_name %family_name\n%organization\n%address_line1\n%address_line2\n"
    "%dependent_locality\n%locality %postal_code\n%administrative_area"
)


class JsonAddressFormatRepository(BaseRepository):
    """Address format repository backed by ``address_formats.json``.

    Unknown country codes get the generic format, so ``get`` never fails.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] | None = None,
        source: JsonDataSource | None = None,
    ) -> None:
        self._formats: dict[str, AddressFormat] = {}
        self._generic: AddressFormat | None = None
        super().__init__(data_dir=data_dir, source=source)

    def _load_data(self) -> None:
        document = self._source.read(ADDRESS_FORMATS_FILE) or {}
        for country_code, definition in document.items():
            code = country_code.upper()
            try:
                address_format = AddressFormat.model_validate({**definition, "country_code": code})
            except ValidationError as e:
                logger.warning("Skipping malformed address format %s: %s", code, e)
                continue
            if code == GENERIC_COUNTRY_CODE:
                self._generic = address_format
            else:
                self._formats[code] = address_format

        if self._generic is None:
            self._generic = AddressFormat(
                country_code=GENERIC_COUNTRY_CODE,
                format=GENERIC_FORMAT,
                required_fields=["address_line1", "locality"],
            )
        logger.debug("Loaded %d address formats", len(self._formats))

    @property
    def generic(self) -> AddressFormat:
        """The format used for countries without reference data."""
        self._ensure_loaded()
        assert self._generic is not None
        return self._generic

    def has(self, country_code: str) -> bool:
        """Check whether a country has its own address format."""
        self._ensure_loaded()
        return country_code.upper() in self._formats

    def get(self, country_code: str) -> AddressFormat:
        """Get the address format for a country.

        Args:
            country_code: Two-letter country code (case-insensitive).

        Returns:
            The country's AddressFormat, or the generic format (country
            code ``ZZ``) when the country is unknown.
        """
        self._ensure_loaded()
        address_format = self._formats.get(country_code.upper())
        if address_format is None:
            logger.debug("No address format for %r, using the generic format", country_code)
            return self.generic
        return address_format

    def get_all(self) -> dict[str, AddressFormat]:
        """Get every country-specific address format, keyed by country code."""
        self._ensure_loaded()
        return dict(sorted(self._formats.items()))
