"""Address models package.

This package contains the Address value object, the reference data models
(countries, subdivisions, address formats), the builder and error classes.
"""

from __future__ import annotations

from ryandata_addressing.models.address import Address
from ryandata_addressing.models.address_format import AddressFormat
from ryandata_addressing.models.builder import AddressBuilder
from ryandata_addressing.models.country import Country, Subdivision
from ryandata_addressing.models.enums import (
    ADDRESS_FIELDS,
    SUBDIVISION_FIELDS,
    AddressField,
    AdministrativeAreaType,
    DependentLocalityType,
    LocalityType,
    PostalCodeType,
)
from ryandata_addressing.models.errors import (
    PACKAGE_NAME,
    AddressingError,
    AddressingValidationError,
    InvalidOptionError,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressingError",
    "AddressingValidationError",
    "InvalidOptionError",
    # Enums and constants
    "AddressField",
    "ADDRESS_FIELDS",
    "SUBDIVISION_FIELDS",
    "AdministrativeAreaType",
    "DependentLocalityType",
    "LocalityType",
    "PostalCodeType",
    # Models
    "Address",
    "AddressFormat",
    "Country",
    "Subdivision",
    # Builder
    "AddressBuilder",
]
