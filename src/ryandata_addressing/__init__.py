"""ryandata-addressing: international postal address formatting and validation.

This package formats addresses following per-country reference data:
- Per-country address formats (field order, required fields, postal codes)
- Predefined subdivisions (states, prefectures, districts) with local names
- HTML or plain-text output, escaped and stripped as appropriate
- Composable validators
- Pandas, FastAPI and command-line integration

Quick Start:
    >>> from ryandata_addressing import Address, DefaultFormatter
    >>> address = (
    ...     Address()
    ...     .with_country_code("AD")
    ...     .with_locality("Parròquia d'Andorra la Vella")
    ...     .with_postal_code("AD500")
    ...     .with_address_line1("C. Prat de la Creu, 62-64")
    ... )
    >>> print(DefaultFormatter(options={"html": False}).format(address))
    C. Prat de la Creu, 62-64
    AD500 Parròquia d'Andorra la Vella
    Andorra

    # Validation
    >>> from ryandata_addressing import validate_address
    >>> result = validate_address({"country_code": "US", "postal_code": "1234"})
    >>> result.is_valid
    False

    # Build addresses programmatically
    >>> from ryandata_addressing import AddressBuilder
    >>> address = (
    ...     AddressBuilder()
    ...     .with_country("US")
    ...     .with_address_line1("1098 Alta Ave")
    ...     .with_locality("Mountain View")
    ...     .with_administrative_area("CA")
    ...     .with_postal_code("94043")
    ...     .build()
    ... )
"""

from __future__ import annotations

__version__ = "0.1.0"

from ryandata_addressing.data import (
    AddressFormatRepositoryFactory,
    CountryRepositoryFactory,
    JsonAddressFormatRepository,
    JsonCountryRepository,
    JsonSubdivisionRepository,
    SubdivisionRepositoryFactory,
)
from ryandata_addressing.formatter import (
    BaseFormatter,
    DefaultFormatter,
    FormatterFactory,
    FormatterOptions,
    PostalLabelFormatter,
    PostalLabelOptions,
)
from ryandata_addressing.models import (
    ADDRESS_FIELDS,
    PACKAGE_NAME,
    Address,
    AddressBuilder,
    AddressField,
    AddressFormat,
    AddressingError,
    AddressingValidationError,
    Country,
    InvalidOptionError,
    Subdivision,
)
from ryandata_addressing.pandas_ext import format_addresses, register_accessor
from ryandata_addressing.protocols import (
    AddressFormatRepositoryProtocol,
    CountryRepositoryProtocol,
    FormatterProtocol,
    SubdivisionRepositoryProtocol,
)
from ryandata_addressing.service import (
    AddressingService,
    format_address,
    get_default_service,
    validate_address,
)
from ryandata_addressing.validation import (
    CountryValidator,
    PostalCodeValidator,
    RequiredFieldsValidator,
    SubdivisionValidator,
    ValidationResult,
    create_default_validators,
)

__all__ = [
    "__version__",
    # Main service
    "AddressingService",
    "get_default_service",
    "format_address",
    "validate_address",
    # Pandas integration
    "format_addresses",
    "register_accessor",
    # Models
    "Address",
    "AddressBuilder",
    "AddressField",
    "AddressFormat",
    "Country",
    "Subdivision",
    "ADDRESS_FIELDS",
    # Errors
    "PACKAGE_NAME",
    "AddressingError",
    "AddressingValidationError",
    "InvalidOptionError",
    # Formatters
    "BaseFormatter",
    "DefaultFormatter",
    "PostalLabelFormatter",
    "FormatterFactory",
    "FormatterOptions",
    "PostalLabelOptions",
    # Repositories
    "JsonCountryRepository",
    "JsonSubdivisionRepository",
    "JsonAddressFormatRepository",
    "CountryRepositoryFactory",
    "SubdivisionRepositoryFactory",
    "AddressFormatRepositoryFactory",
    # Protocols
    "AddressFormatRepositoryProtocol",
    "CountryRepositoryProtocol",
    "FormatterProtocol",
    "SubdivisionRepositoryProtocol",
    # Validation
    "ValidationResult",
    "CountryValidator",
    "PostalCodeValidator",
    "RequiredFieldsValidator",
    "SubdivisionValidator",
    "create_default_validators",
]
