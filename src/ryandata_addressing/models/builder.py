"""Address builder for programmatic address construction.

The Address model is immutable; the builder collects values in a mutable
dict and creates the Address once, in ``build()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from ryandata_addressing.models.enums import ADDRESS_FIELDS, AddressField
from ryandata_addressing.models.errors import PACKAGE_NAME, AddressingError

if TYPE_CHECKING:
    from ryandata_addressing.models.address import Address


class AddressBuilder:
    """Builder for programmatic Address construction.

    Example:
        >>> address = (
        ...     AddressBuilder()
        ...     .with_country("AD")
        ...     .with_address_line1("C. Prat de la Creu, 62-64")
        ...     .with_postal_code("AD500")
        ...     .with_locality("Parròquia d'Andorra la Vella")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def with_country(self, country_code: str) -> Self:
        """Set the ISO 3166-1 alpha-2 country code."""
        self._data["country_code"] = country_code.upper()
        return self

    def with_administrative_area(self, administrative_area: str) -> Self:
        """Set the state, province or other top-level subdivision."""
        self._data["administrative_area"] = administrative_area
        return self

    def with_locality(self, locality: str) -> Self:
        """Set the city or post town."""
        self._data["locality"] = locality
        return self

    def with_dependent_locality(self, dependent_locality: str) -> Self:
        self._data["dependent_locality"] = dependent_locality
        return self

    def with_postal_code(self, postal_code: str) -> Self:
        self._data["postal_code"] = postal_code
        return self

    def with_sorting_code(self, sorting_code: str) -> Self:
        self._data["sorting_code"] = sorting_code
        return self

    def with_address_line1(self, line: str) -> Self:
        self._data["address_line1"] = line
        return self

    def with_address_line2(self, line: str) -> Self:
        self._data["address_line2"] = line
        return self

    def with_organization(self, organization: str) -> Self:
        self._data["organization"] = organization
        return self

    def with_recipient(
        self,
        given_name: str,
        family_name: str = "",
        additional_name: str = "",
    ) -> Self:
        """Set the recipient's name parts."""
        self._data["given_name"] = given_name
        self._data["family_name"] = family_name
        self._data["additional_name"] = additional_name
        return self

    def with_locale(self, locale: str) -> Self:
        """Set the locale the address is written in."""
        self._data["locale"] = locale
        return self

    def with_field(self, field: str | AddressField, value: str) -> Self:
        """Set an arbitrary field by name or enum."""
        field_name = field.value if isinstance(field, AddressField) else field
        if field_name not in ADDRESS_FIELDS:
            raise AddressingError(
                "address_builder",
                "Unknown address field: {field}",
                {"package": PACKAGE_NAME, "field": field_name},
            )
        self._data[field_name] = value
        return self

    def build(self) -> Address:
        """Build the Address object."""
        from ryandata_addressing.models.address import Address

        return Address.model_validate(self._data)

    def reset(self) -> Self:
        """Reset the builder to empty state."""
        self._data = {}
        return self
