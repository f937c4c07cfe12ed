"""Address value object.

The Address model is immutable: every ``with_*`` method returns a new
instance with exactly one field changed and leaves the original untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ryandata_addressing.models.enums import ADDRESS_FIELDS, AddressField
from ryandata_addressing.models.errors import PACKAGE_NAME, AddressingError


class Address(BaseModel):
    """A postal address.

    All fields default to an empty string. ``country_code`` is an ISO 3166-1
    alpha-2 code and is required for meaningful formatting; ``locale`` is a
    BCP-47 tag describing the language the address was entered in.

    Example:
        >>> address = (
        ...     Address()
        ...     .with_country_code("US")
        ...     .with_administrative_area("CA")
        ...     .with_postal_code("94043")
        ...     .with_address_line1("1098 Alta Ave")
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    country_code: str = Field(
        default="",
        description="ISO 3166-1 alpha-2 country code",
        validation_alias=AliasChoices("country_code", "countryCode"),
    )
    administrative_area: str = Field(
        default="",
        description="Top-level subdivision: state, province, prefecture, etc.",
        validation_alias=AliasChoices("administrative_area", "administrativeArea", "state"),
    )
    locality: str = Field(
        default="",
        description="City, town or post town",
        validation_alias=AliasChoices("locality", "city"),
    )
    dependent_locality: str = Field(
        default="",
        description="Neighborhood, suburb or district",
        validation_alias=AliasChoices("dependent_locality", "dependentLocality"),
    )
    postal_code: str = Field(
        default="",
        description="Postal code, ZIP code or PIN",
        validation_alias=AliasChoices("postal_code", "postalCode", "postcode"),
    )
    sorting_code: str = Field(
        default="",
        description="Sorting code (CEDEX in France)",
        validation_alias=AliasChoices("sorting_code", "sortingCode"),
    )
    address_line1: str = Field(
        default="",
        description="First street address line",
        validation_alias=AliasChoices("address_line1", "addressLine1"),
    )
    address_line2: str = Field(
        default="",
        description="Second street address line",
        validation_alias=AliasChoices("address_line2", "addressLine2"),
    )
    organization: str = Field(default="", description="Company or organization name")
    given_name: str = Field(
        default="",
        description="Recipient's given (first) name",
        validation_alias=AliasChoices("given_name", "givenName"),
    )
    additional_name: str = Field(
        default="",
        description="Recipient's additional (middle) name",
        validation_alias=AliasChoices("additional_name", "additionalName"),
    )
    family_name: str = Field(
        default="",
        description="Recipient's family (last) name",
        validation_alias=AliasChoices("family_name", "familyName"),
    )
    locale: str = Field(
        default="",
        description="BCP-47 locale of the address; empty means the formatter's locale",
    )

    def get(self, field: str | AddressField) -> str:
        """Get a field value by name or enum."""
        field_name = field.value if isinstance(field, AddressField) else field
        if field_name not in type(self).model_fields:
            raise AddressingError(
                "address_field",
                "Unknown address field: {field}",
                {"package": PACKAGE_NAME, "field": field_name},
            )
        return getattr(self, field_name)

    def with_field(self, field: str | AddressField, value: str | None) -> Address:
        """Return a copy of this address with a single field replaced.

        Args:
            field: Field name (or AddressField member); ``locale`` and
                ``country_code`` are accepted as well.
            value: New value. None is treated as an empty string.

        Returns:
            New Address instance.

        Raises:
            AddressingError: If the field name is unknown.
        """
        field_name = field.value if isinstance(field, AddressField) else field
        if field_name not in ADDRESS_FIELDS and field_name not in ("country_code", "locale"):
            raise AddressingError(
                "address_field",
                "Unknown address field: {field}",
                {"package": PACKAGE_NAME, "field": field_name},
            )
        data: dict[str, Any] = self.model_dump()
        data[field_name] = value or ""
        return type(self).model_validate(data)

    def with_country_code(self, country_code: str) -> Address:
        return self.with_field("country_code", country_code)

    def with_administrative_area(self, administrative_area: str) -> Address:
        return self.with_field(AddressField.ADMINISTRATIVE_AREA, administrative_area)

    def with_locality(self, locality: str) -> Address:
        return self.with_field(AddressField.LOCALITY, locality)

    def with_dependent_locality(self, dependent_locality: str) -> Address:
        return self.with_field(AddressField.DEPENDENT_LOCALITY, dependent_locality)

    def with_postal_code(self, postal_code: str) -> Address:
        return self.with_field(AddressField.POSTAL_CODE, postal_code)

    def with_sorting_code(self, sorting_code: str) -> Address:
        return self.with_field(AddressField.SORTING_CODE, sorting_code)

    def with_address_line1(self, address_line1: str) -> Address:
        return self.with_field(AddressField.ADDRESS_LINE1, address_line1)

    def with_address_line2(self, address_line2: str) -> Address:
        return self.with_field(AddressField.ADDRESS_LINE2, address_line2)

    def with_organization(self, organization: str) -> Address:
        return self.with_field(AddressField.ORGANIZATION, organization)

    def with_given_name(self, given_name: str) -> Address:
        return self.with_field(AddressField.GIVEN_NAME, given_name)

    def with_additional_name(self, additional_name: str) -> Address:
        return self.with_field(AddressField.ADDITIONAL_NAME, additional_name)

    def with_family_name(self, family_name: str) -> Address:
        return self.with_field(AddressField.FAMILY_NAME, family_name)

    def with_locale(self, locale: str) -> Address:
        return self.with_field("locale", locale)

    def to_dict(self) -> dict[str, str]:
        """Convert address to dictionary."""
        return self.model_dump()
