"""Address field enumerations and label types."""

from __future__ import annotations

from enum import Enum


class AddressField(str, Enum):
    """Enumeration of all formattable address fields.

    Values match the attribute names on :class:`Address`.
    """

    ADMINISTRATIVE_AREA = "administrative_area"
    LOCALITY = "locality"
    DEPENDENT_LOCALITY = "dependent_locality"
    POSTAL_CODE = "postal_code"
    SORTING_CODE = "sorting_code"
    ADDRESS_LINE1 = "address_line1"
    ADDRESS_LINE2 = "address_line2"
    ORGANIZATION = "organization"
    GIVEN_NAME = "given_name"
    ADDITIONAL_NAME = "additional_name"
    FAMILY_NAME = "family_name"

    @property
    def token(self) -> str:
        """Placeholder used for this field in address format templates."""
        return f"%{self.value}"

    @property
    def css_class(self) -> str:
        """Class attribute used when the field is rendered as markup."""
        return self.value.replace("_", "-")


# Subdivision levels, from the top down
SUBDIVISION_FIELDS: tuple[AddressField, ...] = (
    AddressField.ADMINISTRATIVE_AREA,
    AddressField.LOCALITY,
    AddressField.DEPENDENT_LOCALITY,
)

ADDRESS_FIELDS: list[str] = [f.value for f in AddressField]


class AdministrativeAreaType(str, Enum):
    AREA = "area"
    COUNTY = "county"
    DEPARTMENT = "department"
    DISTRICT = "district"
    DO_SI = "do_si"
    EMIRATE = "emirate"
    ISLAND = "island"
    OBLAST = "oblast"
    PARISH = "parish"
    PREFECTURE = "prefecture"
    PROVINCE = "province"
    STATE = "state"


class LocalityType(str, Enum):
    CITY = "city"
    DISTRICT = "district"
    POST_TOWN = "post_town"
    SUBURB = "suburb"


class DependentLocalityType(str, Enum):
    DISTRICT = "district"
    NEIGHBORHOOD = "neighborhood"
    VILLAGE_TOWNSHIP = "village_township"
    SUBURB = "suburb"
    TOWNLAND = "townland"


class PostalCodeType(str, Enum):
    EIRCODE = "eircode"
    PIN = "pin"
    POSTAL = "postal"
    ZIP = "zip"
