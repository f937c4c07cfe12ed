"""Address format descriptor.

An AddressFormat describes how addresses of a single country are laid out:
which fields are used, in what order, which are required, and how postal
codes look.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ryandata_addressing.core.template import FormatLine, parse_format_string
from ryandata_addressing.core.template import used_fields as template_fields
from ryandata_addressing.models.enums import (
    ADDRESS_FIELDS,
    SUBDIVISION_FIELDS,
    AddressField,
    AdministrativeAreaType,
    DependentLocalityType,
    LocalityType,
    PostalCodeType,
)


class AddressFormat(BaseModel):
    """Per-country address format, loaded once from reference data."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    country_code: str = Field(description="ISO 3166-1 alpha-2 code, 'ZZ' for the generic format")
    locale: str | None = Field(
        default=None, description="Locale whose speakers write addresses in local_format"
    )
    format: str = Field(description="Minor-to-major template used by default")
    local_format: str | None = Field(
        default=None, description="Major-to-minor template in the local script, if any"
    )
    required_fields: list[AddressField] = Field(default_factory=list)
    uppercase_fields: list[AddressField] = Field(default_factory=list)
    uppercase_administrative_area: bool = Field(
        default=False,
        description="Display the administrative area in uppercase on every output",
    )
    administrative_area_type: AdministrativeAreaType | None = None
    locality_type: LocalityType | None = LocalityType.CITY
    dependent_locality_type: DependentLocalityType | None = None
    postal_code_type: PostalCodeType | None = PostalCodeType.POSTAL
    postal_code_pattern: str | None = Field(
        default=None, description="Regular expression a full postal code must match"
    )
    postal_code_prefix: str | None = Field(
        default=None, description="Prefix added to postal codes on international mail"
    )
    subdivision_depth: int = Field(
        default=0, ge=0, description="Number of predefined subdivision levels"
    )

    @field_validator("format", "local_format")
    @classmethod
    def check_template_fields(cls, value: str | None) -> str | None:
        """Reject templates that reference unknown fields."""
        if value is None:
            return value
        known = set(ADDRESS_FIELDS)
        unknown = [name for name in template_fields(value) if name not in known]
        if unknown:
            raise ValueError(f"Unknown fields in address format: {', '.join(unknown)}")
        return value

    @property
    def used_fields(self) -> list[AddressField]:
        """Fields that appear in the standard format, in template order."""
        return [AddressField(name) for name in template_fields(self.format)]

    @property
    def used_subdivision_fields(self) -> list[AddressField]:
        """Subdivision fields backed by predefined data, from the top down."""
        used = self.used_fields
        fields = [field for field in SUBDIVISION_FIELDS if field in used]
        return fields[: self.subdivision_depth]

    def lines(self, local: bool = False) -> tuple[FormatLine, ...]:
        """Get the parsed template lines.

        Args:
            local: If True and a local format exists, use it.

        Returns:
            Parsed lines, without the country line.
        """
        template = self.local_format if local and self.local_format else self.format
        return parse_format_string(template)

    def field_labels(self) -> dict[AddressField, str]:
        """Get the label type used for each subdivision and postal code field.

        Returns:
            Mapping of field to label type (e.g. ``state``, ``zip``) for the
            fields this format uses.
        """
        labels: dict[AddressField, str] = {}
        used = self.used_fields
        if self.administrative_area_type and AddressField.ADMINISTRATIVE_AREA in used:
            labels[AddressField.ADMINISTRATIVE_AREA] = self.administrative_area_type.value
        if self.locality_type and AddressField.LOCALITY in used:
            labels[AddressField.LOCALITY] = self.locality_type.value
        if self.dependent_locality_type and AddressField.DEPENDENT_LOCALITY in used:
            labels[AddressField.DEPENDENT_LOCALITY] = self.dependent_locality_type.value
        if self.postal_code_type and AddressField.POSTAL_CODE in used:
            labels[AddressField.POSTAL_CODE] = self.postal_code_type.value
        return labels
