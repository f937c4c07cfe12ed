from __future__ import annotations

import re
from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_addressing.data.subdivision_repository import resolve_subdivisions
from ryandata_addressing.models import AddressField
from ryandata_addressing.protocols import (
    AddressFormatRepositoryProtocol,
    CountryRepositoryProtocol,
    SubdivisionRepositoryProtocol,
)

if TYPE_CHECKING:
    from ryandata_addressing.models import Address


class CountryValidator(BaseValidator["Address"]):
    """Validates that the address has a known country code."""

    def __init__(self, country_repository: CountryRepositoryProtocol) -> None:
        self._country_repository = country_repository

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "country"

    def validate(self, address: Address) -> ValidationResult:
        """Validate the country code.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with any country errors.
        """
        result = ValidationResult(is_valid=True)
        if not address.country_code:
            result.add_error(
                field="country_code",
                message="Country code is required",
                value=address.country_code,
            )
        elif not self._country_repository.has(address.country_code):
            result.add_error(
                field="country_code",
                message=f"Invalid country code: {address.country_code}",
                value=address.country_code,
            )
        return result


class RequiredFieldsValidator(BaseValidator["Address"]):
    """Validates that every field the country's format requires is filled in."""

    def __init__(self, address_format_repository: AddressFormatRepositoryProtocol) -> None:
        self._address_format_repository = address_format_repository

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "required_fields"

    def validate(self, address: Address) -> ValidationResult:
        """Validate required fields.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with one error per missing field.
        """
        result = ValidationResult(is_valid=True)
        if not address.country_code:
            return result

        address_format = self._address_format_repository.get(address.country_code)
        for field in address_format.required_fields:
            if not address.get(field):
                result.add_error(
                    field=field.value,
                    message=f"{field.value} is required for {address.country_code.upper()}",
                    value="",
                )
        return result


class SubdivisionValidator(BaseValidator["Address"]):
    """Validates subdivision fields against the predefined subdivisions.

    Levels without predefined subdivisions accept any value.
    """

    def __init__(
        self,
        address_format_repository: AddressFormatRepositoryProtocol,
        subdivision_repository: SubdivisionRepositoryProtocol,
    ) -> None:
        self._address_format_repository = address_format_repository
        self._subdivision_repository = subdivision_repository

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "subdivision"

    def validate(self, address: Address) -> ValidationResult:
        """Validate administrative area, locality and dependent locality.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with an error for the first unknown subdivision.
        """
        result = ValidationResult(is_valid=True)
        if not address.country_code:
            return result

        address_format = self._address_format_repository.get(address.country_code)
        fields = address_format.used_subdivision_fields
        values = [address.get(field) for field in fields]
        matched = resolve_subdivisions(self._subdivision_repository, address.country_code, values)

        level = len(matched)
        if level >= len(fields) or not values[level]:
            return result
        if matched and not matched[-1].has_children:
            return result

        parents = [address.country_code.upper(), *(s.code for s in matched)]
        if self._subdivision_repository.get_all(parents):
            field = fields[level]
            result.add_error(
                field=field.value,
                message=f"Invalid {field.value}: {values[level]}",
                value=values[level],
            )
        return result


class PostalCodeValidator(BaseValidator["Address"]):
    """Validates the postal code format.

    The full code must match the country pattern; when a predefined
    subdivision has its own pattern the code must also start with a match
    of it (e.g. California ZIP codes start with 90-96).
    """

    def __init__(
        self,
        address_format_repository: AddressFormatRepositoryProtocol,
        subdivision_repository: SubdivisionRepositoryProtocol,
    ) -> None:
        self._address_format_repository = address_format_repository
        self._subdivision_repository = subdivision_repository

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "postal_code"

    def validate(self, address: Address) -> ValidationResult:
        """Validate the postal code.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with any postal code errors.
        """
        result = ValidationResult(is_valid=True)
        postal_code = address.postal_code
        if not postal_code or not address.country_code:
            return result

        address_format = self._address_format_repository.get(address.country_code)
        if AddressField.POSTAL_CODE not in address_format.used_fields:
            return result

        pattern = address_format.postal_code_pattern
        if pattern and not re.fullmatch(pattern, postal_code, re.IGNORECASE):
            result.add_error(
                field=AddressField.POSTAL_CODE.value,
                message=f"Invalid postal code format: {postal_code}",
                value=postal_code,
            )
            return result

        fields = address_format.used_subdivision_fields
        subdivisions = resolve_subdivisions(
            self._subdivision_repository,
            address.country_code,
            [address.get(field) for field in fields],
        )
        # The deepest subdivision with a pattern is the most specific
        for subdivision in reversed(subdivisions):
            if subdivision.postal_code_pattern:
                if not re.match(subdivision.postal_code_pattern, postal_code, re.IGNORECASE):
                    result.add_error(
                        field=AddressField.POSTAL_CODE.value,
                        message=f"Postal code {postal_code} is not valid for {subdivision.name}",
                        value=postal_code,
                    )
                break
        return result


def create_default_validators(
    country_repository: CountryRepositoryProtocol,
    address_format_repository: AddressFormatRepositoryProtocol,
    subdivision_repository: SubdivisionRepositoryProtocol,
    include_subdivision_validators: bool = True,
) -> CompositeValidator[Address]:
    """Create the default address validation pipeline.

    Args:
        country_repository: Country reference data.
        address_format_repository: Address format reference data.
        subdivision_repository: Subdivision reference data.
        include_subdivision_validators: If False, skip the subdivision check.

    Returns:
        CompositeValidator with default validators configured.
    """
    builder: ValidatorPipelineBuilder[Address] = ValidatorPipelineBuilder("address_validation")

    builder.add(CountryValidator(country_repository))
    builder.add(RequiredFieldsValidator(address_format_repository))
    builder.add(PostalCodeValidator(address_format_repository, subdivision_repository))
    if include_subdivision_validators:
        builder.add(SubdivisionValidator(address_format_repository, subdivision_repository))

    return builder.build()
