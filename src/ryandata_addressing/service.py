from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from pydantic import ValidationError

from ryandata_addressing.data import (
    AddressFormatRepositoryFactory,
    CountryRepositoryFactory,
    SubdivisionRepositoryFactory,
)
from ryandata_addressing.formatter import FormatterFactory
from ryandata_addressing.models import (
    ADDRESS_FIELDS,
    PACKAGE_NAME,
    Address,
    AddressFormat,
    AddressingError,
    AddressingValidationError,
    Country,
    Subdivision,
)
from ryandata_addressing.validation import ValidationResult, create_default_validators

if TYPE_CHECKING:
    import pandas as pd
    from abstract_validation_base import ValidatorProtocol

    from ryandata_addressing.protocols import (
        AddressFormatRepositoryProtocol,
        CountryRepositoryProtocol,
        FormatterProtocol,
        SubdivisionRepositoryProtocol,
    )

logger = logging.getLogger(__name__)

AddressInput = Union[Address, Mapping[str, Any]]


def to_address(data: AddressInput) -> Address:
    """Coerce a mapping (or an Address) into an Address.

    Args:
        data: Address instance or mapping of field names (snake_case or
            camelCase) to values.

    Returns:
        Address instance.

    Raises:
        AddressingValidationError: If the mapping holds invalid values.
    """
    if isinstance(data, Address):
        return data
    try:
        return Address.model_validate(dict(data))
    except ValidationError as e:
        raise AddressingValidationError(e, {"input": "address"}) from e


class AddressingService:
    """Main service for address formatting and validation.

    Wires the reference data repositories, a formatter and the validation
    pipeline together behind a small API.

    Example:
        >>> service = AddressingService()
        >>> service.format({"country_code": "AD", "postal_code": "AD500"}, html=False)

        # Validation
        >>> result = service.validate({"country_code": "US", "postal_code": "1234"})
        >>> result.is_valid
        False

        # Custom components
        >>> from ryandata_addressing.data import JsonCountryRepository
        >>> service = AddressingService(country_repository=JsonCountryRepository(data_dir="/data"))
    """

    def __init__(
        self,
        country_repository: CountryRepositoryProtocol | None = None,
        subdivision_repository: SubdivisionRepositoryProtocol | None = None,
        address_format_repository: AddressFormatRepositoryProtocol | None = None,
        formatter: FormatterProtocol | None = None,
        validator: ValidatorProtocol | None = None,
        locale: str | None = None,
    ) -> None:
        """Initialize the addressing service.

        Args:
            country_repository: Country data. Defaults to the JSON repository.
            subdivision_repository: Subdivision data. Defaults to the JSON repository.
            address_format_repository: Address formats. Defaults to the JSON repository.
            formatter: Formatter implementation. Defaults to DefaultFormatter
                wired to the repositories above.
            validator: Validator implementation. Defaults to the composite
                validator from create_default_validators().
            locale: Locale for the default formatter and for name lookups.
        """
        self._locale = locale
        self._country_repository = country_repository or CountryRepositoryFactory.create()
        self._subdivision_repository = (
            subdivision_repository or SubdivisionRepositoryFactory.create()
        )
        self._address_format_repository = (
            address_format_repository or AddressFormatRepositoryFactory.create()
        )
        self._formatter = formatter or self.create_formatter("default")

        if validator is not None:
            self._validator = validator
        else:
            self._validator = create_default_validators(
                self._country_repository,
                self._address_format_repository,
                self._subdivision_repository,
            )

    @property
    def country_repository(self) -> CountryRepositoryProtocol:
        return self._country_repository

    @property
    def subdivision_repository(self) -> SubdivisionRepositoryProtocol:
        return self._subdivision_repository

    @property
    def address_format_repository(self) -> AddressFormatRepositoryProtocol:
        return self._address_format_repository

    @property
    def formatter(self) -> FormatterProtocol:
        """Get the formatter instance."""
        return self._formatter

    @property
    def validator(self) -> ValidatorProtocol:
        """Get the validator instance."""
        return self._validator

    def create_formatter(self, formatter_type: str = "default", **options: Any) -> FormatterProtocol:
        """Create a formatter sharing this service's repositories.

        Args:
            formatter_type: Registered formatter identifier ("default",
                "postal_label", or a custom registration).
            **options: Initial formatter options.

        Returns:
            Formatter instance.
        """
        return FormatterFactory.create(
            formatter_type,
            address_format_repository=self._address_format_repository,
            country_repository=self._country_repository,
            subdivision_repository=self._subdivision_repository,
            locale=self._locale,
            options=options,
        )

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, address: AddressInput, **options: Any) -> str:
        """Format an address with the service formatter.

        Args:
            address: Address or mapping of address fields.
            **options: Per-call formatter options (html, html_tag, ...).

        Returns:
            Formatted address.
        """
        return self._formatter.format(to_address(address), **options)

    def format_label(self, address: AddressInput, origin_country: str, **options: Any) -> str:
        """Format an address as a postal label.

        Args:
            address: Address or mapping of address fields.
            origin_country: Country the mail is sent from.
            **options: Per-call formatter options.

        Returns:
            Formatted postal label (plain text unless html=True).
        """
        label_formatter = self.create_formatter("postal_label", origin_country=origin_country)
        return label_formatter.format(to_address(address), **options)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, address: AddressInput, *, raise_on_error: bool = False) -> ValidationResult:
        """Validate an address against its country's reference data.

        Args:
            address: Address or mapping of address fields.
            raise_on_error: If True, raise instead of returning an invalid result.

        Returns:
            ValidationResult with one error per problem found.

        Raises:
            AddressingError: If raise_on_error is True and validation fails.
        """
        result = self._validator.validate(to_address(address))
        if not result.is_valid:
            logger.debug("Address failed validation with %d errors", len(result.errors))
            if raise_on_error:
                messages = "; ".join(f"{err.field}: {err.message}" for err in result.errors)
                raise AddressingError(
                    "address_validation",
                    "Address validation failed: {errors}",
                    {"package": PACKAGE_NAME, "errors": messages},
                )
        return result

    # -------------------------------------------------------------------------
    # Reference data lookups
    # -------------------------------------------------------------------------

    def get_country(self, country_code: str, locale: str | None = None) -> Country:
        return self._country_repository.get(country_code, locale or self._locale)

    def get_country_list(self, locale: str | None = None) -> dict[str, str]:
        """Get a mapping of country code to name, sorted by name."""
        return self._country_repository.get_list(locale or self._locale)

    def get_address_format(self, country_code: str) -> AddressFormat:
        """Get the address format for a country (generic format if unknown)."""
        return self._address_format_repository.get(country_code)

    def get_subdivisions(self, *parents: str) -> list[Subdivision]:
        """Get subdivisions below a position in the tree.

        Args:
            *parents: Country code followed by ancestor subdivision codes.

        Returns:
            List of subdivisions; empty when none are predefined.
        """
        return self._subdivision_repository.get_all(list(parents))

    # -------------------------------------------------------------------------
    # Pandas integration methods
    # -------------------------------------------------------------------------

    def format_dataframe(
        self,
        df: pd.DataFrame,
        *,
        column_map: Mapping[str, str] | None = None,
        output_column: str = "formatted_address",
        errors: str = "coerce",
        inplace: bool = False,
        **options: Any,
    ) -> pd.DataFrame:
        """Format one address per DataFrame row.

        Columns named after address fields (``country_code``, ``locality``,
        ...) are used directly; ``column_map`` maps other column names to
        field names.

        Args:
            df: Input DataFrame.
            column_map: Mapping of DataFrame column -> address field.
            output_column: Name of the column receiving the formatted text.
            errors: "coerce" (None for failures) or "raise".
            inplace: If True, modify df in place.
            **options: Formatter options; html defaults to False here.

        Returns:
            DataFrame with the output column added.
        """
        import pandas as pd

        if not inplace:
            df = df.copy()

        options.setdefault("html", False)
        mapping = dict(column_map or {})
        known = set(ADDRESS_FIELDS) | {"country_code", "locale"}

        def format_row(row: pd.Series) -> str | None:
            data: dict[str, str] = {}
            for column, value in row.items():
                field = mapping.get(str(column), str(column))
                if field in known and pd.notna(value):
                    data[field] = str(value)
            try:
                return self.format(data, **options)
            except (AddressingError, AddressingValidationError):
                if errors == "raise":
                    raise
                return None

        df[output_column] = df.apply(format_row, axis=1) if len(df) else pd.Series(dtype=object)
        return df


# Module-level convenience function
_default_service: AddressingService | None = None


def get_default_service() -> AddressingService:
    """Get the default AddressingService singleton.

    Returns:
        Shared AddressingService instance with default configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = AddressingService()
    return _default_service


def format_address(address: AddressInput, **options: Any) -> str:
    """Format an address using the default service.

    Args:
        address: Address or mapping of address fields.
        **options: Per-call formatter options.

    Returns:
        Formatted address.
    """
    return get_default_service().format(address, **options)


def validate_address(address: AddressInput, *, raise_on_error: bool = False) -> ValidationResult:
    """Validate an address using the default service."""
    return get_default_service().validate(address, raise_on_error=raise_on_error)
