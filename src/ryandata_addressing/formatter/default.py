"""Default address formatter.

Renders an address following its country's address format: fields in
template order, empty fields and their orphaned separators omitted,
predefined subdivisions shown by code (or local code), and the country name
on its own line. Output is HTML markup or plain text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ryandata_addressing import locales
from ryandata_addressing.core.markup import escape, strip_tags, wrap
from ryandata_addressing.core.template import FormatLine, render_line
from ryandata_addressing.data import (
    get_default_address_format_repository,
    get_default_country_repository,
    get_default_subdivision_repository,
    resolve_subdivisions,
)
from ryandata_addressing.formatter.base import BaseFormatter
from ryandata_addressing.formatter.options import FormatterOptions
from ryandata_addressing.models import ADDRESS_FIELDS, Address, AddressField, AddressFormat
from ryandata_addressing.protocols import (
    AddressFormatRepositoryProtocol,
    CountryRepositoryProtocol,
    SubdivisionRepositoryProtocol,
)

COUNTRY_CSS_CLASS = "country"


class DefaultFormatter(BaseFormatter):
    """Formats addresses for display.

    Example:
        >>> formatter = DefaultFormatter(options={"html": False})
        >>> address = (
        ...     Address()
        ...     .with_country_code("US")
        ...     .with_administrative_area("CA")
        ...     .with_postal_code("94043")
        ...     .with_address_line1("1098 Alta Ave")
        ... )
        >>> formatter.format(address)
        '1098 Alta Ave\\nCA 94043\\nUnited States'
    """

    def __init__(
        self,
        address_format_repository: AddressFormatRepositoryProtocol | None = None,
        country_repository: CountryRepositoryProtocol | None = None,
        subdivision_repository: SubdivisionRepositoryProtocol | None = None,
        locale: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            address_format_repository: Source of address formats. Defaults
                to the shared bundled repository.
            country_repository: Source of country names.
            subdivision_repository: Source of predefined subdivisions.
            locale: Locale used when an address has none.
            options: Initial option values.
        """
        self.address_format_repository = (
            address_format_repository or get_default_address_format_repository()
        )
        self.country_repository = country_repository or get_default_country_repository()
        self.subdivision_repository = (
            subdivision_repository or get_default_subdivision_repository()
        )
        super().__init__(locale=locale, options=options)

    def format(self, address: Address, **options: Any) -> str:
        opts = self._merge_options(self._options, options)
        country_code = address.country_code.upper()
        address_format = self.address_format_repository.get(country_code)
        locale = self.resolve_locale(address)

        # Major-to-minor layout for addresses written in the local script
        use_local = bool(address_format.local_format) and locales.match_candidates(
            locale, address_format.locale
        )
        values = self._get_values(address, address_format, locale)
        values = self._adjust_values(values, address, address_format, opts)
        country = self._get_country_line(address, address_format, locale, opts)

        lines = self._render_lines(address_format.lines(local=use_local), values, opts)
        if country:
            country_line = self._render_value(COUNTRY_CSS_CLASS, country, opts)
            if use_local:
                lines.insert(0, country_line)
            else:
                lines.append(country_line)

        if not lines:
            return ""
        if not opts.html:
            return "\n".join(lines)
        return wrap("\n" + "<br>\n".join(lines) + "\n", opts.html_tag, opts.html_attributes)

    def resolve_locale(self, address: Address) -> str:
        """Get the locale an address is displayed in.

        The address locale wins, then the formatter locale, then the
        country's default locale, then "en".
        """
        if address.locale:
            return address.locale
        if self._locale:
            return self._locale
        if address.country_code:
            country = self.country_repository.get(address.country_code)
            if country.default_locale:
                return country.default_locale
        return locales.DEFAULT_LOCALE

    def _get_values(
        self, address: Address, address_format: AddressFormat, locale: str
    ) -> dict[str, str]:
        """Collect field values, replacing predefined subdivisions by their codes."""
        values = {field: address.get(field) for field in ADDRESS_FIELDS}

        fields = address_format.used_subdivision_fields
        subdivisions = resolve_subdivisions(
            self.subdivision_repository,
            address.country_code,
            [values[field.value] for field in fields],
        )
        for field, subdivision in zip(fields, subdivisions):
            use_local = locales.match_candidates(locale, subdivision.locale)
            values[field.value] = subdivision.display_code(use_local)
        return values

    def _adjust_values(
        self,
        values: dict[str, str],
        address: Address,
        address_format: AddressFormat,
        options: FormatterOptions,
    ) -> dict[str, str]:
        """Apply per-country display rules to the collected values."""
        if address_format.uppercase_administrative_area:
            field = AddressField.ADMINISTRATIVE_AREA.value
            values[field] = values[field].upper()
        return values

    def _get_country_line(
        self,
        address: Address,
        address_format: AddressFormat,
        locale: str,
        options: FormatterOptions,
    ) -> str:
        """Get the country name, or an empty string for unknown countries."""
        if not address.country_code or not self.country_repository.has(address.country_code):
            return ""
        return self.country_repository.get(address.country_code, locale).name

    def _render_value(self, css_class: str, value: str, options: FormatterOptions) -> str:
        if options.html:
            return f'<span class="{css_class}">{escape(value)}</span>'
        return strip_tags(value)

    def _render_lines(
        self,
        format_lines: tuple[FormatLine, ...],
        values: dict[str, str],
        options: FormatterOptions,
    ) -> list[str]:
        rendered: dict[str, str] = {}
        for field in AddressField:
            value = values.get(field.value, "")
            if not options.html:
                value = strip_tags(value)
            if value.strip():
                rendered[field.value] = self._render_value(field.css_class, value, options)

        render_literal = escape if options.html else strip_tags
        lines = [render_line(line, rendered, render_literal) for line in format_lines]
        return [line for line in lines if line]
