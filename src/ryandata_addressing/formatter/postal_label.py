"""Postal label formatter.

Formats addresses for envelopes and shipping labels, following the
conventions postal services expect:

- fields listed in the format's ``uppercase_fields`` are uppercased;
- for international mail the postal code gets the country's prefix
  (``CH-``, ``DK-``, ...) and the destination country is written in the
  origin country's language;
- for domestic mail the country line is omitted.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ryandata_addressing import locales
from ryandata_addressing.formatter.default import DefaultFormatter
from ryandata_addressing.formatter.options import FormatterOptions, PostalLabelOptions
from ryandata_addressing.models import (
    PACKAGE_NAME,
    Address,
    AddressField,
    AddressFormat,
    AddressingError,
)


class PostalLabelFormatter(DefaultFormatter):
    """Formats addresses for postal labels.

    Requires the ``origin_country`` option.

    Example:
        >>> formatter = PostalLabelFormatter(options={"origin_country": "FR"})
        >>> formatter.format(address)
    """

    options_class: ClassVar[type[FormatterOptions]] = PostalLabelOptions

    def format(self, address: Address, **options: Any) -> str:
        opts = self._merge_options(self._options, options)
        if not getattr(opts, "origin_country", ""):
            raise AddressingError(
                "missing_origin_country",
                "The origin_country option is required for postal labels",
                {"package": PACKAGE_NAME},
            )
        return super().format(address, **options)

    def _is_domestic(self, address: Address, options: FormatterOptions) -> bool:
        origin = getattr(options, "origin_country", "")
        return origin.upper() == address.country_code.upper()

    def _adjust_values(
        self,
        values: dict[str, str],
        address: Address,
        address_format: AddressFormat,
        options: FormatterOptions,
    ) -> dict[str, str]:
        values = super()._adjust_values(values, address, address_format, options)
        for field in address_format.uppercase_fields:
            values[field.value] = values[field.value].upper()

        postal_code = values[AddressField.POSTAL_CODE.value]
        prefix = address_format.postal_code_prefix
        if postal_code and prefix and not self._is_domestic(address, options):
            if not postal_code.startswith(prefix):
                values[AddressField.POSTAL_CODE.value] = prefix + postal_code
        return values

    def _get_country_line(
        self,
        address: Address,
        address_format: AddressFormat,
        locale: str,
        options: FormatterOptions,
    ) -> str:
        if self._is_domestic(address, options):
            return ""
        origin = self.country_repository.get(getattr(options, "origin_country", ""))
        origin_locale = origin.default_locale or locales.DEFAULT_LOCALE
        country = super()._get_country_line(address, address_format, origin_locale, options)
        return country.upper()
