from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ryandata_addressing.models import Address

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_addressing.service import AddressingService


class AddressFormatterAccessor:
    """Pandas accessor for address formatting.

    Works on Series whose elements are Address objects or mappings of
    address fields.

    Usage:
        >>> from ryandata_addressing.pandas_ext import register_accessor
        >>> register_accessor()
        >>> s = pd.Series([{"country_code": "US", "locality": "Mountain View"}])
        >>> s.addr.format()
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj
        self._service: AddressingService | None = None

    def _get_service(self) -> AddressingService:
        """Get the shared AddressingService instance."""
        if self._service is None:
            from ryandata_addressing.service import get_default_service

            self._service = get_default_service()
        return self._service

    @staticmethod
    def _is_address(value: Any) -> bool:
        return isinstance(value, (Address, Mapping))

    def format(
        self,
        *,
        service: AddressingService | None = None,
        **options: Any,
    ) -> pd.Series:
        """Format every address in the Series.

        Args:
            service: Optional AddressingService to use.
            **options: Formatter options; html defaults to False here.

        Returns:
            Series of formatted strings (None for missing entries).
        """
        svc = service or self._get_service()
        options.setdefault("html", False)
        return self._obj.apply(
            lambda x: svc.format(x, **options) if self._is_address(x) else None
        )

    def validate(self, *, service: AddressingService | None = None) -> pd.Series:
        """Validate every address in the Series.

        Returns:
            Boolean Series (None for missing entries).
        """
        svc = service or self._get_service()
        return self._obj.apply(
            lambda x: svc.validate(x).is_valid if self._is_address(x) else None
        )


def register_accessor(name: str = "addr") -> None:
    """Register the address accessor on pandas Series.

    After calling this, you can use:
        >>> series.addr.format()

    Args:
        name: Name for the accessor (default: "addr").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(AddressFormatterAccessor)


def format_addresses(
    df: pd.DataFrame,
    column_map: Mapping[str, str] | None = None,
    output_column: str = "formatted_address",
    errors: str = "coerce",
    inplace: bool = False,
    **options: Any,
) -> pd.DataFrame:
    """Format the address held in each DataFrame row.

    Note: Prefer using AddressingService.format_dataframe() instead.

    Args:
        df: Input DataFrame with one column per address field.
        column_map: Mapping of DataFrame column -> address field.
        output_column: Name of the column receiving the formatted text.
        errors: How to handle invalid rows ("raise" or "coerce").
        inplace: If True, modify DataFrame in place.
        **options: Formatter options.

    Returns:
        DataFrame with the formatted address column added.
    """
    from ryandata_addressing.service import get_default_service

    return get_default_service().format_dataframe(
        df,
        column_map=column_map,
        output_column=output_column,
        errors=errors,
        inplace=inplace,
        **options,
    )
