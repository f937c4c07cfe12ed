from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from ryandata_addressing import locales
from ryandata_addressing.data.constants import LOCALE_ENV_VAR
from ryandata_addressing.formatter.options import FormatterOptions
from ryandata_addressing.models import Address, AddressingValidationError, InvalidOptionError

logger = logging.getLogger(__name__)


class BaseFormatter(ABC):
    """Abstract base class for address formatters.

    Holds the formatter locale and the validated options. Option changes are
    all-or-nothing: an unknown key raises InvalidOptionError and an invalid
    value raises AddressingValidationError, and in both cases the current
    options stay untouched.
    """

    options_class: ClassVar[type[FormatterOptions]] = FormatterOptions

    def __init__(
        self,
        locale: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            locale: Locale used when an address has none. Defaults to the
                RYANDATA_ADDRESSING_LOCALE environment variable, then "en".
            options: Initial option values.
        """
        if locale is None:
            locale = os.getenv(LOCALE_ENV_VAR) or locales.DEFAULT_LOCALE
        self._locale = locale
        self._options = self._merge_options(self.options_class(), options or {})

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = value

    def get_locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    @property
    def options(self) -> FormatterOptions:
        """A copy of the current options model.

        Changes made to the copy do not reach the formatter; use
        set_option() or set_options() instead.
        """
        return self._options.model_copy(deep=True)

    def get_options(self) -> dict[str, Any]:
        """Get a copy of the current options as a dict."""
        return self._options.model_dump()

    def set_options(self, options: Mapping[str, Any]) -> None:
        """Update several options at once.

        Args:
            options: Mapping of option name to value.

        Raises:
            InvalidOptionError: If a key is not a recognized option.
            AddressingValidationError: If a value is invalid.
        """
        self._options = self._merge_options(self._options, options)

    def get_option(self, key: str) -> Any:
        """Get a single option value.

        Raises:
            InvalidOptionError: If the key is not a recognized option.
        """
        self._check_keys([key])
        return getattr(self._options, key)

    def set_option(self, key: str, value: Any) -> None:
        """Set a single option value.

        Raises:
            InvalidOptionError: If the key is not a recognized option.
            AddressingValidationError: If the value is invalid.
        """
        self.set_options({key: value})

    def _check_keys(self, keys: Any) -> None:
        available = list(self.options_class.model_fields)
        for key in keys:
            if key not in available:
                raise InvalidOptionError.for_option(key, available)

    def _merge_options(
        self, current: FormatterOptions, changes: Mapping[str, Any]
    ) -> FormatterOptions:
        """Build a new options object from the current one and some changes."""
        if not changes:
            return current
        self._check_keys(changes.keys())
        try:
            return self.options_class.model_validate({**current.model_dump(), **changes})
        except ValidationError as e:
            logger.debug("Rejected formatter options %s: %s", dict(changes), e)
            raise AddressingValidationError(e, {"options": sorted(changes)}) from e

    @abstractmethod
    def format(self, address: Address, **options: Any) -> str:
        """Format an address.

        Args:
            address: Address to format.
            **options: Per-call option overrides; the formatter's own
                options are not modified.

        Returns:
            Formatted address as markup or plain text.
        """
        ...
