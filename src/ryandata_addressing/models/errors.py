"""Addressing error classes.

These classes provide package-specific error handling for formatting,
option handling and address validation.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_addressing"


class AddressingError(PydanticCustomError):
    """Base error for ryandata_addressing.

    A PydanticCustomError, so it carries a machine-readable ``type`` and a
    context dict (always including the package name) and can be raised
    from inside pydantic validators.
    """


class InvalidOptionError(AddressingError):
    """Raised when a formatter is given an option key it does not recognize."""

    @classmethod
    def for_option(cls, option: str, available: list[str]) -> InvalidOptionError:
        return cls(
            "invalid_option",
            "Invalid option '{option}'. Available options: {available}",
            {"package": PACKAGE_NAME, "option": option, "available": ", ".join(available)},
        )


class AddressingValidationError(Exception):
    """Exception that wraps pydantic.ValidationError with package identification.

    Raised when an option value or an incoming payload fails model
    validation. The original error stays reachable for callers.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"AddressingValidationError({self.original_error!r}, context={self.context})"
