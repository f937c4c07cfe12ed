"""Formatter option models.

Options are validated pydantic models: unknown keys are rejected and values
are checked on assignment.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ATTRIBUTE_NAME = re.compile(r"[A-Za-z_:][A-Za-z0-9_.:-]*")


class FormatterOptions(BaseModel):
    """Options recognized by DefaultFormatter."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    html: bool = Field(default=True, description="Produce markup instead of plain text")
    html_tag: str = Field(
        default="p",
        pattern=r"^[A-Za-z][A-Za-z0-9-]*$",
        description="Element wrapping the whole address",
    )
    html_attributes: dict[str, str | list[str]] = Field(
        default_factory=lambda: {"translate": "no"},
        description="Attributes of the wrapper element; list values are space-joined",
    )

    @field_validator("html_attributes")
    @classmethod
    def check_attribute_names(
        cls, value: dict[str, str | list[str]]
    ) -> dict[str, str | list[str]]:
        """Reject attribute names that would break out of the wrapper element."""
        invalid = [name for name in value if not _ATTRIBUTE_NAME.fullmatch(name)]
        if invalid:
            raise ValueError(f"Invalid attribute names: {', '.join(map(repr, invalid))}")
        return value


class PostalLabelOptions(FormatterOptions):
    """Options recognized by PostalLabelFormatter.

    Postal labels are plain text by default.
    """

    html: bool = False
    origin_country: str = Field(
        default="",
        description="Country the mail is sent from; decides domestic vs international",
    )
