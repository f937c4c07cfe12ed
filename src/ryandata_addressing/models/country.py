"""Country and subdivision models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Country(BaseModel):
    """A country, with its name resolved for one locale."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    country_code: str
    name: str
    three_letter_code: str | None = None
    numeric_code: str | None = None
    currency_code: str | None = None
    locale: str = Field(default="en", description="Locale the name is expressed in")
    default_locale: str | None = Field(
        default=None, description="Primary locale spoken in the country"
    )


class Subdivision(BaseModel):
    """An administrative subdivision (state, city, district, ...).

    ``code`` is what gets stored and displayed by default; ``local_code`` is
    displayed instead when the address locale matches ``locale``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    country_code: str
    code: str
    name: str
    local_code: str | None = None
    local_name: str | None = None
    iso_code: str | None = None
    postal_code_pattern: str | None = None
    locale: str | None = None
    parents: tuple[str, ...] = Field(
        default=(), description="Country code followed by the codes of parent subdivisions"
    )
    children: tuple[Subdivision, ...] = ()

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def display_code(self, use_local: bool) -> str:
        if use_local and self.local_code:
            return self.local_code
        return self.code

    def display_name(self, use_local: bool) -> str:
        if use_local and self.local_name:
            return self.local_name
        return self.name
