"""Minimal FastAPI service for address formatting and validation."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ryandata_addressing import __version__
from ryandata_addressing.models import Address, AddressingError, AddressingValidationError
from ryandata_addressing.service import AddressingService

app = FastAPI(title="RyanData Addressing API", version=__version__)
service = AddressingService()


class FormatRequest(BaseModel):
    address: Address
    formatter: str = Field(default="default", description="Registered formatter type")
    options: dict[str, Any] = Field(default_factory=dict)


class ValidateRequest(BaseModel):
    address: Address


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/format")
def format_address(request: FormatRequest) -> dict[str, Any]:
    """Format an address; options are passed to the formatter per call."""
    try:
        formatter = service.create_formatter(request.formatter)
        formatted = formatter.format(request.address, **request.options)
    except AddressingValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except (AddressingError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "country_code": request.address.country_code,
        "formatter": request.formatter,
        "formatted": formatted,
    }


@app.post("/validate")
def validate_address(request: ValidateRequest) -> dict[str, Any]:
    """Validate an address against its country's reference data."""
    result = service.validate(request.address)
    return {
        "is_valid": result.is_valid,
        "errors": [
            {"field": err.field, "message": err.message, "value": err.value}
            for err in result.errors
        ],
    }


@app.get("/countries")
def list_countries(locale: Optional[str] = None) -> dict[str, str]:
    """Country code -> localized name, sorted by name."""
    return service.get_country_list(locale)


@app.get("/address-formats/{country_code}")
def get_address_format(country_code: str) -> dict[str, Any]:
    """Address format for a country; unknown countries get the generic format."""
    address_format = service.get_address_format(country_code)
    payload = address_format.model_dump(mode="json")
    payload["used_fields"] = [field.value for field in address_format.used_fields]
    return payload


@app.get("/subdivisions/{country_code}")
def list_subdivisions(
    country_code: str,
    parents: list[str] = Query(default=[]),
    locale: Optional[str] = None,
) -> dict[str, str]:
    """Subdivision code -> name for a country, or below the given parent codes."""
    return service.subdivision_repository.get_list([country_code, *parents], locale)


# To run: uvicorn ryandata_addressing.api:app --host 0.0.0.0 --port 8000
