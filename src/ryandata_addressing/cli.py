from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from ryandata_addressing.data import (
    JsonAddressFormatRepository,
    JsonCountryRepository,
    JsonSubdivisionRepository,
)
from ryandata_addressing.models import (
    Address,
    AddressBuilder,
    AddressingError,
    AddressingValidationError,
)
from ryandata_addressing.service import AddressingService

app = typer.Typer(help="Format and validate international postal addresses.")


def _service(data_dir: Optional[Path]) -> AddressingService:
    """Build a service, reading reference data from data_dir when given.

    Without data_dir the repositories fall back to RYANDATA_ADDRESSING_DATA_DIR,
    then to the bundled data.
    """
    return AddressingService(
        country_repository=JsonCountryRepository(data_dir=data_dir),
        subdivision_repository=JsonSubdivisionRepository(data_dir=data_dir),
        address_format_repository=JsonAddressFormatRepository(data_dir=data_dir),
    )


def _build_address(
    country: str,
    address_line1: str,
    address_line2: str,
    locality: str,
    dependent_locality: str,
    administrative_area: str,
    postal_code: str,
    sorting_code: str,
    organization: str,
    given_name: str,
    family_name: str,
    locale: str,
) -> Address:
    builder = (
        AddressBuilder()
        .with_country(country)
        .with_address_line1(address_line1)
        .with_address_line2(address_line2)
        .with_locality(locality)
        .with_dependent_locality(dependent_locality)
        .with_administrative_area(administrative_area)
        .with_postal_code(postal_code)
        .with_sorting_code(sorting_code)
        .with_organization(organization)
        .with_recipient(given_name, family_name)
    )
    if locale:
        builder.with_locale(locale)
    return builder.build()


# Shared options
COUNTRY_OPTION = typer.Option(..., "--country", "-c", help="ISO 3166-1 alpha-2 country code.")
LINE1_OPTION = typer.Option("", "--line1", help="First address line.")
LINE2_OPTION = typer.Option("", "--line2", help="Second address line.")
LOCALITY_OPTION = typer.Option("", "--locality", help="City or post town.")
DEPENDENT_LOCALITY_OPTION = typer.Option("", "--dependent-locality", help="Neighborhood or district.")
ADMIN_AREA_OPTION = typer.Option("", "--administrative-area", "--state", help="State, province, ...")
POSTAL_CODE_OPTION = typer.Option("", "--postal-code", help="Postal code.")
SORTING_CODE_OPTION = typer.Option("", "--sorting-code", help="Sorting code (CEDEX).")
ORGANIZATION_OPTION = typer.Option("", "--organization", help="Company or organization.")
GIVEN_NAME_OPTION = typer.Option("", "--given-name", help="Recipient's given name.")
FAMILY_NAME_OPTION = typer.Option("", "--family-name", help="Recipient's family name.")
LOCALE_OPTION = typer.Option("", "--locale", help="Locale the address is written in.")
DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    help="Directory with reference data (default: bundled data).",
)


@app.command("format")
def format_command(
    country: str = COUNTRY_OPTION,
    address_line1: str = LINE1_OPTION,
    address_line2: str = LINE2_OPTION,
    locality: str = LOCALITY_OPTION,
    dependent_locality: str = DEPENDENT_LOCALITY_OPTION,
    administrative_area: str = ADMIN_AREA_OPTION,
    postal_code: str = POSTAL_CODE_OPTION,
    sorting_code: str = SORTING_CODE_OPTION,
    organization: str = ORGANIZATION_OPTION,
    given_name: str = GIVEN_NAME_OPTION,
    family_name: str = FAMILY_NAME_OPTION,
    locale: str = LOCALE_OPTION,
    html: bool = typer.Option(False, "--html/--text", help="Produce markup instead of text."),  # noqa: B008
    origin: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--label-origin",
        help="Format as a postal label sent from this country.",
    ),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """Format an address for display (or as a postal label)."""
    service = _service(data_dir)
    address = _build_address(
        country,
        address_line1,
        address_line2,
        locality,
        dependent_locality,
        administrative_area,
        postal_code,
        sorting_code,
        organization,
        given_name,
        family_name,
        locale,
    )
    try:
        if origin:
            output = service.format_label(address, origin, html=html)
        else:
            output = service.format(address, html=html)
    except (AddressingError, AddressingValidationError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(output)


@app.command("validate")
def validate_command(
    country: str = COUNTRY_OPTION,
    address_line1: str = LINE1_OPTION,
    address_line2: str = LINE2_OPTION,
    locality: str = LOCALITY_OPTION,
    dependent_locality: str = DEPENDENT_LOCALITY_OPTION,
    administrative_area: str = ADMIN_AREA_OPTION,
    postal_code: str = POSTAL_CODE_OPTION,
    sorting_code: str = SORTING_CODE_OPTION,
    organization: str = ORGANIZATION_OPTION,
    given_name: str = GIVEN_NAME_OPTION,
    family_name: str = FAMILY_NAME_OPTION,
    locale: str = LOCALE_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),  # noqa: B008
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """Validate an address; exits with code 1 when it is invalid."""
    service = _service(data_dir)
    address = _build_address(
        country,
        address_line1,
        address_line2,
        locality,
        dependent_locality,
        administrative_area,
        postal_code,
        sorting_code,
        organization,
        given_name,
        family_name,
        locale,
    )
    result = service.validate(address)
    errors = [{"field": err.field, "message": err.message} for err in result.errors]

    if as_json:
        typer.echo(json.dumps({"is_valid": result.is_valid, "errors": errors}, ensure_ascii=False))
    elif result.is_valid:
        typer.echo("Address is valid.")
    else:
        for error in errors:
            typer.echo(f"{error['field']}: {error['message']}")

    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command("countries")
def countries_command(
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale for country names."),  # noqa: B008
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """List known countries as CODE<TAB>name."""
    service = _service(data_dir)
    for code, name in service.get_country_list(locale).items():
        typer.echo(f"{code}\t{name}")


@app.command("subdivisions")
def subdivisions_command(
    country: str = typer.Argument(..., help="ISO 3166-1 alpha-2 country code."),  # noqa: B008
    parents: Optional[list[str]] = typer.Argument(  # noqa: B008
        None, help="Codes of parent subdivisions, top level first."
    ),
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale for names."),  # noqa: B008
    data_dir: Optional[Path] = DATA_DIR_OPTION,
) -> None:
    """List predefined subdivisions as CODE<TAB>name."""
    service = _service(data_dir)
    listing = service.subdivision_repository.get_list([country, *(parents or [])], locale)
    if not listing:
        typer.echo("No predefined subdivisions.", err=True)
        raise typer.Exit(code=1)
    for code, name in listing.items():
        typer.echo(f"{code}\t{name}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
