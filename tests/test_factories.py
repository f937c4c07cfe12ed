import pytest

from ryandata_addressing.data import (
    AddressFormatRepositoryFactory,
    CountryRepositoryFactory,
    JsonCountryRepository,
    SubdivisionRepositoryFactory,
)
from ryandata_addressing.formatter import (
    DefaultFormatter,
    FormatterFactory,
    PostalLabelFormatter,
)
from ryandata_addressing.protocols import (
    AddressFormatRepositoryProtocol,
    CountryRepositoryProtocol,
    FormatterProtocol,
    SubdivisionRepositoryProtocol,
)


def test_formatter_factory_default_and_error() -> None:
    """FormatterFactory should provide the default formatter and raise on unknown."""
    formatter = FormatterFactory.create()
    assert isinstance(formatter, DefaultFormatter)
    assert isinstance(formatter, FormatterProtocol)
    with pytest.raises(ValueError, match="Unknown formatter type: unknown-type"):
        FormatterFactory.create("unknown-type")


def test_formatter_factory_passes_arguments() -> None:
    formatter = FormatterFactory.create(
        "postal_label", locale="fr", options={"origin_country": "US"}
    )
    assert isinstance(formatter, PostalLabelFormatter)
    assert formatter.locale == "fr"
    assert formatter.get_option("origin_country") == "US"


def test_formatter_factory_available_types() -> None:
    assert FormatterFactory.available_types() == ["default", "postal_label"]


def test_repository_factories_default_and_error() -> None:
    """Repository factories should provide the JSON repositories and raise on unknown."""
    assert isinstance(CountryRepositoryFactory.create(), CountryRepositoryProtocol)
    assert isinstance(SubdivisionRepositoryFactory.create(), SubdivisionRepositoryProtocol)
    assert isinstance(AddressFormatRepositoryFactory.create(), AddressFormatRepositoryProtocol)
    for factory in (
        CountryRepositoryFactory,
        SubdivisionRepositoryFactory,
        AddressFormatRepositoryFactory,
    ):
        with pytest.raises(ValueError):
            factory.create("unknown-type")


def test_register_custom_repository() -> None:
    class FrenchCountryRepository(JsonCountryRepository):
        def __init__(self) -> None:
            super().__init__(default_locale="fr")

    CountryRepositoryFactory.register("french", FrenchCountryRepository)
    try:
        repository = CountryRepositoryFactory.create("french")
        assert repository.get("DE").name == "Allemagne"
        assert "french" in CountryRepositoryFactory.available_types()
    finally:
        CountryRepositoryFactory.unregister("french")
    assert "french" not in CountryRepositoryFactory.available_types()
