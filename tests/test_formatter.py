"""Tests for DefaultFormatter."""

from __future__ import annotations

import pytest

from ryandata_addressing.formatter import DefaultFormatter
from ryandata_addressing.models import Address, AddressingValidationError, InvalidOptionError


@pytest.fixture
def andorra_address() -> Address:
    return (
        Address()
        .with_country_code("AD")
        .with_locality("Parròquia d'Andorra la Vella")
        .with_postal_code("AD500")
        .with_address_line1("C. Prat de la Creu, 62-64")
    )


@pytest.fixture
def taiwan_address() -> Address:
    return (
        Address()
        .with_country_code("TW")
        .with_administrative_area("Taipei City")
        .with_locality("Da'an District")
        .with_address_line1("Sec. 3 Hsin-yi Rd.")
        .with_postal_code("106")
        .with_organization("Giant <h2>Bike</h2> Store")
        .with_given_name("Te-Chiang")
        .with_family_name("Liu")
        .with_locale("zh-Hant")
    )


class TestLocaleAndOptions:
    """Locale and option accessors."""

    def test_default_locale(self) -> None:
        assert DefaultFormatter(locale="en").get_locale() == "en"

    def test_locale_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RYANDATA_ADDRESSING_LOCALE", "fr")
        assert DefaultFormatter().get_locale() == "fr"

    def test_set_locale(self, formatter: DefaultFormatter) -> None:
        formatter.set_locale("zh-Hant")
        assert formatter.get_locale() == "zh-Hant"
        assert formatter.locale == "zh-Hant"

    def test_default_options(self, formatter: DefaultFormatter) -> None:
        assert formatter.get_options() == {
            "html": True,
            "html_tag": "p",
            "html_attributes": {"translate": "no"},
        }

    def test_set_options(self, formatter: DefaultFormatter) -> None:
        formatter.set_options({"html": False, "html_tag": "div"})
        assert formatter.get_option("html") is False
        assert formatter.get_option("html_tag") == "div"
        # Untouched options keep their values
        assert formatter.get_option("html_attributes") == {"translate": "no"}

    def test_get_options_returns_copy(self, formatter: DefaultFormatter) -> None:
        options = formatter.get_options()
        options["html_attributes"]["translate"] = "yes"
        assert formatter.get_option("html_attributes") == {"translate": "no"}

    def test_options_property_returns_copy(self, formatter: DefaultFormatter) -> None:
        """Editing the options model in place leaves the formatter unchanged."""
        options = formatter.options
        options.html_attributes["class"] = "postal"
        options.html = False
        assert formatter.get_option("html") is True
        assert formatter.get_option("html_attributes") == {"translate": "no"}
        assert formatter.format(Address(country_code="US")).startswith('<p translate="no">')

    def test_invalid_option_key(self, formatter: DefaultFormatter) -> None:
        """Unknown keys raise and leave the previous options in place."""
        before = formatter.get_options()
        with pytest.raises(InvalidOptionError) as exc_info:
            formatter.set_option("bogus", 1)
        assert exc_info.value.type == "invalid_option"
        assert "bogus" in str(exc_info.value)
        assert formatter.get_options() == before

    def test_invalid_option_key_in_batch(self, formatter: DefaultFormatter) -> None:
        """A batch with one unknown key applies none of its changes."""
        with pytest.raises(InvalidOptionError):
            formatter.set_options({"html": False, "bogus": 1})
        assert formatter.get_option("html") is True

    def test_get_unknown_option(self, formatter: DefaultFormatter) -> None:
        with pytest.raises(InvalidOptionError):
            formatter.get_option("bogus")

    def test_invalid_option_value(self, formatter: DefaultFormatter) -> None:
        with pytest.raises(AddressingValidationError):
            formatter.set_option("html_tag", "not a tag")
        assert formatter.get_option("html_tag") == "p"

    def test_invalid_attribute_value(self, formatter: DefaultFormatter) -> None:
        with pytest.raises(AddressingValidationError):
            formatter.set_option("html_attributes", {"class": 5})

    @pytest.mark.parametrize("name", ["x onload", 'a"b', "a>b", "", "1x", "data-x\n"])
    def test_invalid_attribute_name(self, formatter: DefaultFormatter, name: str) -> None:
        with pytest.raises(AddressingValidationError):
            formatter.set_option("html_attributes", {name: "y"})
        assert formatter.get_option("html_attributes") == {"translate": "no"}

    def test_invalid_attribute_name_per_call(
        self, formatter: DefaultFormatter, andorra_address: Address
    ) -> None:
        with pytest.raises(AddressingValidationError):
            formatter.format(andorra_address, html_attributes={"x onload": "alert(1)"})

    def test_namespaced_and_data_attribute_names(self, formatter: DefaultFormatter) -> None:
        formatter.set_option("html_attributes", {"data-country": "us", "xml:lang": "en"})
        assert formatter.format(Address(country_code="US")).startswith(
            '<p data-country="us" xml:lang="en">\n'
        )

    def test_constructor_rejects_unknown_option(self) -> None:
        with pytest.raises(InvalidOptionError):
            DefaultFormatter(options={"uppercase": True})

    def test_per_call_override_does_not_mutate(
        self, formatter: DefaultFormatter, andorra_address: Address
    ) -> None:
        text = formatter.format(andorra_address, html=False)
        assert "<" not in text
        assert formatter.get_option("html") is True

    def test_per_call_unknown_option(
        self, formatter: DefaultFormatter, andorra_address: Address
    ) -> None:
        with pytest.raises(InvalidOptionError):
            formatter.format(andorra_address, bogus=True)


class TestAndorra:
    def test_text(self, formatter: DefaultFormatter, andorra_address: Address) -> None:
        formatter.set_option("html", False)
        assert formatter.format(andorra_address) == (
            "C. Prat de la Creu, 62-64\nAD500 Parròquia d'Andorra la Vella\nAndorra"
        )

    def test_html(self, formatter: DefaultFormatter, andorra_address: Address) -> None:
        expected = "\n".join(
            [
                '<p translate="no">',
                '<span class="address-line1">C. Prat de la Creu, 62-64</span><br>',
                '<span class="postal-code">AD500</span> '
                '<span class="locality">Parròquia d&#x27;Andorra la Vella</span><br>',
                '<span class="country">Andorra</span>',
                "</p>",
            ]
        )
        assert formatter.format(andorra_address) == expected


class TestUnitedStates:
    def test_missing_locality(self, formatter: DefaultFormatter) -> None:
        address = (
            Address()
            .with_country_code("US")
            .with_administrative_area("CA")
            .with_postal_code("94043")
            .with_address_line1("1098 Alta Ave")
        )
        assert formatter.format(address, html=False) == "1098 Alta Ave\nCA 94043\nUnited States"

    def test_missing_administrative_area(self, formatter: DefaultFormatter) -> None:
        address = (
            Address()
            .with_country_code("US")
            .with_administrative_area("CA")
            .with_postal_code("94043")
            .with_address_line1("1098 Alta Ave")
        )
        address = address.with_locality("Mountain View").with_administrative_area("")
        assert formatter.format(address, html=False) == (
            "1098 Alta Ave\nMountain View, 94043\nUnited States"
        )

    def test_full_line(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="US",
            administrative_area="CA",
            locality="Mountain View",
            postal_code="94043",
            address_line1="1098 Alta Ave",
        )
        assert formatter.format(address, html=False) == (
            "1098 Alta Ave\nMountain View, CA 94043\nUnited States"
        )

    def test_administrative_area_is_uppercased(self, formatter: DefaultFormatter) -> None:
        """Unmatched values pass through, uppercased for countries that require it."""
        address = Address(country_code="US", administrative_area="Ontario", postal_code="94043")
        assert formatter.format(address, html=False) == "ONTARIO 94043\nUnited States"

    def test_subdivision_name_is_replaced_by_code(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="US", administrative_area="california", locality="Fresno")
        assert formatter.format(address, html=False) == "Fresno, CA\nUnited States"


class TestElSalvador:
    @pytest.fixture
    def address(self) -> Address:
        return (
            Address()
            .with_country_code("SV")
            .with_administrative_area("Ahuachapán")
            .with_locality("Ahuachapán")
            .with_address_line1("Some Street 12")
        )

    def test_html(self, formatter: DefaultFormatter, address: Address) -> None:
        expected = "\n".join(
            [
                '<p translate="no">',
                '<span class="address-line1">Some Street 12</span><br>',
                '<span class="postal-code">CP 2101</span>-'
                '<span class="locality">Ahuachapán</span><br>',
                '<span class="administrative-area">Ahuachapán</span><br>',
                '<span class="country">El Salvador</span>',
                "</p>",
            ]
        )
        assert formatter.format(address.with_postal_code("CP 2101")) == expected

    def test_text(self, formatter: DefaultFormatter, address: Address) -> None:
        formatter.set_option("html", False)
        assert formatter.format(address.with_postal_code("CP 2101")) == (
            "Some Street 12\nCP 2101-Ahuachapán\nAhuachapán\nEl Salvador"
        )

    def test_separator_dropped_without_postal_code(
        self, formatter: DefaultFormatter, address: Address
    ) -> None:
        formatter.set_option("html", False)
        assert formatter.format(address) == "Some Street 12\nAhuachapán\nAhuachapán\nEl Salvador"


class TestTaiwan:
    def test_html_local_format(self, formatter: DefaultFormatter, taiwan_address: Address) -> None:
        """Local format: country first, local subdivision names, escaped values."""
        formatter.set_option(
            "html_attributes",
            {"translate": "no", "class": ["address", "postal-address"]},
        )
        expected = "\n".join(
            [
                '<p translate="no" class="address postal-address">',
                '<span class="country">台灣</span><br>',
                '<span class="postal-code">106</span><br>',
                '<span class="administrative-area">台北市</span>'
                '<span class="locality">大安區</span><br>',
                '<span class="address-line1">Sec. 3 Hsin-yi Rd.</span><br>',
                '<span class="organization">Giant &lt;h2&gt;Bike&lt;/h2&gt; Store</span><br>',
                '<span class="family-name">Liu</span> <span class="given-name">Te-Chiang</span>',
                "</p>",
            ]
        )
        assert formatter.format(taiwan_address) == expected

    def test_text_local_format(self, formatter: DefaultFormatter, taiwan_address: Address) -> None:
        formatter.set_option("html", False)
        assert formatter.format(taiwan_address) == (
            "台灣\n106\n台北市大安區\nSec. 3 Hsin-yi Rd.\nGiant Bike Store\nLiu Te-Chiang"
        )

    def test_standard_format_for_other_locales(
        self, formatter: DefaultFormatter, taiwan_address: Address
    ) -> None:
        address = taiwan_address.with_locale("en")
        assert formatter.format(address, html=False) == (
            "Te-Chiang Liu\nGiant Bike Store\nSec. 3 Hsin-yi Rd.\n"
            "Da'an District, Taipei City 106\nTaiwan"
        )

    def test_formatter_locale_used_when_address_has_none(
        self, formatter: DefaultFormatter, taiwan_address: Address
    ) -> None:
        formatter.set_locale("zh-Hant-TW")
        text = formatter.format(taiwan_address.with_locale(""), html=False)
        assert text.startswith("台灣\n106\n台北市大安區")

    def test_country_default_locale_as_last_resort(self, taiwan_address: Address) -> None:
        formatter = DefaultFormatter(locale="", options={"html": False})
        text = formatter.format(taiwan_address.with_locale(""))
        assert text.startswith("台灣\n")


class TestRecipientNames:
    """The name line carries given, additional and family names."""

    def test_additional_name_rendered(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="US",
            given_name="John",
            additional_name="Q",
            family_name="Public",
            address_line1="1 Main",
        )
        assert formatter.format(address, html=False) == "John Q Public\n1 Main\nUnited States"

    def test_single_space_without_additional_name(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="US", given_name="John", family_name="Public", address_line1="1 Main"
        )
        assert formatter.format(address, html=False) == "John Public\n1 Main\nUnited States"

    def test_additional_name_without_given_name(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="FR", additional_name="Marie", family_name="Curie")
        assert formatter.format(address, html=False) == "Marie Curie\nFrance"

    def test_additional_name_markup(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="US", given_name="John", additional_name="Q", family_name="Public"
        )
        assert (
            '<span class="given-name">John</span> <span class="additional-name">Q</span> '
            '<span class="family-name">Public</span><br>'
        ) in formatter.format(address)

    def test_generic_format_includes_additional_name(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="XX", given_name="Ada", additional_name="King", family_name="Lovelace"
        )
        assert formatter.format(address, html=False) == "Ada King Lovelace"

    def test_family_name_first_in_local_format(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="JP",
            given_name="Taro",
            additional_name="Jiro",
            family_name="Yamada",
            address_line1="1-1 Chiyoda",
            locale="ja",
        )
        assert formatter.format(address, html=False) == "日本\n1-1 Chiyoda\nYamada Taro Jiro"


class TestLocalizedCountryNames:
    """Country lines use the name for the effective locale."""

    @pytest.mark.parametrize(
        ("country_code", "locale", "expected"),
        [
            ("JP", "ja", "日本"),
            ("KR", "ko", "대한민국"),
            ("CN", "zh-Hans", "中国"),
            ("AD", "ca", "Andorra"),
            ("AE", "ar", "الإمارات العربية المتحدة"),
            ("BR", "pt-BR", "Brasil"),
            ("SE", "sv", "Sverige"),
            ("US", "ja", "アメリカ合衆国"),
        ],
    )
    def test_country_only(
        self, formatter: DefaultFormatter, country_code: str, locale: str, expected: str
    ) -> None:
        address = Address(country_code=country_code, locale=locale)
        assert formatter.format(address, html=False) == expected

    def test_country_default_locale_names_the_country(self) -> None:
        formatter = DefaultFormatter(locale="", options={"html": False})
        assert formatter.format(Address(country_code="KR")) == "대한민국"

    def test_simplified_chinese_not_used_for_traditional(
        self, formatter: DefaultFormatter
    ) -> None:
        address = Address(country_code="CN", locale="zh-Hant-TW")
        assert formatter.format(address, html=False) == "中國"


class TestJapan:
    def test_local_format_with_marker(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="JP",
            administrative_area="Tokyo",
            locality="Chiyoda-ku",
            address_line1="1-1 Chiyoda",
            postal_code="100-8111",
            locale="ja",
        )
        assert formatter.format(address, html=False) == (
            "日本\n〒100-8111\n東京都Chiyoda-ku\n1-1 Chiyoda"
        )

    def test_marker_dropped_without_postal_code(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="JP",
            administrative_area="Tokyo",
            address_line1="1-1 Chiyoda",
            locale="ja",
        )
        assert formatter.format(address, html=False) == "日本\n東京都\n1-1 Chiyoda"


class TestFallbacks:
    def test_country_only(self, formatter: DefaultFormatter) -> None:
        assert formatter.format(Address(country_code="US"), html=False) == "United States"

    def test_country_only_html(self, formatter: DefaultFormatter) -> None:
        assert formatter.format(Address(country_code="US")) == (
            '<p translate="no">\n<span class="country">United States</span>\n</p>'
        )

    def test_unknown_country_empty_address(self, formatter: DefaultFormatter) -> None:
        assert formatter.format(Address(country_code="XX")) == ""
        assert formatter.format(Address()) == ""

    def test_unknown_country_uses_generic_format(self, formatter: DefaultFormatter) -> None:
        address = Address(
            country_code="XX",
            address_line1="1 Main Road",
            locality="Springfield",
            postal_code="12345",
            administrative_area="Region",
        )
        assert formatter.format(address, html=False) == "1 Main Road\nSpringfield 12345\nRegion"

    def test_lowercase_country_code(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="ad", postal_code="AD500", locality="Canillo")
        assert formatter.format(address, html=False) == "AD500 Canillo\nAndorra"

    def test_country_name_follows_locale(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="DE", locality="Berlin", postal_code="10117", locale="fr")
        assert formatter.format(address, html=False) == "10117 Berlin\nAllemagne"

    def test_custom_wrapper_tag(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="US", locality="Fresno")
        html = formatter.format(address, html_tag="address", html_attributes={})
        assert html.startswith("<address>\n")
        assert html.endswith("\n</address>")

    def test_stray_brackets_are_removed_in_text(self, formatter: DefaultFormatter) -> None:
        address = Address(country_code="US", address_line1="1 <b>Main</b> St >", locality="A < B")
        assert formatter.format(address, html=False) == "1 Main St\nA  B\nUnited States"
