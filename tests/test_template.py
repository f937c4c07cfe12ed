"""Tests for format string parsing, line rendering and markup helpers."""

from __future__ import annotations

from ryandata_addressing.core import (
    Segment,
    escape,
    parse_format_string,
    render_attributes,
    render_line,
    strip_tags,
    used_fields,
    wrap,
)


def _line(format_string: str) -> tuple[Segment, ...]:
    return parse_format_string(format_string)[0]


class TestParseFormatString:
    def test_segments(self) -> None:
        assert _line("%postal_code-%locality") == (
            Segment(text="%postal_code", field="postal_code"),
            Segment(text="-"),
            Segment(text="%locality", field="locality"),
        )

    def test_lines(self) -> None:
        lines = parse_format_string("%address_line1\n\n%locality")
        assert len(lines) == 3
        assert lines[1] == ()

    def test_literal_prefix(self) -> None:
        line = _line("〒%postal_code")
        assert line[0] == Segment(text="〒")
        assert line[1].is_field

    def test_used_fields(self) -> None:
        fields = used_fields("%given_name %family_name\n%locality %postal_code\n%locality\n%country")
        assert fields == ["given_name", "family_name", "locality", "postal_code"]


class TestRenderLine:
    def test_all_fields_present(self) -> None:
        line = _line("%postal_code-%locality")
        values = {"postal_code": "CP 2101", "locality": "AHUACHAPÁN"}
        assert render_line(line, values) == "CP 2101-AHUACHAPÁN"

    def test_separator_dropped_next_to_empty_field(self) -> None:
        line = _line("%postal_code-%locality")
        assert render_line(line, {"locality": "AHUACHAPÁN"}) == "AHUACHAPÁN"
        assert render_line(line, {"postal_code": "CP 2101"}) == "CP 2101"

    def test_punctuation_separator_wins_over_whitespace(self) -> None:
        line = _line("%locality, %administrative_area %postal_code")
        values = {"locality": "Fresno", "postal_code": "93650"}
        assert render_line(line, values) == "Fresno, 93650"

    def test_adjacent_fields(self) -> None:
        line = _line("%administrative_area%locality")
        values = {"administrative_area": "台北市", "locality": "大安區"}
        assert render_line(line, values) == "台北市大安區"

    def test_leading_literal(self) -> None:
        line = _line("〒%postal_code")
        assert render_line(line, {"postal_code": "100-8111"}) == "〒100-8111"
        assert render_line(line, {}) == ""

    def test_trailing_literal(self) -> None:
        line = _line("%locality CEDEX")
        assert render_line(line, {"locality": "Paris"}) == "Paris CEDEX"
        assert render_line(line, {}) == ""

    def test_trailing_punctuation_dropped(self) -> None:
        assert render_line(_line("%locality,"), {"locality": "Paris"}) == "Paris"

    def test_empty_line(self) -> None:
        assert render_line(_line("%given_name %family_name"), {}) == ""

    def test_literal_transformation(self) -> None:
        line = _line("%organization & %given_name")
        values = {"organization": "A", "given_name": "B"}
        assert render_line(line, values, escape) == "A &amp; B"


class TestMarkup:
    def test_escape(self) -> None:
        assert escape("<b>&'\"") == "&lt;b&gt;&amp;&#x27;&quot;"

    def test_strip_tags(self) -> None:
        assert strip_tags("<b>Bold</b> street") == "Bold street"
        assert strip_tags("a < b") == "a  b"
        assert strip_tags("plain") == "plain"

    def test_render_attributes(self) -> None:
        attributes = {"class": ["address", "postal"], "translate": "no"}
        assert render_attributes(attributes) == 'class="address postal" translate="no"'
        assert render_attributes({"title": 'say "hi"'}) == 'title="say &quot;hi&quot;"'

    def test_wrap(self) -> None:
        assert wrap("x", "p") == "<p>x</p>"
        assert wrap("x", "span", {"class": "locality"}) == '<span class="locality">x</span>'
