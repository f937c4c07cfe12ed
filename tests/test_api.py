"""Tests for the FastAPI application."""

from __future__ import annotations

from fastapi.testclient import TestClient

from ryandata_addressing.api import app

client = TestClient(app)

ANDORRA = {
    "country_code": "AD",
    "locality": "Parròquia d'Andorra la Vella",
    "postal_code": "AD500",
    "address_line1": "C. Prat de la Creu, 62-64",
}


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_format_html() -> None:
    response = client.post("/format", json={"address": ANDORRA})
    assert response.status_code == 200
    payload = response.json()
    assert payload["country_code"] == "AD"
    assert payload["formatter"] == "default"
    assert '<span class="postal-code">AD500</span>' in payload["formatted"]


def test_format_text_with_camel_case_address() -> None:
    address = {
        "countryCode": "AD",
        "postalCode": "AD500",
        "city": "Canillo",
    }
    response = client.post("/format", json={"address": address, "options": {"html": False}})
    assert response.status_code == 200
    assert response.json()["formatted"] == "AD500 Canillo\nAndorra"


def test_format_postal_label() -> None:
    address = {
        "country_code": "CH",
        "address_line1": "Bahnhofstrasse 1",
        "postal_code": "8001",
        "locality": "Zürich",
    }
    response = client.post(
        "/format",
        json={"address": address, "formatter": "postal_label", "options": {"origin_country": "US"}},
    )
    assert response.status_code == 200
    assert response.json()["formatted"] == "Bahnhofstrasse 1\nCH-8001 Zürich\nSWITZERLAND"


def test_format_unknown_formatter() -> None:
    response = client.post("/format", json={"address": ANDORRA, "formatter": "nope"})
    assert response.status_code == 400


def test_format_unknown_option() -> None:
    response = client.post("/format", json={"address": ANDORRA, "options": {"bogus": True}})
    assert response.status_code == 400
    assert "bogus" in response.json()["detail"]


def test_format_invalid_option_value() -> None:
    response = client.post("/format", json={"address": ANDORRA, "options": {"html_tag": "1 p"}})
    assert response.status_code == 422


def test_format_missing_origin_country() -> None:
    response = client.post("/format", json={"address": ANDORRA, "formatter": "postal_label"})
    assert response.status_code == 400


def test_format_invalid_payload() -> None:
    response = client.post("/format", json={"address": {"locality": ["a", "b"]}})
    assert response.status_code == 422


def test_validate() -> None:
    response = client.post("/validate", json={"address": {"country_code": "US", "postal_code": "1"}})
    assert response.status_code == 200
    payload = response.json()
    assert payload["is_valid"] is False
    fields = [error["field"] for error in payload["errors"]]
    assert "address_line1" in fields


def test_validate_valid_address() -> None:
    address = {
        "country_code": "US",
        "administrative_area": "CA",
        "locality": "Mountain View",
        "postal_code": "94043",
        "address_line1": "1098 Alta Ave",
    }
    response = client.post("/validate", json={"address": address})
    assert response.json() == {"is_valid": True, "errors": []}


def test_countries() -> None:
    response = client.get("/countries", params={"locale": "de"})
    assert response.status_code == 200
    assert response.json()["CH"] == "Schweiz"


def test_address_format() -> None:
    response = client.get("/address-formats/us")
    assert response.status_code == 200
    payload = response.json()
    assert payload["country_code"] == "US"
    assert payload["administrative_area_type"] == "state"
    assert payload["used_fields"][-1] == "postal_code"


def test_generic_address_format() -> None:
    assert client.get("/address-formats/XX").json()["country_code"] == "ZZ"


def test_subdivisions() -> None:
    response = client.get(
        "/subdivisions/TW", params={"parents": ["Taipei City"], "locale": "zh-Hant"}
    )
    assert response.status_code == 200
    assert response.json()["Da'an District"] == "大安區"
    assert client.get("/subdivisions/DE").json() == {}
