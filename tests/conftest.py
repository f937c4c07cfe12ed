"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_addressing.data import (
    JsonAddressFormatRepository,
    JsonCountryRepository,
    JsonSubdivisionRepository,
)
from ryandata_addressing.formatter import DefaultFormatter

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(scope="session")
def country_repository() -> JsonCountryRepository:
    return JsonCountryRepository()


@pytest.fixture(scope="session")
def subdivision_repository() -> JsonSubdivisionRepository:
    return JsonSubdivisionRepository()


@pytest.fixture(scope="session")
def address_format_repository() -> JsonAddressFormatRepository:
    return JsonAddressFormatRepository()


@pytest.fixture
def formatter(
    address_format_repository: JsonAddressFormatRepository,
    country_repository: JsonCountryRepository,
    subdivision_repository: JsonSubdivisionRepository,
) -> DefaultFormatter:
    """A DefaultFormatter with an explicit "en" locale."""
    return DefaultFormatter(
        address_format_repository,
        country_repository,
        subdivision_repository,
        locale="en",
    )
