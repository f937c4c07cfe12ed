"""Centralized constants for bundled reference data.

File names, the data package location and environment variable names are
defined here so repositories and the CLI agree on them.
"""

from __future__ import annotations

# Package holding the bundled JSON files
DATA_PACKAGE = "ryandata_addressing.data"

COUNTRIES_FILE = "countries.json"
ADDRESS_FORMATS_FILE = "address_formats.json"
SUBDIVISIONS_DIR = "subdivisions"

# Address format used for countries without reference data
GENERIC_COUNTRY_CODE = "ZZ"

# Environment overrides
DATA_DIR_ENV_VAR = "RYANDATA_ADDRESSING_DATA_DIR"
LOCALE_ENV_VAR = "RYANDATA_ADDRESSING_LOCALE"
