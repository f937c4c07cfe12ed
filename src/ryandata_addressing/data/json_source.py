from __future__ import annotations

import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, Union

from ryandata_addressing.data.constants import DATA_DIR_ENV_VAR, DATA_PACKAGE

logger = logging.getLogger(__name__)


class JsonDataSource:
    """Reads reference data files stored as JSON.

    By default, reads the files bundled with the package, but can be
    pointed at a directory with the same layout (``countries.json``,
    ``address_formats.json``, ``subdivisions/<CC>.json``).
    """

    def __init__(self, data_dir: Union[str, Path] | None = None) -> None:
        """Initialize the JSON data source.

        Args:
            data_dir: Directory to read from. If None, falls back to the
                RYANDATA_ADDRESSING_DATA_DIR environment variable, then to
                the bundled data.
        """
        configured = data_dir or os.getenv(DATA_DIR_ENV_VAR)
        self._data_dir = Path(configured) if configured else None

    @property
    def data_dir(self) -> Path | None:
        return self._data_dir

    def _resource(self, *parts: str) -> Any:
        if self._data_dir is not None:
            return self._data_dir.joinpath(*parts)
        return resources.files(DATA_PACKAGE).joinpath(*parts)

    def read(self, *parts: str) -> Any | None:
        """Read and decode a JSON file.

        Args:
            *parts: Path components relative to the data directory,
                e.g. ``("subdivisions", "US.json")``.

        Returns:
            Decoded JSON document, or None if the file does not exist.

        Raises:
            json.JSONDecodeError: If the file exists but is not valid JSON.
        """
        resource = self._resource(*parts)
        if not resource.is_file():
            logger.debug("Reference data file not found: %s", "/".join(parts))
            return None

        with resource.open("r", encoding="utf-8") as f:
            document = json.load(f)
        logger.debug("Loaded reference data file: %s", "/".join(parts))
        return document
