from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ryandata_addressing.data.json_source import JsonDataSource


class BaseRepository(ABC):
    """Abstract base class for reference data repositories.

    Holds the data source and the lazy-loading flag shared by the country,
    subdivision and address format repositories. Data is read on first
    access and treated as read-only afterwards.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] | None = None,
        source: JsonDataSource | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            data_dir: Directory with reference data. If None, uses the
                bundled files (or RYANDATA_ADDRESSING_DATA_DIR when set).
            source: Pre-built data source; takes precedence over data_dir.
        """
        self._source = source or JsonDataSource(data_dir)
        self._loaded = False

    @property
    def source(self) -> JsonDataSource:
        return self._source

    @abstractmethod
    def _load_data(self) -> None:
        """Load data from the underlying source into internal structures."""
        ...

    def _ensure_loaded(self) -> None:
        """Ensure data is loaded before access."""
        if not self._loaded:
            self._load_data()
            self._loaded = True
