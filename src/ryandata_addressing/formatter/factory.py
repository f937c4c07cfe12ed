from __future__ import annotations

from typing import Any, ClassVar

from ryandata_addressing.core.factory import PluginFactory
from ryandata_addressing.protocols import FormatterProtocol


class FormatterFactory(PluginFactory[FormatterProtocol]):
    """Factory for creating formatter instances.

    Example:
        >>> formatter = FormatterFactory.create("default", locale="zh-Hant")
        >>> label = FormatterFactory.create("postal_label", options={"origin_country": "US"})
    """

    _registry: ClassVar[dict[str, type[FormatterProtocol]]] = {}
    _default_type: ClassVar[str] = "default"
    _entity_name: ClassVar[str] = "formatter"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure built-in formatters are registered."""
        if "default" not in cls._registry:
            from ryandata_addressing.formatter.default import DefaultFormatter

            cls._registry["default"] = DefaultFormatter
        if "postal_label" not in cls._registry:
            from ryandata_addressing.formatter.postal_label import PostalLabelFormatter

            cls._registry["postal_label"] = PostalLabelFormatter

    @classmethod
    def create(  # type: ignore[override]
        cls,
        formatter_type: str | None = None,
        **kwargs: Any,
    ) -> FormatterProtocol:
        """Create a formatter instance.

        Args:
            formatter_type: Identifier of the formatter. Defaults to "default".
            **kwargs: Arguments passed to the formatter constructor.

        Returns:
            Formatter instance.

        Raises:
            ValueError: If the formatter type is not registered.
        """
        return super().create(formatter_type, **kwargs)
