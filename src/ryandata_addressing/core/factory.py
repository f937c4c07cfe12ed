"""Generic plugin factory base class.

Provides a registry mapping an identifier to an implementation class.
Subclasses specify the protocol type, default identifier, and how their
built-in implementations get registered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping identifiers to implementation classes
        - _default_type: Identifier used when none is given
        - _entity_name: Human-readable name for error messages (e.g. "formatter")
        - _ensure_defaults_registered(): Lazily registers built-in implementations

    Example subclass:
        class FormatterFactory(PluginFactory[FormatterProtocol]):
            _registry: ClassVar[dict[str, type[FormatterProtocol]]] = {}
            _default_type: ClassVar[str] = "default"
            _entity_name: ClassVar[str] = "formatter"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "default" not in cls._registry:
                    from ... import DefaultFormatter
                    cls._registry["default"] = DefaultFormatter
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Register built-in implementations if they are missing."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation under an identifier."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def get_class(cls, name: str | None = None) -> type[T]:
        """Look up the implementation class for an identifier.

        Args:
            name: Identifier. If None, uses the default identifier.

        Returns:
            Registered implementation class.

        Raises:
            ValueError: If the identifier is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls._default_type
        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
            )
        return cls._registry[type_name]

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Identifier of the implementation. If None, uses the default.
            **kwargs: Arguments passed to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the identifier is not registered.
        """
        return cls.get_class(name)(**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
