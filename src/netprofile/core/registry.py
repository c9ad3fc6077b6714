from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Tuple, Type, TypeVar

from .estimator import NetworkEstimator
from .source import RecordSource

T = TypeVar("T")


class RegistryBase(Generic[T]):
    """Lookup table from component id to component class.

    Each subclass owns a separate table. ``id_attribute`` names the class
    attribute used as the key when ``register`` is called without one, and
    ``name_attribute`` the human-readable label shown by ``netprofile list``.
    """

    component: ClassVar[str] = "component"
    id_attribute: ClassVar[Optional[str]] = None
    name_attribute: ClassVar[Optional[str]] = None

    _components: ClassVar[Dict[str, Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._components = {}

    @classmethod
    def register(cls, key: Optional[str] = None) -> Callable[[T], T]:
        def decorator(entry: T) -> T:
            resolved = key if key is not None else cls._declared_id(entry)
            if resolved in cls._components:
                raise ValueError(f"Duplicate {cls.component} id '{resolved}'")
            cls._components[resolved] = entry
            return entry

        return decorator

    @classmethod
    def _declared_id(cls, entry: Any) -> str:
        declared = getattr(entry, cls.id_attribute, None) if cls.id_attribute else None
        if not declared:
            raise TypeError(
                f"Cannot register {entry!r} as a {cls.component} without an explicit id"
            )
        return str(declared)

    @classmethod
    def get(cls, key: str) -> T:
        entry = cls._components.get(key)
        if entry is None:
            known = ", ".join(cls.ids()) or "none"
            raise KeyError(f"Unknown {cls.component} '{key}' (known: {known})")
        return entry

    @classmethod
    def create(cls, key: str, **params: Any) -> Any:
        """Instantiate the component registered under ``key`` with ``params``."""
        entry = cls.get(key)
        if not isinstance(entry, type):
            raise TypeError(f"Registered {cls.component} '{key}' is not a class")
        return entry(**params)

    @classmethod
    def ids(cls) -> Tuple[str, ...]:
        return tuple(sorted(cls._components))

    @classmethod
    def items(cls) -> Tuple[Tuple[str, T], ...]:
        return tuple((key, cls._components[key]) for key in cls.ids())

    @classmethod
    def describe(cls) -> Tuple[Tuple[str, str], ...]:
        """Return ``(id, display name)`` pairs in id order."""
        label = cls.name_attribute
        return tuple(
            (key, str(getattr(entry, label, "")) if label else "") for key, entry in cls.items()
        )

    @classmethod
    def clear(cls) -> None:
        cls._components.clear()


class EstimatorRegistry(RegistryBase[Type["NetworkEstimator"]]):
    """Registry for network estimators."""

    component = "estimator"
    id_attribute = "estimator_id"
    name_attribute = "estimator_name"


class RecordSourceRegistry(RegistryBase[Type["RecordSource"]]):
    """Registry for request-log record sources."""

    component = "record source"
    id_attribute = "source_id"
    name_attribute = "source_name"


__all__ = ["EstimatorRegistry", "RecordSourceRegistry", "RegistryBase"]
