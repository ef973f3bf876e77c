"""
SuperthreadObject — mapping-backed wrapper for any JSON object from the API.

Values are kept exactly as received. Nested objects and lists are wrapped
lazily on read, so ``to_dict()`` always returns the original payload:

    card = SuperthreadObject.construct_from({"type": "card", "id": "c1"})
    card.get("id")          # "c1"
    card["members"]         # None (absent, never KeyError)
    card.get("archived?")   # False
    card.to_dict()          # {"type": "card", "id": "c1"}

Typed variants (Card, Board, ...) add read-only ``Field`` accessors for the
documented keys; everything else stays reachable by name through ``get``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Iterator

from superthread_cli._utils import ms_to_datetime

if TYPE_CHECKING:
    from superthread_cli.objects._registry import TypeRegistry

DISCRIMINATOR_KEY = "type"


def _default_registry():
    # Deferred: the registry module imports every variant, which import this one.
    from superthread_cli.objects._types import REGISTRY

    return REGISTRY


def construct_from(data: Any, registry: TypeRegistry | None = None) -> Any:
    """Wrap raw API data in the registered object class for its ``type``.

    Lists are mapped element-wise; scalars and None pass through unchanged.
    An explicit *registry* also governs the lazy wrapping of nested values.
    """
    if isinstance(data, list):
        return [construct_from(item, registry) for item in data]
    if isinstance(data, dict):
        table = _default_registry() if registry is None else registry
        obj = table.resolve(data.get(DISCRIMINATOR_KEY))(data)
        if registry is not None and isinstance(obj, SuperthreadObject):
            obj._registry = registry
        return obj
    return data


def to_plain(value: Any) -> Any:
    """Deep-convert wrapped objects/collections back to plain JSON values."""
    if isinstance(value, SuperthreadObject):
        return value.to_dict()
    if hasattr(value, "to_dicts"):
        return value.to_dicts()
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def _wrap(value, registry=None):
    if isinstance(value, (dict, list)):
        return construct_from(value, registry)
    return value


class Field:
    """Read-only accessor for a documented payload key.

    Reads through to the backing mapping, so a missing key yields None.
    """

    def __init__(self, key=None):
        self.key = key

    def __set_name__(self, owner, name):
        self.name = name
        if self.key is None:
            self.key = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.get(self.key)

    def __set__(self, obj, value):
        raise AttributeError(
            f"'{self.name}' is read-only; use .set({self.key!r}, value) instead."
        )


class SuperthreadObject:
    """Generic API object. Base class of every typed variant."""

    OBJECT_NAME: str | None = None
    # Set by construct_from when an explicit registry is used.
    _registry: TypeRegistry | None = None

    def __init__(self, data: Any = None):
        if isinstance(data, SuperthreadObject):
            data = data._data
        self._data = dict(data) if isinstance(data, dict) else {}

    construct_from = staticmethod(construct_from)

    @classmethod
    def fields(cls) -> list[str]:
        """Names of the declared ``Field`` accessors, in declaration order."""
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Field) and name not in names:
                    names.append(name)
        return names

    # --- field access ---

    def get(self, field: str) -> Any:
        """Return the wrapped value for *field*, or None when absent.

        A trailing ``?`` (``"archived?"``) returns the value coerced to bool.
        """
        if isinstance(field, str) and field.endswith("?"):
            return self.flag(field[:-1])
        return _wrap(self._data.get(field), self._registry)

    def set(self, field: str, value: Any) -> None:
        self._data[field] = to_plain(value)

    def has(self, field: str) -> bool:
        return field in self._data

    def flag(self, field: str) -> bool:
        return bool(self._data.get(field))

    def _typed_list(self, field, object_class):
        raw = self._data.get(field)
        if not isinstance(raw, list):
            return []
        return [object_class(item) if isinstance(item, dict) else item for item in raw]

    # --- mapping protocol ---

    def __getitem__(self, field):
        return self.get(field)

    def __setitem__(self, field, value):
        self.set(field, value)

    def __contains__(self, field) -> bool:
        return self.has(field)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    def values(self) -> list[Any]:
        return [_wrap(v, self._registry) for v in self._data.values()]

    def items(self) -> list[tuple[str, Any]]:
        return [(k, _wrap(v, self._registry)) for k, v in self._data.items()]

    # --- conversion ---

    def to_dict(self) -> dict[str, Any]:
        return {k: to_plain(v) for k, v in self._data.items()}

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def __eq__(self, other):
        if isinstance(other, SuperthreadObject):
            return self._data == other._data
        if isinstance(other, dict):
            return self._data == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._data!r}>"


class TimestampsMixin:
    """``time_created`` / ``time_updated`` are milliseconds since the epoch."""

    time_created = Field()
    time_updated = Field()

    @property
    def created_at(self):
        return ms_to_datetime(self.time_created)

    @property
    def updated_at(self):
        return ms_to_datetime(self.time_updated)


class ArchivableMixin:
    archived = Field()

    @property
    def is_archived(self):
        return self.flag("archived")
