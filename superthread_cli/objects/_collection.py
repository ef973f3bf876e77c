"""
Collection — uniform view over list-style API responses.

The API returns lists under different envelope keys (``{"cards": [...]}``,
``{"boards": [...], "cursor": "x"}``) or as a bare array. Collection finds
the items, wraps them, and keeps everything else as metadata.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from superthread_cli.objects._base import construct_from

if TYPE_CHECKING:
    from superthread_cli.objects._registry import TypeRegistry

# First key holding a list wins.
ITEMS_KEYS = (
    "items",
    "cards",
    "boards",
    "lists",
    "users",
    "projects",
    "spaces",
    "sprints",
    "pages",
    "notes",
    "comments",
    "tags",
    "members",
    "results",
    "data",
)


def _detect_items_key(data):
    for key in ITEMS_KEYS:
        if isinstance(data.get(key), list):
            return key
    for key, value in data.items():
        if isinstance(value, list):
            return key
    return None


class Collection:
    """Ordered wrapped items plus the response envelope minus the items key."""

    def __init__(
        self,
        data: Any = None,
        items_key: str | None = None,
        item_class: type | None = None,
        registry: TypeRegistry | None = None,
    ):
        if isinstance(data, list):
            data, items_key = {"items": data}, "items"
        self._data = dict(data) if isinstance(data, dict) else {}
        self._item_class = item_class
        self._registry = registry
        self.items_key = items_key if items_key is not None else _detect_items_key(self._data)
        raw_items = self._data.get(self.items_key) if self.items_key is not None else None
        if not isinstance(raw_items, list):
            raw_items = []
        self.items: list[Any] = [self._wrap_item(item) for item in raw_items]

    @classmethod
    def from_response(
        cls,
        raw: Any,
        items_key: str | None = None,
        item_class: type | None = None,
        registry: TypeRegistry | None = None,
    ) -> Collection:
        return cls(raw, items_key=items_key, item_class=item_class, registry=registry)

    def _wrap_item(self, item):
        if not isinstance(item, dict):
            return item
        if self._item_class is not None:
            return self._item_class(item)
        return construct_from(item, self._registry)

    # --- sequence protocol ---

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def count(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def first(self) -> Any:
        return self.items[0] if self.items else None

    def last(self) -> Any:
        return self.items[-1] if self.items else None

    # --- conversion ---

    def metadata(self) -> dict[str, Any]:
        return {k: v for k, v in self._data.items() if k != self.items_key}

    def to_list(self) -> list[Any]:
        return list(self.items)

    def to_dicts(self) -> list[Any]:
        return [item.to_dict() if hasattr(item, "to_dict") else item for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Items as plain dicts plus metadata, keyed as received."""
        result = self.metadata()
        result[self.items_key or "items"] = self.to_dicts()
        return result

    def __repr__(self) -> str:
        return f"<Collection {self.items_key}={len(self.items)} items>"
