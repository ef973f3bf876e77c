"""Discriminator → object class table.

The table is filled once from a static list (see ``_types.OBJECT_TYPES``)
and frozen before any response is converted.
"""

from __future__ import annotations


class TypeRegistry:
    """Maps the API ``type`` field to an object class.

    Unknown or missing discriminators resolve to the fallback class, so
    conversion never fails on a type the SDK doesn't know about.
    """

    def __init__(self, fallback: type):
        self._types: dict[str, type] = {}
        self._fallback = fallback
        self._frozen = False

    @property
    def fallback(self) -> type:
        return self._fallback

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, discriminator: str, object_class: type) -> None:
        if self._frozen:
            raise RuntimeError(
                f"Cannot register '{discriminator}': type registry is frozen."
            )
        if not isinstance(discriminator, str) or not discriminator:
            raise ValueError("Discriminator must be a non-empty string.")
        if discriminator in self._types:
            raise ValueError(f"Discriminator '{discriminator}' is already registered.")
        self._types[discriminator] = object_class

    def freeze(self) -> TypeRegistry:
        self._frozen = True
        return self

    def resolve(self, discriminator) -> type:
        if not isinstance(discriminator, str):
            return self._fallback
        return self._types.get(discriminator, self._fallback)

    def types(self) -> dict[str, type]:
        """Return a copy of the registered table."""
        return dict(self._types)

    def __contains__(self, discriminator) -> bool:
        return discriminator in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        names = ", ".join(sorted(self._types))
        return f"<TypeRegistry [{names}]{' frozen' if self._frozen else ''}>"


def build_registry(pairs, fallback: type) -> TypeRegistry:
    """Build and freeze a registry from (discriminator, class) pairs."""
    registry = TypeRegistry(fallback)
    for discriminator, object_class in pairs:
        registry.register(discriminator, object_class)
    return registry.freeze()
