"""Tests for objects/_registry.py and the default type table."""

import pytest

from superthread_cli.objects import (
    OBJECT_TYPES,
    REGISTRY,
    Card,
    Collection,
    SuperthreadObject,
    TypeRegistry,
    build_registry,
    construct_from,
)


class _Widget(SuperthreadObject):
    OBJECT_NAME = "widget"


class TestTypeRegistry:
    def test_register_and_resolve(self):
        registry = TypeRegistry(SuperthreadObject)
        registry.register("widget", _Widget)
        assert registry.resolve("widget") is _Widget
        assert "widget" in registry
        assert len(registry) == 1

    def test_unknown_resolves_to_fallback(self):
        registry = TypeRegistry(SuperthreadObject)
        assert registry.resolve("nope") is SuperthreadObject
        assert registry.resolve(None) is SuperthreadObject
        assert registry.resolve(12) is SuperthreadObject

    def test_duplicate_rejected(self):
        registry = TypeRegistry(SuperthreadObject)
        registry.register("widget", _Widget)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("widget", Card)

    @pytest.mark.parametrize("bad", ["", None, 5])
    def test_bad_discriminator_rejected(self, bad):
        with pytest.raises(ValueError):
            TypeRegistry(SuperthreadObject).register(bad, _Widget)

    def test_frozen_rejects_register(self):
        registry = TypeRegistry(SuperthreadObject).freeze()
        assert registry.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            registry.register("widget", _Widget)

    def test_types_returns_copy(self):
        registry = TypeRegistry(SuperthreadObject)
        registry.register("widget", _Widget)
        table = registry.types()
        table["other"] = Card
        assert "other" not in registry

    def test_build_registry_freezes(self):
        registry = build_registry([("widget", _Widget)], fallback=SuperthreadObject)
        assert registry.frozen
        assert registry.fallback is SuperthreadObject
        assert registry.resolve("widget") is _Widget


class TestDefaultRegistry:
    def test_frozen(self):
        assert REGISTRY.frozen

    def test_every_pair_registered(self):
        for discriminator, cls in OBJECT_TYPES:
            assert REGISTRY.resolve(discriminator) is cls
        assert len(REGISTRY) == len(OBJECT_TYPES)

    def test_class_object_names_match(self):
        for discriminator, cls in OBJECT_TYPES:
            assert cls.OBJECT_NAME == discriminator

    def test_custom_registry_in_construct_from(self):
        registry = build_registry([("card", _Widget)], fallback=SuperthreadObject)
        assert type(construct_from({"type": "card"}, registry)) is _Widget
        # the default table is untouched
        assert type(construct_from({"type": "card"})) is Card

    def test_empty_custom_registry_is_honoured(self):
        registry = build_registry([], fallback=_Widget)
        assert len(registry) == 0
        assert type(construct_from({"type": "card"}, registry)) is _Widget

    def test_custom_registry_applies_to_nested_values(self):
        registry = build_registry([], fallback=_Widget)
        raw = {"type": "card", "board": {"type": "board"}, "tags": [{"type": "tag"}]}
        obj = construct_from(raw, registry)
        assert type(obj.get("board")) is _Widget
        assert type(obj["tags"][0]) is _Widget

    def test_custom_registry_in_collection(self):
        registry = build_registry([], fallback=_Widget)
        coll = Collection.from_response({"cards": [{"type": "card"}]}, registry=registry)
        assert type(coll.first()) is _Widget
