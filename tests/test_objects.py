"""Tests for objects/ — generic object access, typed variants, helpers."""

import json
from datetime import datetime, timezone

import pytest

from superthread_cli.objects import (
    Board,
    Card,
    Checklist,
    ChecklistItem,
    Comment,
    LinkedCard,
    List,
    Member,
    Project,
    Space,
    Sprint,
    SuperthreadObject,
    Tag,
    User,
    construct_from,
    to_plain,
)

CARD = {
    "type": "card",
    "id": "c1",
    "title": "Fix login",
    "priority": 2,
    "archived": False,
    "is_watching": True,
    "time_created": 1700000000000,
    "due_date": 1700086400000,
    "members": [{"user_id": "u1", "role": "owner", "assigned_date": 1700000000000}],
    "tags": [{"type": "tag", "id": "t1", "name": "bug", "color": "red"}],
    "checklists": [
        {
            "type": "checklist",
            "id": "cl1",
            "title": "Steps",
            "items": [
                {"id": "i1", "title": "a", "checked": True},
                {"id": "i2", "title": "b", "checked": False},
                {"id": "i3", "title": "c", "checked": True},
            ],
        }
    ],
    "linked_cards": [{"id": "c2", "title": "Other", "linked_card_type": "blocks"}],
    "custom": {"nested": {"type": "user", "user_id": "u9"}},
}


# ---------------------------------------------------------------------------
# construct_from
# ---------------------------------------------------------------------------


class TestConstructFrom:
    def test_dispatches_on_type(self):
        assert type(construct_from({"type": "card", "id": "c1"})) is Card
        assert type(construct_from({"type": "board"})) is Board
        assert type(construct_from({"type": "sprint"})) is Sprint

    def test_unknown_type_falls_back(self):
        obj = construct_from({"type": "automation", "id": "a1"})
        assert type(obj) is SuperthreadObject
        assert obj.get("id") == "a1"

    def test_missing_type_falls_back(self):
        assert type(construct_from({"id": "x"})) is SuperthreadObject

    def test_non_string_type_falls_back(self):
        assert type(construct_from({"type": 7})) is SuperthreadObject

    def test_list_maps_elementwise(self):
        out = construct_from([{"type": "card"}, {"type": "page"}, 3, None])
        assert [type(o).__name__ for o in out[:2]] == ["Card", "Page"]
        assert out[2:] == [3, None]

    def test_scalars_pass_through(self):
        assert construct_from("x") == "x"
        assert construct_from(None) is None

    def test_staticmethod_on_class(self):
        assert type(SuperthreadObject.construct_from({"type": "note"})).__name__ == "Note"


# ---------------------------------------------------------------------------
# SuperthreadObject
# ---------------------------------------------------------------------------


class TestSuperthreadObject:
    def test_missing_field_is_none(self):
        obj = SuperthreadObject({"a": 1})
        assert obj.get("missing") is None
        assert obj["missing"] is None

    def test_question_mark_coerces_to_bool(self):
        obj = SuperthreadObject({"archived": 1, "zero": 0})
        assert obj.get("archived?") is True
        assert obj.get("zero?") is False
        assert obj.get("absent?") is False

    def test_nested_dicts_are_wrapped_on_read(self):
        card = Card(CARD)
        nested = card.get("custom")
        assert isinstance(nested, SuperthreadObject)
        assert type(nested.get("nested")) is User

    def test_nested_lists_are_wrapped(self):
        obj = SuperthreadObject({"things": [{"type": "tag", "name": "x"}, 5]})
        things = obj.get("things")
        assert type(things[0]) is Tag
        assert things[1] == 5

    def test_to_dict_returns_original_payload(self):
        card = Card(CARD)
        card.get("custom")
        card.members
        assert card.to_dict() == CARD

    def test_to_dict_is_a_copy(self):
        card = Card({"id": "c1", "tags": [{"id": "t1"}]})
        card.to_dict()["tags"].append({"id": "t2"})
        assert len(card.to_dict()["tags"]) == 1

    def test_to_json(self):
        assert json.loads(Card({"id": "c1"}).to_json()) == {"id": "c1"}

    def test_set_stores_plain_value(self):
        obj = SuperthreadObject({})
        obj.set("owner", User({"user_id": "u1"}))
        assert obj.to_dict() == {"owner": {"user_id": "u1"}}

    def test_item_assignment(self):
        obj = SuperthreadObject({})
        obj["title"] = "T"
        assert obj.get("title") == "T"

    def test_has_and_contains(self):
        obj = SuperthreadObject({"a": None})
        assert obj.has("a")
        assert "a" in obj
        assert "b" not in obj

    def test_mapping_protocol(self):
        obj = SuperthreadObject({"a": 1, "b": {"type": "tag"}})
        assert obj.keys() == ["a", "b"]
        assert list(obj) == ["a", "b"]
        assert len(obj) == 2
        assert type(dict(obj.items())["b"]) is Tag
        assert obj.values()[0] == 1

    def test_equality(self):
        assert Card({"id": "c1"}) == Card({"id": "c1"})
        assert Card({"id": "c1"}) == SuperthreadObject({"id": "c1"})
        assert Card({"id": "c1"}) == {"id": "c1"}
        assert Card({"id": "c1"}) != Card({"id": "c2"})

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Card({"id": "c1"}))

    def test_repr(self):
        assert repr(Card({"id": "c1"})) == "<Card {'id': 'c1'}>"

    def test_non_dict_input_is_empty(self):
        assert SuperthreadObject("nope").to_dict() == {}

    def test_wraps_other_object(self):
        assert Card(SuperthreadObject({"id": "c1"})).id == "c1"


class TestFields:
    def test_declared_fields_read_through(self):
        card = Card(CARD)
        assert card.id == "c1"
        assert card.title == "Fix login"
        assert card.priority == 2

    def test_missing_declared_field_is_none(self):
        assert Card({}).title is None

    def test_fields_are_read_only(self):
        card = Card({"title": "a"})
        with pytest.raises(AttributeError, match="read-only"):
            card.title = "b"

    def test_field_reflects_set(self):
        card = Card({"title": "a"})
        card.set("title", "b")
        assert card.title == "b"

    def test_fields_listing_includes_mixins(self):
        names = Card.fields()
        assert "title" in names
        assert "archived" in names
        assert "time_created" in names

    def test_undeclared_keys_still_reachable(self):
        assert Card({"x_custom": 1}).get("x_custom") == 1


# ---------------------------------------------------------------------------
# Typed variants
# ---------------------------------------------------------------------------


class TestCard:
    def test_typed_members(self):
        members = Card(CARD).members
        assert type(members[0]) is Member
        assert members[0].user_id == "u1"
        assert members[0].assigned_at == datetime.fromtimestamp(1700000000, tz=timezone.utc)

    def test_typed_tags(self):
        tags = Card(CARD).tags
        assert type(tags[0]) is Tag
        assert str(tags[0]) == "bug"

    def test_linked_cards(self):
        linked = Card(CARD).linked_cards[0]
        assert type(linked) is LinkedCard
        assert linked.relationship == "blocks"
        assert isinstance(linked, Card)

    def test_missing_lists_are_empty(self):
        card = Card({})
        assert card.members == []
        assert card.checklists == []
        assert card.child_cards == []

    def test_flags(self):
        card = Card(CARD)
        assert card.watching is True
        assert card.bookmarked is False
        assert card.is_archived is False

    def test_times(self):
        card = Card(CARD)
        assert card.created_at == datetime.fromtimestamp(1700000000, tz=timezone.utc)
        assert card.due_time == datetime.fromtimestamp(1700086400, tz=timezone.utc)
        assert card.start_time is None

    def test_priority_name(self):
        assert Card({"priority": 1}).priority_name == "urgent"
        assert Card({"priority": 4}).priority_name == "low"
        assert Card({"priority": 9}).priority_name is None
        assert Card({}).priority_name is None


class TestChecklist:
    def test_progress(self):
        checklist = Card(CARD).checklists[0]
        assert type(checklist) is Checklist
        assert checklist.total_count == 3
        assert checklist.completed_count == 2
        assert checklist.progress == 66.7
        assert checklist.is_complete is False

    def test_items_typed(self):
        items = Checklist(CARD["checklists"][0]).checklist_items
        assert all(type(i) is ChecklistItem for i in items)
        assert items[0].is_checked is True

    def test_mapping_items_still_works(self):
        checklist = Checklist({"id": "cl1"})
        assert checklist.items() == [("id", "cl1")]

    def test_empty(self):
        checklist = Checklist({"items": []})
        assert checklist.progress == 0
        assert checklist.is_complete is False

    def test_complete(self):
        checklist = Checklist({"items": [{"checked": True}]})
        assert checklist.progress == 100.0
        assert checklist.is_complete is True


class TestOtherVariants:
    def test_user_id_alias(self):
        assert User({"user_id": "u1"}).id == "u1"
        assert User({"id": "u2"}).id == "u2"

    def test_board_lists(self):
        board = Board({"lists": [{"id": "l1", "cards": [{"id": "c1"}]}]})
        assert type(board.lists[0]) is List
        assert type(board.lists[0].cards[0]) is Card

    def test_sprint_status(self):
        assert Sprint({"status": "active"}).is_active
        assert Sprint({"status": "complete"}).is_complete
        assert Sprint({"status": "planned"}).is_planned
        assert not Sprint({}).is_active

    def test_project_schedule(self):
        project = Project({"start_date": 0, "archived": True})
        assert project.start_time == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert project.is_archived

    def test_space_members(self):
        assert Space({"members": [{"user_id": "u1"}]}).members[0].user_id == "u1"

    def test_comment_replies(self):
        comment = Comment({"id": "m1", "replies": [{"id": "m2", "parent_id": "m1"}]})
        assert comment.is_reply is False
        assert comment.replies[0].is_reply is True

    def test_tag_str_empty(self):
        assert str(Tag({})) == ""


class TestToPlain:
    def test_nested(self):
        value = {"a": [Card({"id": "c1"}), {"b": Tag({"name": "x"})}], "n": 1}
        assert to_plain(value) == {"a": [{"id": "c1"}, {"b": {"name": "x"}}], "n": 1}
