"""Tests for resources/ — paths, bodies, params, and response typing.

Mocks at the api_request level; each test checks the HTTP call a resource
method makes and the object type it returns.
"""

from unittest.mock import patch

import pytest

from superthread_cli.exceptions import CliError, PathValidationError
from superthread_cli.objects import (
    Board,
    Card,
    Checklist,
    ChecklistItem,
    Collection,
    Comment,
    List,
    Note,
    Page,
    Project,
    Space,
    Sprint,
    SuperthreadObject,
    Tag,
    User,
)


@pytest.fixture
def api(client):
    with patch("superthread_cli.api.api_request") as mock_req:
        mock_req.return_value = {}
        yield mock_req


def _call(mock_req):
    """Return (method, path, params, body) of the last request."""
    args, kwargs = mock_req.call_args
    return args[1], args[2], kwargs.get("params"), kwargs.get("body")


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------


class TestPathSafety:
    def test_ids_are_cleaned(self, client, api):
        client.cards.find("ws1", "../c1")
        assert _call(api)[1] == "/ws1/cards/c1"

    def test_workspace_is_cleaned(self, client, api):
        client.notes.list("ws/../1")
        assert _call(api)[1] == "/ws1/notes"

    def test_unusable_id_raises_before_request(self, client, api):
        with pytest.raises(PathValidationError):
            client.boards.find("ws1", "///")
        api.assert_not_called()

    def test_delete_returns_success(self, client, api):
        api.return_value = {"deleted": "c1"}
        result = client.cards.delete("ws1", "c1")
        assert result.to_dict() == {"success": True}
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1")


# ---------------------------------------------------------------------------
# Users, spaces
# ---------------------------------------------------------------------------


class TestUsers:
    def test_me(self, client, api):
        api.return_value = {"user": {"user_id": "u1", "email": "a@b.c"}}
        me = client.users.me()
        assert type(me) is User
        assert me.id == "u1"
        assert _call(api)[:2] == ("GET", "/users/me")

    def test_members(self, client, api):
        api.return_value = {"members": [{"user_id": "u1"}, {"user_id": "u2"}]}
        members = client.users.members("ws1")
        assert _call(api)[1] == "/teams/ws1/members"
        assert [type(m) for m in members] == [User, User]


class TestSpaces:
    def test_list_uses_projects_path(self, client, api):
        api.return_value = {"projects": [{"id": "s1"}]}
        spaces = client.spaces.list("ws1")
        assert _call(api)[1] == "/ws1/projects"
        assert type(spaces.first()) is Space

    def test_find_unwraps_project(self, client, api):
        api.return_value = {"project": {"id": "s1", "title": "Eng"}}
        assert client.spaces.find("ws1", "s1").title == "Eng"

    def test_create(self, client, api):
        api.return_value = {"project": {"id": "s1"}}
        client.spaces.create("ws1", "Eng", description=None, icon="x")
        assert _call(api) == ("POST", "/ws1/projects", None, {"title": "Eng", "icon": "x"})

    def test_add_member(self, client, api):
        client.spaces.add_member("ws1", "s1", "u1")
        assert _call(api)[1:] == ("/ws1/projects/s1/members", None, {"user_id": "u1"})

    def test_remove_member(self, client, api):
        client.spaces.remove_member("ws1", "s1", "m1")
        assert _call(api)[:2] == ("DELETE", "/ws1/projects/s1/members/m1")


# ---------------------------------------------------------------------------
# Boards and lists
# ---------------------------------------------------------------------------


class TestBoards:
    def test_list(self, client, api):
        api.return_value = {"boards": [{"id": "b1"}]}
        boards = client.boards.list("ws1", "s1", archived=False)
        method, path, params, _ = _call(api)
        assert (method, path) == ("GET", "/ws1/boards")
        assert params == {"project_id": "s1", "archived": False}
        assert type(boards[0]) is Board

    def test_find(self, client, api):
        api.return_value = {"board": {"id": "b1", "lists": [{"id": "l1", "cards": []}]}}
        board = client.boards.find("ws1", "b1")
        assert type(board.lists[0]) is List

    def test_create(self, client, api):
        client.boards.create("ws1", "s1", "Sprint board", color="red")
        assert _call(api)[3] == {"title": "Sprint board", "project_id": "s1", "color": "red"}

    def test_duplicate(self, client, api):
        client.boards.duplicate("ws1", "b1", title="Copy")
        assert _call(api) == ("POST", "/ws1/boards/b1/copy", None, {"title": "Copy"})

    def test_create_list(self, client, api):
        api.return_value = {"list": {"id": "l1", "title": "Todo"}}
        lst = client.boards.create_list("ws1", "b1", "Todo", color=None)
        assert _call(api) == ("POST", "/ws1/lists", None, {"board_id": "b1", "title": "Todo"})
        assert type(lst) is List

    def test_update_list(self, client, api):
        client.boards.update_list("ws1", "l1", title="Done")
        assert _call(api) == ("PATCH", "/ws1/lists/l1", None, {"title": "Done"})

    def test_delete_list(self, client, api):
        client.boards.delete_list("ws1", "l1")
        assert _call(api)[:2] == ("DELETE", "/ws1/lists/l1")


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


class TestCards:
    def test_create(self, client, api):
        api.return_value = {"card": {"id": "c1", "title": "T"}}
        card = client.cards.create("ws1", title="T", list_id="l1", board_id="b1", content=None)
        assert _call(api) == (
            "POST", "/ws1/cards", None, {"title": "T", "list_id": "l1", "board_id": "b1"}
        )
        assert type(card) is Card

    def test_create_with_sprint(self, client, api):
        client.cards.create("ws1", title="T", list_id="l1", sprint_id="sp1")
        assert _call(api)[3]["sprint_id"] == "sp1"

    def test_create_requires_board_or_sprint(self, client, api):
        with pytest.raises(CliError, match="board_id or sprint_id"):
            client.cards.create("ws1", title="T", list_id="l1")
        api.assert_not_called()

    def test_find(self, client, api):
        api.return_value = {"card": {"id": "c1", "priority": 1}}
        card = client.cards.find("ws1", "c1")
        assert card.priority_name == "urgent"
        assert _call(api)[:2] == ("GET", "/ws1/cards/c1")

    def test_update_drops_none(self, client, api):
        client.cards.update("ws1", "c1", title="New", priority=None, archived=False)
        assert _call(api) == ("PATCH", "/ws1/cards/c1", None, {"title": "New", "archived": False})

    def test_duplicate(self, client, api):
        client.cards.duplicate("ws1", "c1")
        assert _call(api)[:2] == ("POST", "/ws1/cards/c1/copy")

    def test_assigned(self, client, api):
        api.return_value = {"cards": [{"id": "c1"}], "members": [{"user_id": "u1"}]}
        cards = client.cards.assigned("ws1", "u1", board_id="b1", archived=False)
        method, path, _, body = _call(api)
        assert (method, path) == ("POST", "/ws1/views/preview")
        assert body == {
            "type": "card",
            "card_filters": {
                "include": {"members": ["u1"], "boards": ["b1"]},
                "is_archived": False,
            },
        }
        assert isinstance(cards, Collection)
        assert cards.items_key == "cards"
        assert type(cards[0]) is Card

    def test_add_related(self, client, api):
        client.cards.add_related("ws1", "c1", "c2", "blocks")
        assert _call(api) == (
            "POST",
            "/ws1/cards/c1/linked_cards",
            None,
            {"card_id": "c2", "linked_card_type": "blocks"},
        )

    def test_remove_related(self, client, api):
        client.cards.remove_related("ws1", "c1", "c2")
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1/linked_cards/c2")

    def test_add_member_default_role(self, client, api):
        client.cards.add_member("ws1", "c1", "u1")
        assert _call(api)[3] == {"user_id": "u1", "role": "member"}

    def test_remove_member(self, client, api):
        client.cards.remove_member("ws1", "c1", "u1")
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1/members/u1")

    def test_create_checklist(self, client, api):
        api.return_value = {"id": "cl1", "title": "Steps"}
        checklist = client.cards.create_checklist("ws1", "c1", "Steps")
        assert _call(api)[1:] == ("/ws1/cards/c1/checklists", None, {"title": "Steps"})
        assert type(checklist) is Checklist

    def test_update_checklist(self, client, api):
        client.cards.update_checklist("ws1", "c1", "cl1", "Renamed")
        assert _call(api)[:2] == ("PATCH", "/ws1/cards/c1/checklists/cl1")

    def test_delete_checklist(self, client, api):
        client.cards.delete_checklist("ws1", "c1", "cl1")
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1/checklists/cl1")

    def test_add_checklist_item(self, client, api):
        api.return_value = {"id": "i1", "title": "Do it", "checked": False}
        item = client.cards.add_checklist_item("ws1", "c1", " cl1 ", "Do it")
        assert _call(api)[1:] == (
            "/ws1/cards/c1/checklists/cl1/items",
            None,
            {"title": "Do it", "checklist_id": "cl1", "checked": False},
        )
        assert type(item) is ChecklistItem

    def test_update_checklist_item(self, client, api):
        client.cards.update_checklist_item("ws1", "c1", "cl1", "i1", checked=True)
        assert _call(api) == (
            "PATCH", "/ws1/cards/c1/checklists/cl1/items/i1", None, {"checked": True}
        )

    def test_delete_checklist_item(self, client, api):
        client.cards.delete_checklist_item("ws1", "c1", "cl1", "i1")
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1/checklists/cl1/items/i1")

    def test_tags(self, client, api):
        api.return_value = {"tags": [{"id": "t1", "name": "bug"}]}
        tags = client.cards.tags("ws1", project_id="s1")
        assert _call(api)[1:3] == ("/ws1/tags", {"project_id": "s1"})
        assert type(tags[0]) is Tag

    def test_add_tags_list(self, client, api):
        client.cards.add_tags("ws1", "c1", ["t1", "t2"])
        assert _call(api)[1:] == ("/ws1/cards/c1/tags", None, {"ids": ["t1", "t2"]})

    def test_add_single_tag(self, client, api):
        client.cards.add_tags("ws1", "c1", "t1")
        assert _call(api)[3] == {"id": "t1"}

    def test_remove_tag(self, client, api):
        client.cards.remove_tag("ws1", "c1", "t1")
        assert _call(api)[:2] == ("DELETE", "/ws1/cards/c1/tags/t1")

    def test_empty_response_is_success_object(self, client, api):
        api.return_value = None
        result = client.cards.add_member("ws1", "c1", "u1")
        assert type(result) is SuperthreadObject
        assert result.get("success") is True


# ---------------------------------------------------------------------------
# Comments, pages, notes
# ---------------------------------------------------------------------------


class TestComments:
    def test_create_on_card(self, client, api):
        api.return_value = {"comment": {"id": "m1", "content": "hi"}}
        comment = client.comments.create("ws1", "hi", card_id="c1")
        assert _call(api) == ("POST", "/ws1/comments", None, {"content": "hi", "card_id": "c1"})
        assert type(comment) is Comment

    def test_update(self, client, api):
        client.comments.update("ws1", "m1", content="edited")
        assert _call(api) == ("PATCH", "/ws1/comments/m1", None, {"content": "edited"})

    def test_reply(self, client, api):
        client.comments.reply("ws1", "m1", "thanks")
        assert _call(api) == ("POST", "/ws1/comments/m1/comments", None, {"content": "thanks"})

    def test_replies(self, client, api):
        api.return_value = {"comments": [{"id": "m2"}]}
        replies = client.comments.replies("ws1", "m1")
        assert type(replies[0]) is Comment

    def test_update_and_delete_reply(self, client, api):
        client.comments.update_reply("ws1", "m1", "m2", content="x")
        assert _call(api)[:2] == ("PATCH", "/ws1/comments/m1/comments/m2")
        client.comments.delete_reply("ws1", "m1", "m2")
        assert _call(api)[:2] == ("DELETE", "/ws1/comments/m1/comments/m2")


class TestPages:
    def test_list(self, client, api):
        api.return_value = {"pages": [{"id": "p1"}]}
        pages = client.pages.list("ws1", space_id="s1", archived=True)
        assert _call(api)[2] == {"project_id": "s1", "archived": True}
        assert type(pages[0]) is Page

    def test_create(self, client, api):
        client.pages.create("ws1", "s1", title="Doc")
        assert _call(api)[3] == {"project_id": "s1", "title": "Doc"}

    def test_duplicate(self, client, api):
        client.pages.duplicate("ws1", "p1", "s2")
        assert _call(api) == ("POST", "/ws1/pages/p1/copy", None, {"project_id": "s2"})

    def test_archive(self, client, api):
        client.pages.archive("ws1", "p1")
        assert _call(api) == ("PATCH", "/ws1/pages/p1", None, {"archived": True})


class TestNotes:
    def test_create(self, client, api):
        api.return_value = {"note": {"id": "n1", "title": "Standup"}}
        note = client.notes.create("ws1", "Standup", content="...")
        assert _call(api)[3] == {"title": "Standup", "content": "..."}
        assert type(note) is Note

    def test_find(self, client, api):
        api.return_value = {"note": {"id": "n1"}}
        client.notes.find("ws1", "n1")
        assert _call(api)[:2] == ("GET", "/ws1/notes/n1")


# ---------------------------------------------------------------------------
# Sprints, projects (epics), tags, search
# ---------------------------------------------------------------------------


class TestSprints:
    def test_list(self, client, api):
        api.return_value = {"sprints": [{"id": "sp1", "status": "active"}]}
        sprints = client.sprints.list("ws1", "s1")
        assert _call(api)[1:3] == ("/ws1/sprints", {"project_id": "s1"})
        assert sprints[0].is_active

    def test_find(self, client, api):
        api.return_value = {"sprint": {"id": "sp1"}}
        sprint = client.sprints.find("ws1", "sp1", "s1")
        assert _call(api)[1:3] == ("/ws1/sprints/sp1", {"project_id": "s1"})
        assert type(sprint) is Sprint


class TestProjects:
    def test_list_uses_epics(self, client, api):
        api.return_value = {"epics": [{"id": "e1"}]}
        projects = client.projects.list("ws1")
        assert _call(api)[1] == "/ws1/epics"
        assert type(projects[0]) is Project

    def test_create(self, client, api):
        api.return_value = {"epic": {"id": "e1"}}
        project = client.projects.create("ws1", "Launch", "l1")
        assert _call(api)[3] == {"title": "Launch", "list_id": "l1"}
        assert project.id == "e1"

    def test_add_and_remove_card(self, client, api):
        client.projects.add_card("ws1", "e1", "c1")
        assert _call(api)[:2] == ("POST", "/ws1/epics/e1/cards/c1")
        client.projects.remove_card("ws1", "e1", "c1")
        assert _call(api)[:2] == ("DELETE", "/ws1/epics/e1/cards/c1")


class TestTags:
    def test_create(self, client, api):
        api.return_value = {"tag": {"id": "t1", "name": "bug"}}
        tag = client.tags.create("ws1", "bug", "red")
        assert _call(api)[3] == {"name": "bug", "color": "red"}
        assert type(tag) is Tag

    def test_update(self, client, api):
        client.tags.update("ws1", "t1", color="blue")
        assert _call(api) == ("PATCH", "/ws1/tags/t1", None, {"color": "blue"})


class TestSearch:
    def test_query(self, client, api):
        api.return_value = {"cards": [{"type": "card", "id": "c1"}], "pages": []}
        results = client.search.query("ws1", "login", types=["card", "page"], archived=False)
        method, path, params, _ = _call(api)
        assert (method, path) == ("GET", "/ws1/search")
        assert params == {"q": "login", "types": "card,page", "archived": False}
        assert type(results[0]) is Card

    def test_heterogeneous_results(self, client, api):
        api.return_value = {"results": [{"type": "card"}, {"type": "page"}, {"type": "epic"}]}
        results = client.search.query("ws1", "x")
        assert [type(r).__name__ for r in results] == ["Card", "Page", "SuperthreadObject"]
