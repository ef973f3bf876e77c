from __future__ import annotations

from typing import Any

from superthread_cli.objects import Board, Collection, List, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Boards(Resource):
    """Boards and their lists (columns). ``space_id`` maps to the API's ``project_id``."""

    def list(
        self,
        workspace_id: str,
        space_id: str,
        bookmarked: bool | None = None,
        archived: bool | None = None,
    ) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/boards"),
            params=compact_params(project_id=space_id, bookmarked=bookmarked, archived=archived),
            item_class=Board,
            items_key="boards",
        )

    def find(self, workspace_id: str, board_id: str) -> Board:
        board = safe_id("board_id", board_id)
        return self._get_object(
            self._ws(workspace_id, f"/boards/{board}"), object_class=Board, unwrap_key="board"
        )

    def create(self, workspace_id: str, space_id: str, title: str, **params: Any) -> Board:
        return self._post_object(
            self._ws(workspace_id, "/boards"),
            body=compact_params(title=title, project_id=space_id, **params),
            object_class=Board,
            unwrap_key="board",
        )

    def update(self, workspace_id: str, board_id: str, **params: Any) -> Board:
        board = safe_id("board_id", board_id)
        return self._patch_object(
            self._ws(workspace_id, f"/boards/{board}"),
            body=compact_params(**params),
            object_class=Board,
            unwrap_key="board",
        )

    def duplicate(
        self,
        workspace_id: str,
        board_id: str,
        title: str | None = None,
        space_id: str | None = None,
    ) -> Board:
        board = safe_id("board_id", board_id)
        return self._post_object(
            self._ws(workspace_id, f"/boards/{board}/copy"),
            body=compact_params(title=title, project_id=space_id),
            object_class=Board,
            unwrap_key="board",
        )

    def delete(self, workspace_id: str, board_id: str) -> SuperthreadObject:
        board = safe_id("board_id", board_id)
        return self._delete(self._ws(workspace_id, f"/boards/{board}"))

    # --- lists ---

    def create_list(self, workspace_id: str, board_id: str, title: str, **params: Any) -> List:
        return self._post_object(
            self._ws(workspace_id, "/lists"),
            body=compact_params(board_id=board_id, title=title, **params),
            object_class=List,
            unwrap_key="list",
        )

    def update_list(self, workspace_id: str, list_id: str, **params: Any) -> List:
        lst = safe_id("list_id", list_id)
        return self._patch_object(
            self._ws(workspace_id, f"/lists/{lst}"),
            body=compact_params(**params),
            object_class=List,
            unwrap_key="list",
        )

    def delete_list(self, workspace_id: str, list_id: str) -> SuperthreadObject:
        lst = safe_id("list_id", list_id)
        return self._delete(self._ws(workspace_id, f"/lists/{lst}"))
