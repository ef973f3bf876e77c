"""Cards: CRUD, members, links, checklists, and tags.

Card content cannot be changed through ``update``; the API edits content
over its collaboration socket only.
"""

from __future__ import annotations

from typing import Any

from superthread_cli.exceptions import CliError
from superthread_cli.objects import (
    Card,
    Checklist,
    ChecklistItem,
    Collection,
    SuperthreadObject,
    Tag,
)
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Cards(Resource):
    def create(self, workspace_id: str, **params: Any) -> Card:
        """Create a card. Requires ``title``, ``list_id`` and ``board_id`` or ``sprint_id``."""
        if not (params.get("board_id") or params.get("sprint_id")):
            raise CliError("[ERROR] Either board_id or sprint_id must be provided.")
        return self._post_object(
            self._ws(workspace_id, "/cards"),
            body=compact_params(**params),
            object_class=Card,
            unwrap_key="card",
        )

    def find(self, workspace_id: str, card_id: str) -> Card:
        card = safe_id("card_id", card_id)
        return self._get_object(
            self._ws(workspace_id, f"/cards/{card}"), object_class=Card, unwrap_key="card"
        )

    def update(self, workspace_id: str, card_id: str, **params: Any) -> Card:
        card = safe_id("card_id", card_id)
        return self._patch_object(
            self._ws(workspace_id, f"/cards/{card}"),
            body=compact_params(**params),
            object_class=Card,
            unwrap_key="card",
        )

    def delete(self, workspace_id: str, card_id: str) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        return self._delete(self._ws(workspace_id, f"/cards/{card}"))

    def duplicate(self, workspace_id: str, card_id: str, **params: Any) -> Card:
        card = safe_id("card_id", card_id)
        return self._post_object(
            self._ws(workspace_id, f"/cards/{card}/copy"),
            body=compact_params(**params),
            object_class=Card,
            unwrap_key="card",
        )

    def assigned(
        self,
        workspace_id: str,
        user_id: str,
        archived: bool | None = None,
        board_id: str | None = None,
        list_id: str | None = None,
        project_id: str | None = None,
    ) -> Collection:
        """Cards assigned to *user_id*, via the view preview endpoint."""
        include = {"members": [user_id]}
        if board_id:
            include["boards"] = [board_id]
        if list_id:
            include["lists"] = [list_id]
        if project_id:
            include["projects"] = [project_id]
        card_filters: dict[str, Any] = {"include": include}
        if archived is not None:
            card_filters["is_archived"] = archived
        return self._post_collection(
            self._ws(workspace_id, "/views/preview"),
            body={"type": "card", "card_filters": card_filters},
            item_class=Card,
            items_key="cards",
        )

    # -------------------------------------------------------------------
    # Links and members
    # -------------------------------------------------------------------

    def add_related(
        self, workspace_id: str, card_id: str, related_card_id: str, relation_type: str
    ) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        return self._post_object(
            self._ws(workspace_id, f"/cards/{card}/linked_cards"),
            body={"card_id": related_card_id, "linked_card_type": relation_type},
        )

    def remove_related(
        self, workspace_id: str, card_id: str, linked_card_id: str
    ) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        linked = safe_id("linked_card_id", linked_card_id)
        return self._delete(self._ws(workspace_id, f"/cards/{card}/linked_cards/{linked}"))

    def add_member(
        self, workspace_id: str, card_id: str, user_id: str, role: str = "member"
    ) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        return self._post_object(
            self._ws(workspace_id, f"/cards/{card}/members"),
            body={"user_id": user_id, "role": role},
        )

    def remove_member(self, workspace_id: str, card_id: str, user_id: str) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        user = safe_id("user_id", user_id)
        return self._delete(self._ws(workspace_id, f"/cards/{card}/members/{user}"))

    # -------------------------------------------------------------------
    # Checklists
    # -------------------------------------------------------------------

    def create_checklist(self, workspace_id: str, card_id: str, title: str) -> Checklist:
        card = safe_id("card_id", card_id)
        return self._post_object(
            self._ws(workspace_id, f"/cards/{card}/checklists"),
            body={"title": title},
            object_class=Checklist,
        )

    def update_checklist(
        self, workspace_id: str, card_id: str, checklist_id: str, title: str
    ) -> Checklist:
        card = safe_id("card_id", card_id)
        checklist = safe_id("checklist_id", checklist_id)
        return self._patch_object(
            self._ws(workspace_id, f"/cards/{card}/checklists/{checklist}"),
            body={"title": title},
            object_class=Checklist,
        )

    def delete_checklist(
        self, workspace_id: str, card_id: str, checklist_id: str
    ) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        checklist = safe_id("checklist_id", checklist_id)
        return self._delete(self._ws(workspace_id, f"/cards/{card}/checklists/{checklist}"))

    def add_checklist_item(
        self,
        workspace_id: str,
        card_id: str,
        checklist_id: str,
        title: str,
        checked: bool = False,
    ) -> ChecklistItem:
        card = safe_id("card_id", card_id)
        checklist = safe_id("checklist_id", checklist_id)
        return self._post_object(
            self._ws(workspace_id, f"/cards/{card}/checklists/{checklist}/items"),
            body={"title": title, "checklist_id": checklist, "checked": checked},
            object_class=ChecklistItem,
        )

    def update_checklist_item(
        self, workspace_id: str, card_id: str, checklist_id: str, item_id: str, **params: Any
    ) -> ChecklistItem:
        card = safe_id("card_id", card_id)
        checklist = safe_id("checklist_id", checklist_id)
        item = safe_id("item_id", item_id)
        return self._patch_object(
            self._ws(workspace_id, f"/cards/{card}/checklists/{checklist}/items/{item}"),
            body=compact_params(**params),
            object_class=ChecklistItem,
        )

    def delete_checklist_item(
        self, workspace_id: str, card_id: str, checklist_id: str, item_id: str
    ) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        checklist = safe_id("checklist_id", checklist_id)
        item = safe_id("item_id", item_id)
        return self._delete(
            self._ws(workspace_id, f"/cards/{card}/checklists/{checklist}/items/{item}")
        )

    # -------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------

    def tags(
        self, workspace_id: str, project_id: str | None = None, all: bool | None = None
    ) -> Collection:
        """Tags available in the workspace, optionally for one space."""
        return self._get_collection(
            self._ws(workspace_id, "/tags"),
            params=compact_params(project_id=project_id, all=all),
            item_class=Tag,
            items_key="tags",
        )

    def add_tags(
        self, workspace_id: str, card_id: str, tag_ids: str | list[str]
    ) -> SuperthreadObject:
        """Attach one tag id (str) or several (list)."""
        card = safe_id("card_id", card_id)
        body = {"ids": list(tag_ids)} if isinstance(tag_ids, (list, tuple)) else {"id": tag_ids}
        return self._post_object(self._ws(workspace_id, f"/cards/{card}/tags"), body=body)

    def remove_tag(self, workspace_id: str, card_id: str, tag_id: str) -> SuperthreadObject:
        card = safe_id("card_id", card_id)
        tag = safe_id("tag_id", tag_id)
        return self._delete(self._ws(workspace_id, f"/cards/{card}/tags/{tag}"))
