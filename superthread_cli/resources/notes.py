from __future__ import annotations

from typing import Any

from superthread_cli.objects import Collection, Note, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Notes(Resource):
    def list(self, workspace_id: str) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/notes"), item_class=Note, items_key="notes"
        )

    def find(self, workspace_id: str, note_id: str) -> Note:
        note = safe_id("note_id", note_id)
        return self._get_object(
            self._ws(workspace_id, f"/notes/{note}"), object_class=Note, unwrap_key="note"
        )

    def create(self, workspace_id: str, title: str, **params: Any) -> Note:
        return self._post_object(
            self._ws(workspace_id, "/notes"),
            body=compact_params(title=title, **params),
            object_class=Note,
            unwrap_key="note",
        )

    def delete(self, workspace_id: str, note_id: str) -> SuperthreadObject:
        note = safe_id("note_id", note_id)
        return self._delete(self._ws(workspace_id, f"/notes/{note}"))
