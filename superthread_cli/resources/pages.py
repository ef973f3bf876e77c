from __future__ import annotations

from typing import Any

from superthread_cli.objects import Collection, Page, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Pages(Resource):
    def list(
        self,
        workspace_id: str,
        space_id: str | None = None,
        archived: bool | None = None,
        updated_recently: bool | None = None,
    ) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/pages"),
            params=compact_params(
                project_id=space_id, archived=archived, updated_recently=updated_recently
            ),
            item_class=Page,
            items_key="pages",
        )

    def find(self, workspace_id: str, page_id: str) -> Page:
        page = safe_id("page_id", page_id)
        return self._get_object(
            self._ws(workspace_id, f"/pages/{page}"), object_class=Page, unwrap_key="page"
        )

    def create(self, workspace_id: str, space_id: str, **params: Any) -> Page:
        return self._post_object(
            self._ws(workspace_id, "/pages"),
            body=compact_params(project_id=space_id, **params),
            object_class=Page,
            unwrap_key="page",
        )

    def update(self, workspace_id: str, page_id: str, **params: Any) -> Page:
        page = safe_id("page_id", page_id)
        return self._patch_object(
            self._ws(workspace_id, f"/pages/{page}"),
            body=compact_params(**params),
            object_class=Page,
            unwrap_key="page",
        )

    def duplicate(self, workspace_id: str, page_id: str, space_id: str, **params: Any) -> Page:
        page = safe_id("page_id", page_id)
        return self._post_object(
            self._ws(workspace_id, f"/pages/{page}/copy"),
            body=compact_params(project_id=space_id, **params),
            object_class=Page,
            unwrap_key="page",
        )

    def archive(self, workspace_id: str, page_id: str) -> Page:
        return self.update(workspace_id, page_id, archived=True)

    def delete(self, workspace_id: str, page_id: str) -> SuperthreadObject:
        page = safe_id("page_id", page_id)
        return self._delete(self._ws(workspace_id, f"/pages/{page}"))
