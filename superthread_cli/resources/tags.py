from __future__ import annotations

from typing import Any

from superthread_cli.objects import SuperthreadObject, Tag
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Tags(Resource):
    """Workspace tag definitions. Listing and attaching live on ``Cards``."""

    def create(
        self, workspace_id: str, name: str, color: str, space_id: str | None = None
    ) -> Tag:
        return self._post_object(
            self._ws(workspace_id, "/tags"),
            body=compact_params(name=name, color=color, project_id=space_id),
            object_class=Tag,
            unwrap_key="tag",
        )

    def update(self, workspace_id: str, tag_id: str, **params: Any) -> Tag:
        tag = safe_id("tag_id", tag_id)
        return self._patch_object(
            self._ws(workspace_id, f"/tags/{tag}"),
            body=compact_params(**params),
            object_class=Tag,
            unwrap_key="tag",
        )

    def delete(self, workspace_id: str, tag_id: str) -> SuperthreadObject:
        tag = safe_id("tag_id", tag_id)
        return self._delete(self._ws(workspace_id, f"/tags/{tag}"))
