from __future__ import annotations

from typing import Any

from superthread_cli.objects import Collection, Space, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Spaces(Resource):
    """Spaces. The API calls them projects: paths are ``/projects``, key ``project``."""

    def list(self, workspace_id: str) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/projects"), item_class=Space, items_key="projects"
        )

    def find(self, workspace_id: str, space_id: str) -> Space:
        space = safe_id("space_id", space_id)
        return self._get_object(
            self._ws(workspace_id, f"/projects/{space}"), object_class=Space, unwrap_key="project"
        )

    def create(self, workspace_id: str, title: str, **params: Any) -> Space:
        return self._post_object(
            self._ws(workspace_id, "/projects"),
            body=compact_params(title=title, **params),
            object_class=Space,
            unwrap_key="project",
        )

    def update(self, workspace_id: str, space_id: str, **params: Any) -> Space:
        space = safe_id("space_id", space_id)
        return self._patch_object(
            self._ws(workspace_id, f"/projects/{space}"),
            body=compact_params(**params),
            object_class=Space,
            unwrap_key="project",
        )

    def delete(self, workspace_id: str, space_id: str) -> SuperthreadObject:
        space = safe_id("space_id", space_id)
        return self._delete(self._ws(workspace_id, f"/projects/{space}"))

    def add_member(
        self, workspace_id: str, space_id: str, user_id: str, role: str | None = None
    ) -> SuperthreadObject:
        space = safe_id("space_id", space_id)
        return self._post_object(
            self._ws(workspace_id, f"/projects/{space}/members"),
            body=compact_params(user_id=user_id, role=role),
        )

    def remove_member(
        self, workspace_id: str, space_id: str, member_id: str
    ) -> SuperthreadObject:
        space = safe_id("space_id", space_id)
        member = safe_id("member_id", member_id)
        return self._delete(self._ws(workspace_id, f"/projects/{space}/members/{member}"))
