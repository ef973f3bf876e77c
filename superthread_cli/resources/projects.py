from __future__ import annotations

from typing import Any

from superthread_cli.objects import Collection, Project, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Projects(Resource):
    """Roadmap projects. The API calls them epics: paths are ``/epics``, key ``epic``."""

    def list(self, workspace_id: str) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/epics"), item_class=Project, items_key="epics"
        )

    def find(self, workspace_id: str, project_id: str) -> Project:
        proj = safe_id("project_id", project_id)
        return self._get_object(
            self._ws(workspace_id, f"/epics/{proj}"), object_class=Project, unwrap_key="epic"
        )

    def create(self, workspace_id: str, title: str, list_id: str, **params: Any) -> Project:
        return self._post_object(
            self._ws(workspace_id, "/epics"),
            body=compact_params(title=title, list_id=list_id, **params),
            object_class=Project,
            unwrap_key="epic",
        )

    def update(self, workspace_id: str, project_id: str, **params: Any) -> Project:
        proj = safe_id("project_id", project_id)
        return self._patch_object(
            self._ws(workspace_id, f"/epics/{proj}"),
            body=compact_params(**params),
            object_class=Project,
            unwrap_key="epic",
        )

    def delete(self, workspace_id: str, project_id: str) -> SuperthreadObject:
        proj = safe_id("project_id", project_id)
        return self._delete(self._ws(workspace_id, f"/epics/{proj}"))

    def add_card(self, workspace_id: str, project_id: str, card_id: str) -> SuperthreadObject:
        proj = safe_id("project_id", project_id)
        card = safe_id("card_id", card_id)
        return self._post_object(self._ws(workspace_id, f"/epics/{proj}/cards/{card}"))

    def remove_card(self, workspace_id: str, project_id: str, card_id: str) -> SuperthreadObject:
        proj = safe_id("project_id", project_id)
        card = safe_id("card_id", card_id)
        return self._delete(self._ws(workspace_id, f"/epics/{proj}/cards/{card}"))
