from __future__ import annotations

from superthread_cli.objects import Collection, Sprint
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Sprints(Resource):
    def list(self, workspace_id: str, space_id: str) -> Collection:
        return self._get_collection(
            self._ws(workspace_id, "/sprints"),
            params=compact_params(project_id=space_id),
            item_class=Sprint,
            items_key="sprints",
        )

    def find(self, workspace_id: str, sprint_id: str, space_id: str) -> Sprint:
        sprint = safe_id("sprint_id", sprint_id)
        return self._get_object(
            self._ws(workspace_id, f"/sprints/{sprint}"),
            params=compact_params(project_id=space_id),
            object_class=Sprint,
            unwrap_key="sprint",
        )
