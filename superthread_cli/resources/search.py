from __future__ import annotations

from superthread_cli.objects import Collection
from superthread_cli.resources._base import Resource, compact_params


class Search(Resource):
    def query(
        self,
        workspace_id: str,
        query: str,
        field: str | None = None,
        types: list[str] | None = None,
        space_id: str | None = None,
        archived: bool | None = None,
        grouped: bool | None = None,
    ) -> Collection:
        """Full-text search. *types* is a list like ``["card", "page"]``.

        Results are heterogeneous, so items are dispatched on their ``type``.
        """
        params = compact_params(
            q=query,
            field=field,
            types=",".join(types) if types else None,
            project_id=space_id,
            archived=archived,
            grouped=grouped,
        )
        return self._get_collection(self._ws(workspace_id, "/search"), params=params)
