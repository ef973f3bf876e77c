from __future__ import annotations

from typing import Any

from superthread_cli.objects import Collection, Comment, SuperthreadObject
from superthread_cli.resources._base import Resource, compact_params, safe_id


class Comments(Resource):
    """Comments on cards or pages, and threaded replies."""

    def create(
        self,
        workspace_id: str,
        content: str,
        card_id: str | None = None,
        page_id: str | None = None,
        **params: Any,
    ) -> Comment:
        return self._post_object(
            self._ws(workspace_id, "/comments"),
            body=compact_params(content=content, card_id=card_id, page_id=page_id, **params),
            object_class=Comment,
            unwrap_key="comment",
        )

    def find(self, workspace_id: str, comment_id: str) -> Comment:
        comment = safe_id("comment_id", comment_id)
        return self._get_object(
            self._ws(workspace_id, f"/comments/{comment}"),
            object_class=Comment,
            unwrap_key="comment",
        )

    def update(self, workspace_id: str, comment_id: str, **params: Any) -> Comment:
        comment = safe_id("comment_id", comment_id)
        return self._patch_object(
            self._ws(workspace_id, f"/comments/{comment}"),
            body=compact_params(**params),
            object_class=Comment,
            unwrap_key="comment",
        )

    def delete(self, workspace_id: str, comment_id: str) -> SuperthreadObject:
        comment = safe_id("comment_id", comment_id)
        return self._delete(self._ws(workspace_id, f"/comments/{comment}"))

    def reply(self, workspace_id: str, comment_id: str, content: str, **params: Any) -> Comment:
        comment = safe_id("comment_id", comment_id)
        return self._post_object(
            self._ws(workspace_id, f"/comments/{comment}/comments"),
            body=compact_params(content=content, **params),
            object_class=Comment,
            unwrap_key="comment",
        )

    def replies(self, workspace_id: str, comment_id: str) -> Collection:
        comment = safe_id("comment_id", comment_id)
        return self._get_collection(
            self._ws(workspace_id, f"/comments/{comment}/comments"),
            item_class=Comment,
            items_key="comments",
        )

    def update_reply(
        self, workspace_id: str, comment_id: str, reply_id: str, **params: Any
    ) -> Comment:
        comment = safe_id("comment_id", comment_id)
        reply = safe_id("reply_id", reply_id)
        return self._patch_object(
            self._ws(workspace_id, f"/comments/{comment}/comments/{reply}"),
            body=compact_params(**params),
            object_class=Comment,
            unwrap_key="comment",
        )

    def delete_reply(self, workspace_id: str, comment_id: str, reply_id: str) -> SuperthreadObject:
        comment = safe_id("comment_id", comment_id)
        reply = safe_id("reply_id", reply_id)
        return self._delete(self._ws(workspace_id, f"/comments/{comment}/comments/{reply}"))
