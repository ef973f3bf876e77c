"""
Shared plumbing for resource classes.

Every identifier interpolated into a path goes through ``safe_id`` first.
"""

from superthread_cli._utils import compact_params
from superthread_cli.api import safe_id
from superthread_cli.convert import success_object


class Resource:
    def __init__(self, client):
        self._client = client

    def _ws(self, workspace_id, path=""):
        return f"/{safe_id('workspace_id', workspace_id)}{path}"

    # --- raw ---

    def _http_delete(self, path):
        return self._client.request("DELETE", path)

    # --- objects ---

    def _get_object(self, path, params=None, object_class=None, unwrap_key=None):
        return self._client.request_object(
            "GET", path, params=params, object_class=object_class, unwrap_key=unwrap_key
        )

    def _post_object(self, path, body=None, object_class=None, unwrap_key=None):
        return self._client.request_object(
            "POST", path, body=body, object_class=object_class, unwrap_key=unwrap_key
        )

    def _patch_object(self, path, body=None, object_class=None, unwrap_key=None):
        return self._client.request_object(
            "PATCH", path, body=body, object_class=object_class, unwrap_key=unwrap_key
        )

    def _delete(self, path):
        """Issue a DELETE and return ``{"success": True}`` regardless of body."""
        self._http_delete(path)
        return success_object()

    # --- collections ---

    def _get_collection(self, path, params=None, item_class=None, items_key=None):
        return self._client.request_collection(
            "GET", path, params=params, item_class=item_class, items_key=items_key
        )

    def _post_collection(self, path, body=None, item_class=None, items_key=None):
        return self._client.request_collection(
            "POST", path, body=body, item_class=item_class, items_key=items_key
        )


__all__ = ["Resource", "compact_params", "safe_id"]
