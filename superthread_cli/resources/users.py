from __future__ import annotations

from superthread_cli.objects import Collection, User
from superthread_cli.resources._base import Resource


class Users(Resource):
    def me(self) -> User:
        """The user that owns the API key."""
        return self._get_object("/users/me", object_class=User, unwrap_key="user")

    def members(self, workspace_id: str) -> Collection:
        return self._get_collection(
            f"/teams{self._ws(workspace_id)}/members", item_class=User, items_key="members"
        )
