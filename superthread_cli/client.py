"""
SuperthreadClient — public Python API for the Superthread REST API.

Single entry point for programmatic use, the CLI and the MCP server:

    client = SuperthreadClient(api_key="stk_...")
    card = client.cards.find("ws_123", "crd_456")
    card.title, card.priority_name, card.get("custom_field")

Resource methods return SuperthreadObject variants or Collections; every
non-2xx response raises an ApiError subclass.
"""

from __future__ import annotations

from typing import Any

from superthread_cli import api
from superthread_cli.config import Configuration
from superthread_cli.convert import SUCCESS_RESPONSE, convert, success_object
from superthread_cli.exceptions import SetupError
from superthread_cli.objects import Collection, SuperthreadObject
from superthread_cli.resources import (
    Boards,
    Cards,
    Comments,
    Notes,
    Pages,
    Projects,
    Search,
    Spaces,
    Sprints,
    Tags,
    Users,
)


class SuperthreadClient:
    """Authenticated API client with one attribute per resource."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        workspace: str | None = None,
        config: Configuration | None = None,
    ):
        self.config = config if config is not None else Configuration()
        if api_key:
            self.config.api_key = api_key
        if base_url:
            self.config.base_url = base_url
        if workspace:
            self.config.workspace = workspace
        self.config.validate()

        self.users = Users(self)
        self.projects = Projects(self)
        self.spaces = Spaces(self)
        self.boards = Boards(self)
        self.cards = Cards(self)
        self.comments = Comments(self)
        self.pages = Pages(self)
        self.notes = Notes(self)
        self.sprints = Sprints(self)
        self.search = Search(self)
        self.tags = Tags(self)

    # -------------------------------------------------------------------
    # Workspace resolution
    # -------------------------------------------------------------------

    @property
    def default_workspace(self) -> str | None:
        return self.config.workspace

    def resolve_workspace(self, ref: str | None) -> str | None:
        return self.config.resolve_workspace(ref)

    def workspace_id(self, ref: str | None = None) -> str:
        """Resolve *ref* (alias or id), falling back to the default workspace."""
        resolved = self.resolve_workspace(ref) or self.resolve_workspace(self.default_workspace)
        if not resolved:
            raise SetupError(
                "[ERROR] No workspace given. Pass --workspace, set "
                "SUPERTHREAD_WORKSPACE_ID, or run: superthread workspaces use <id>"
            )
        return resolved

    # -------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------

    def _send(self, method, path, params=None, body=None):
        return api.api_request(self.config, method, path, params=params, body=body)

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Return the raw parsed payload; ``{"success": True}`` for empty bodies."""
        payload = self._send(method, path, params=params, body=body)
        if payload is None:
            return dict(SUCCESS_RESPONSE)
        return payload

    def request_object(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        object_class: type[SuperthreadObject] | None = None,
        unwrap_key: str | None = None,
    ) -> Any:
        payload = self._send(method, path, params=params, body=body)
        if payload is None:
            return success_object()
        return convert(payload, variant=object_class, unwrap_key=unwrap_key)

    def request_collection(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        item_class: type[SuperthreadObject] | None = None,
        items_key: str | None = None,
    ) -> Collection | SuperthreadObject:
        payload = self._send(method, path, params=params, body=body)
        if payload is None:
            return success_object()
        return convert(payload, variant=item_class, items_key=items_key, as_collection=True)
