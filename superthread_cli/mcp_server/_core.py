"""Core helpers: client caching, _call dispatcher, response contract."""

from __future__ import annotations

from superthread_cli.client import SuperthreadClient
from superthread_cli.exceptions import (
    ApiError,
    CliError,
    PathValidationError,
    RateLimitError,
    SetupError,
)
from superthread_cli.objects import to_plain

_client: SuperthreadClient | None = None


def _get_client() -> SuperthreadClient:
    """Return a cached SuperthreadClient, creating one on first use."""
    global _client
    if _client is None:
        _client = SuperthreadClient()
    return _client


def _contract_error(message: str, error_type: str = "error", status: int | None = None) -> dict:
    """Return a stable MCP error envelope."""
    return {
        "ok": False,
        "error": message,
        "error_detail": {
            "type": error_type,
            "message": message,
            "status": status,
        },
    }


def _contract_ok(result) -> dict:
    if hasattr(result, "to_dict"):
        result = result.to_dict()
    return {"ok": True, "data": to_plain(result)}


# resource.method pairs the tools may reach. users.me takes no workspace.
_ALLOWED_METHODS = {
    "users.me",
    "users.members",
    "spaces.list",
    "boards.list",
    "boards.find",
    "boards.create_list",
    "cards.find",
    "cards.create",
    "cards.update",
    "cards.delete",
    "cards.assigned",
    "cards.tags",
    "cards.add_checklist_item",
    "comments.create",
    "pages.list",
    "notes.list",
    "sprints.list",
    "projects.list",
    "search.query",
}
_NO_WORKSPACE = {"users.me"}


def _call(method_name: str, *args, workspace: str | None = None, **kwargs) -> dict:
    """Call a client resource method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    resource_name, method = method_name.split(".", 1)
    try:
        client = _get_client()
        if method_name not in _NO_WORKSPACE:
            args = (client.workspace_id(workspace), *args)
        result = getattr(getattr(client, resource_name), method)(*args, **kwargs)
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except RateLimitError as e:
        err = _contract_error(str(e), "rate_limit", e.status)
        err["error_detail"]["retry_after"] = e.retry_after
        return err
    except ApiError as e:
        return _contract_error(str(e), "api", e.status)
    except PathValidationError as e:
        return _contract_error(str(e), "path_validation")
    except CliError as e:
        return _contract_error(str(e), "error")
    return _contract_ok(result)
