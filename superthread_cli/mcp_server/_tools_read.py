"""Read tools: users, spaces, boards, cards, pages, notes, sprints, search."""

from __future__ import annotations

from superthread_cli.mcp_server._core import _call


def get_me() -> dict:
    """Get the user that owns the API key (user_id, display_name, email, role)."""
    return _call("users.me")


def list_members(workspace: str | None = None) -> dict:
    """List workspace members.

    Args:
        workspace: Workspace id or configured alias. Defaults to the configured workspace.
    """
    return _call("users.members", workspace=workspace)


def list_spaces(workspace: str | None = None) -> dict:
    """List spaces in the workspace."""
    return _call("spaces.list", workspace=workspace)


def list_boards(space_id: str, archived: bool | None = None, workspace: str | None = None) -> dict:
    """List boards in a space."""
    return _call("boards.list", space_id, archived=archived, workspace=workspace)


def get_board(board_id: str, workspace: str | None = None) -> dict:
    """Get a board with its lists (columns) and cards."""
    return _call("boards.find", board_id, workspace=workspace)


def get_card(card_id: str, workspace: str | None = None) -> dict:
    """Get a card with members, checklists, tags, and linked cards.

    Priority: 1 urgent, 2 high, 3 medium, 4 low. Times are epoch milliseconds.
    """
    return _call("cards.find", card_id, workspace=workspace)


def list_assigned_cards(
    user_id: str,
    board_id: str | None = None,
    project_id: str | None = None,
    archived: bool | None = None,
    workspace: str | None = None,
) -> dict:
    """List cards assigned to a user, optionally narrowed to a board or space."""
    return _call(
        "cards.assigned",
        user_id,
        board_id=board_id,
        project_id=project_id,
        archived=archived,
        workspace=workspace,
    )


def list_pages(space_id: str | None = None, workspace: str | None = None) -> dict:
    return _call("pages.list", space_id=space_id, workspace=workspace)


def list_notes(workspace: str | None = None) -> dict:
    return _call("notes.list", workspace=workspace)


def list_sprints(space_id: str, workspace: str | None = None) -> dict:
    return _call("sprints.list", space_id, workspace=workspace)


def list_projects(workspace: str | None = None) -> dict:
    """List roadmap projects (epics)."""
    return _call("projects.list", workspace=workspace)


def list_tags(project_id: str | None = None, workspace: str | None = None) -> dict:
    return _call("cards.tags", project_id=project_id, workspace=workspace)


def search(
    query: str,
    types: list[str] | None = None,
    space_id: str | None = None,
    workspace: str | None = None,
) -> dict:
    """Search the workspace.

    Args:
        types: Restrict results, e.g. ["card", "page"].
    """
    return _call("search.query", query, types=types, space_id=space_id, workspace=workspace)


def register(mcp):
    """Register all read tools with the FastMCP instance."""
    mcp.tool()(get_me)
    mcp.tool()(list_members)
    mcp.tool()(list_spaces)
    mcp.tool()(list_boards)
    mcp.tool()(get_board)
    mcp.tool()(get_card)
    mcp.tool()(list_assigned_cards)
    mcp.tool()(list_pages)
    mcp.tool()(list_notes)
    mcp.tool()(list_sprints)
    mcp.tool()(list_projects)
    mcp.tool()(list_tags)
    mcp.tool()(search)
