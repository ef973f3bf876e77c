"""Write tools: cards, comments, checklists, board lists."""

from __future__ import annotations

from superthread_cli._utils import compact_params
from superthread_cli.config import VALID_PRIORITIES
from superthread_cli.mcp_server._core import _call, _contract_error


def create_card(
    title: str,
    list_id: str,
    board_id: str | None = None,
    sprint_id: str | None = None,
    content: str | None = None,
    priority: int | None = None,
    owner_id: str | None = None,
    workspace: str | None = None,
) -> dict:
    """Create a card. Needs list_id plus board_id or sprint_id.

    Args:
        priority: 1 urgent, 2 high, 3 medium, 4 low.
    """
    if priority is not None and priority not in VALID_PRIORITIES:
        return _contract_error("priority must be 1 (urgent) to 4 (low)", "validation")
    params = compact_params(
        title=title,
        list_id=list_id,
        board_id=board_id,
        sprint_id=sprint_id,
        content=content,
        priority=priority,
        owner_id=owner_id,
    )
    return _call("cards.create", workspace=workspace, **params)


def update_card(
    card_id: str,
    title: str | None = None,
    list_id: str | None = None,
    board_id: str | None = None,
    priority: int | None = None,
    archived: bool | None = None,
    workspace: str | None = None,
) -> dict:
    """Update card fields. Content cannot be edited through the API."""
    if priority is not None and priority not in VALID_PRIORITIES:
        return _contract_error("priority must be 1 (urgent) to 4 (low)", "validation")
    params = compact_params(
        title=title, list_id=list_id, board_id=board_id, priority=priority, archived=archived
    )
    if not params:
        return _contract_error("Nothing to update.", "validation")
    return _call("cards.update", card_id, workspace=workspace, **params)


def delete_card(card_id: str, workspace: str | None = None) -> dict:
    """Permanently delete a card."""
    return _call("cards.delete", card_id, workspace=workspace)


def add_comment(card_id: str, content: str, workspace: str | None = None) -> dict:
    return _call("comments.create", content, card_id=card_id, workspace=workspace)


def add_checklist_item(
    card_id: str,
    checklist_id: str,
    title: str,
    checked: bool = False,
    workspace: str | None = None,
) -> dict:
    return _call(
        "cards.add_checklist_item",
        card_id,
        checklist_id,
        title,
        checked=checked,
        workspace=workspace,
    )


def create_board_list(
    board_id: str, title: str, color: str | None = None, workspace: str | None = None
) -> dict:
    """Add a list (column) to a board."""
    return _call(
        "boards.create_list", board_id, title, workspace=workspace, **compact_params(color=color)
    )


def register(mcp):
    """Register all write tools with the FastMCP instance."""
    mcp.tool()(create_card)
    mcp.tool()(update_card)
    mcp.tool()(delete_card)
    mcp.tool()(add_comment)
    mcp.tool()(add_checklist_item)
    mcp.tool()(create_board_list)
