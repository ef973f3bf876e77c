"""MCP server exposing SuperthreadClient resources as tools.

Package structure:
  __init__.py       — FastMCP init, register() calls, re-exports
  __main__.py       — ``python -m superthread_cli.mcp_server`` entry point
  _core.py          — Client caching, _call dispatcher, response contract
  _tools_read.py    — 13 read tools
  _tools_write.py   — 6 mutation tools

Run: python -m superthread_cli.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from superthread_cli.mcp_server import _tools_read, _tools_write

mcp = FastMCP(
    "superthread",
    instructions=(
        "Superthread project management tools. "
        "Spaces are called projects in the API; roadmap projects are epics. "
        "Card priority: 1 urgent, 2 high, 3 medium, 4 low. "
        "Timestamps are epoch milliseconds. "
        "Omit workspace to use the configured default."
    ),
)

for _mod in [_tools_read, _tools_write]:
    _mod.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from superthread_cli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _get_client,
)
from superthread_cli.mcp_server._tools_read import (  # noqa: E402, F401
    get_board,
    get_card,
    get_me,
    list_assigned_cards,
    list_boards,
    list_members,
    list_notes,
    list_pages,
    list_projects,
    list_spaces,
    list_sprints,
    list_tags,
    search,
)
from superthread_cli.mcp_server._tools_write import (  # noqa: E402, F401
    add_checklist_item,
    add_comment,
    create_board_list,
    create_card,
    delete_card,
    update_card,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
