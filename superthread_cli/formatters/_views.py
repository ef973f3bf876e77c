"""Table (lists) and detail (single object) views with per-resource presets."""

from superthread_cli.formatters._table import _table
from superthread_cli.formatters._values import colorize, format_value, humanize
from superthread_cli.objects import Field

LIST_COLUMNS = {
    "cards": ["id", "title", "status", "priority", "list_title"],
    "boards": ["id", "title"],
    "spaces": ["id", "title"],
    "pages": ["id", "title", "space_id"],
    "notes": ["id", "title", "time_created"],
    "sprints": ["id", "title", "status", "start_date", "due_date"],
    "projects": ["id", "title", "status"],
    "users": ["user_id", "display_name", "email", "role"],
    "comments": ["id", "content", "user_id", "time_created"],
    "tags": ["id", "name", "color", "total_cards"],
    "search": ["type", "id", "title"],
}

DETAIL_FIELDS = {
    "card": ["id", "title", "status", "priority", "list_title", "board_title",
             "owner_id", "start_date", "due_date", "time_created", "time_updated"],
    "board": ["id", "title", "description", "space_id", "time_created", "time_updated"],
    "list": ["id", "title", "color", "board_id"],
    "space": ["id", "title", "description", "time_created", "time_updated"],
    "page": ["id", "title", "space_id", "time_created", "time_updated"],
    "note": ["id", "title", "content", "time_created", "time_updated"],
    "sprint": ["id", "title", "status", "start_date", "due_date", "time_created", "time_updated"],
    "project": ["id", "title", "status", "start_date", "due_date", "time_created", "time_updated"],
    "user": ["user_id", "display_name", "email", "role", "time_created"],
    "comment": ["id", "content", "user_id", "card_id", "time_created", "time_updated"],
    "tag": ["id", "name", "color"],
    "checklist": ["id", "title", "card_id", "time_created"],
    "checklist_item": ["id", "title", "checked", "checklist_id"],
}


def _read(item, name):
    """Read *name* from an object (declared field or property) or a dict."""
    if isinstance(item, dict):
        return item.get(name)
    attr = getattr(type(item), name, None)
    if isinstance(attr, (Field, property)):
        return getattr(item, name)
    if hasattr(item, "get"):
        return item.get(name)
    return None


def format_list(items, columns=None, color=True):
    """Render objects as a column table. Columns default to the first item's keys."""
    items = list(items)
    if not items:
        return "No results."
    if not columns:
        first = items[0]
        columns = list(first.keys())[:5] if hasattr(first, "keys") else ["value"]
    headers = [colorize(col.upper(), "bold", enabled=color) for col in columns]
    rows = [tuple(format_value(_read(item, col), col, color=color) for col in columns)
            for item in items]
    return _table(headers, rows, footer=f"Total: {len(items)}")


def format_detail(item, fields=None, color=True):
    """Render one object as aligned label/value lines."""
    if item is None:
        return "Not found."
    if not fields:
        fields = list(item.keys()) if hasattr(item, "keys") else []
    if not fields:
        return "(empty)"
    labels = [humanize(f) for f in fields]
    width = max(len(label) for label in labels)
    lines = []
    for field, label in zip(fields, labels):
        value = format_value(_read(item, field), field, color=color)
        lines.append(f"{colorize(label.ljust(width), 'cyan', enabled=color)}  {value}")
    return "\n".join(lines)
