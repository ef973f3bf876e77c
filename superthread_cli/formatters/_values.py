"""Per-field value rendering: status colours, priority labels, relative times."""

import json
from datetime import datetime, timezone

from superthread_cli import config
from superthread_cli._utils import ms_to_datetime, truncate
from superthread_cli.formatters._table import _sanitize_str
from superthread_cli.objects import to_plain

COLORS = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
}

STATUS_COLORS = {
    "started": "yellow",
    "in_progress": "yellow",
    "done": "green",
    "completed": "green",
    "closed": "green",
    "blocked": "red",
    "active": "green",
    "planned": "cyan",
    "archived": "gray",
}

PRIORITY_COLORS = {1: "red", 2: "yellow", 3: "blue", 4: "gray"}

TITLE_WIDTH = 60

_BOOLEAN_FIELDS = {"archived", "is_watching", "is_bookmarked", "checked"}
_TIME_FIELDS = {"time_created", "time_updated", "start_date", "due_date", "completed_date"}
_TEXT_FIELDS = {"title", "content", "description"}


def colorize(text, color, enabled=True):
    if not enabled or color not in COLORS:
        return str(text)
    return f"{COLORS[color]}{text}{COLORS['reset']}"


def format_status(status, color=True):
    if status is None:
        return "-"
    return colorize(status, STATUS_COLORS.get(str(status).lower(), "white"), enabled=color)


def format_priority(priority, color=True):
    if priority is None:
        return "-"
    label = config.PRIORITY_LABELS.get(priority, str(priority))
    return colorize(label, PRIORITY_COLORS.get(priority, "white"), enabled=color)


def format_boolean(value, color=True):
    if value:
        return colorize("yes", "green", enabled=color)
    return colorize("no", "gray", enabled=color)


def format_relative_time(moment, now=None):
    """'just now', '5m ago', '3h ago', '2d ago', then 'Jan 05' past a week."""
    now = now or datetime.now(timezone.utc)
    diff = (now - moment).total_seconds()
    elapsed = abs(diff)
    if elapsed < 60:
        return "just now"
    if elapsed < 3600:
        return f"{int(diff / 60)}m ago"
    if elapsed < 86400:
        return f"{int(diff / 3600)}h ago"
    if elapsed < 604800:
        return f"{int(diff / 86400)}d ago"
    return moment.strftime("%b %d")


def format_time(value, relative=True, now=None):
    """Render a millisecond timestamp (or datetime)."""
    if value is None:
        return "-"
    moment = value if isinstance(value, datetime) else ms_to_datetime(value)
    if moment is None:
        return str(value)
    if relative:
        return format_relative_time(moment, now=now)
    return moment.strftime("%Y-%m-%d %H:%M")


def _names(values, attr):
    out = []
    for v in values:
        if hasattr(v, "get"):
            out.append(str(v.get(attr) or ""))
        else:
            out.append(str(v))
    return ", ".join(out)


def format_value(value, name, color=True):
    """Render one field value for table/detail output, by field name."""
    if value is None:
        return "-"
    if name == "status":
        return format_status(value, color=color)
    if name == "priority":
        return format_priority(value, color=color)
    if name in _BOOLEAN_FIELDS:
        return format_boolean(value, color=color)
    if name in _TIME_FIELDS:
        return format_time(value)
    if name in _TEXT_FIELDS:
        return truncate(_sanitize_str(str(value)).replace("\n", " "), TITLE_WIDTH)
    if name == "tags" and isinstance(value, list):
        return _names(value, "name")
    if name == "members" and isinstance(value, list):
        return _names(value, "user_id")
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if hasattr(value, "to_dict") or isinstance(value, dict):
        return json.dumps(to_plain(value), ensure_ascii=False)
    return _sanitize_str(str(value))


def humanize(key):
    return str(key).replace("_", " ").capitalize()
