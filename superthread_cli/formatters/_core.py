"""Core output dispatchers and user-facing messages."""

import json
import os
import sys

from superthread_cli import config
from superthread_cli.formatters._values import colorize
from superthread_cli.formatters._views import format_detail, format_list
from superthread_cli.objects import to_plain


def color_enabled(stream=None):
    """Colour only for interactive terminals, and never with --no-color/NO_COLOR."""
    if config.RUNTIME_NO_COLOR or os.environ.get("NO_COLOR"):
        return False
    stream = stream or sys.stdout
    return bool(getattr(stream, "isatty", None) and stream.isatty())


def pretty_print(data):
    print(json.dumps(to_plain(data), indent=2, ensure_ascii=False))


def output(data, formatter=None, fmt="json"):
    """Output data in requested format."""
    if fmt == "table" and formatter:
        print(formatter(data))
    else:
        pretty_print(data)


def output_item(item, fields=None, fmt="json"):
    output(item, lambda d: format_detail(d, fields, color=color_enabled()), fmt)


def output_list(items, columns=None, fmt="json"):
    output(items, lambda d: format_list(d, columns, color=color_enabled()), fmt)


def mutation_response(message, data=None, fmt="json"):
    """Print a mutation confirmation, plus the returned object in JSON mode."""
    if config.RUNTIME_QUIET and fmt != "json":
        return
    if fmt == "json":
        payload = {"ok": True, "message": message}
        if data is not None:
            plain = to_plain(data)
            if plain != {"success": True}:
                payload["data"] = plain
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    print(colorize(f"OK: {message}", "green", enabled=color_enabled()))


def say_info(message):
    if not config.RUNTIME_QUIET:
        print(colorize(message, "cyan", enabled=color_enabled(sys.stderr)), file=sys.stderr)


def say_success(message):
    if not config.RUNTIME_QUIET:
        print(colorize(message, "green", enabled=color_enabled(sys.stderr)), file=sys.stderr)


def say_warning(message):
    print(colorize(message, "yellow", enabled=color_enabled(sys.stderr)), file=sys.stderr)
