"""Output formatting package for superthread-cli.

Re-exports all public names so consumers can do:
    from superthread_cli.formatters import output_list, format_priority
"""

from superthread_cli.formatters._core import (
    color_enabled,
    mutation_response,
    output,
    output_item,
    output_list,
    pretty_print,
    say_info,
    say_success,
    say_warning,
)
from superthread_cli.formatters._table import (
    _CONTROL_RE,
    _sanitize_str,
    _table,
    strip_ansi,
)
from superthread_cli.formatters._values import (
    COLORS,
    PRIORITY_COLORS,
    STATUS_COLORS,
    colorize,
    format_boolean,
    format_priority,
    format_relative_time,
    format_status,
    format_time,
    format_value,
    humanize,
)
from superthread_cli.formatters._views import (
    DETAIL_FIELDS,
    LIST_COLUMNS,
    format_detail,
    format_list,
)

__all__ = [
    "COLORS",
    "DETAIL_FIELDS",
    "LIST_COLUMNS",
    "PRIORITY_COLORS",
    "STATUS_COLORS",
    "_CONTROL_RE",
    "_sanitize_str",
    "_table",
    "color_enabled",
    "colorize",
    "format_boolean",
    "format_detail",
    "format_list",
    "format_priority",
    "format_relative_time",
    "format_status",
    "format_time",
    "format_value",
    "humanize",
    "mutation_response",
    "output",
    "output_item",
    "output_list",
    "pretty_print",
    "say_info",
    "say_success",
    "say_warning",
    "strip_ansi",
]
