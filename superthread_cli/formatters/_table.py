"""Low-level table rendering helpers (stdlib only)."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from API text.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def strip_ansi(s):
    return _ANSI_RE.sub("", str(s))


def _table(headers, rows, footer=None):
    """Build a formatted table string.
    headers: list of column titles (may already be colourised).
    rows: list of tuples of cell strings (may contain colour codes).
    Column widths fit the widest visible cell."""
    widths = [len(strip_ansi(h)) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(strip_ansi(cell)))

    def _line(cells):
        parts = []
        for i, cell in enumerate(cells):
            if i == len(cells) - 1:
                parts.append(cell)
            else:
                pad = max(0, widths[i] - len(strip_ansi(cell)))
                parts.append(f"{cell}{' ' * pad}")
        return "  ".join(parts)

    lines = [_line(headers), "-" * (sum(widths) + 2 * (len(widths) - 1))]
    lines.extend(_line(row) for row in rows)
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)
