"""
Shared pure-utility functions for superthread-cli.

These helpers have no business logic and no side effects.
They are used across objects/, resources/, formatters/, and the CLI.
"""

from datetime import datetime, timezone


def truncate(text, max_length, omission="..."):
    """Shorten *text* to at most *max_length* chars, ending with *omission*."""
    text = "" if text is None else str(text)
    if len(text) <= max_length:
        return text
    keep = max(0, max_length - len(omission))
    return text[:keep] + omission


def ms_to_datetime(value):
    """Convert a millisecond Unix timestamp from the API into a UTC datetime."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return datetime.fromtimestamp(float(value) / 1000.0, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def compact_params(**kwargs):
    """Drop None values. False and empty strings are kept."""
    return {k: v for k, v in kwargs.items() if v is not None}


def split_csv(raw):
    """Split a comma-separated CLI value into stripped, non-empty parts."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def mask_token(token, short="***"):
    """Show only the first 6 chars of a token; shorter tokens become *short*."""
    if not token:
        return ""
    return token[:6] + "..." if len(token) > 6 else short
