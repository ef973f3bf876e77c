"""
HTTP request layer, security helpers, and error classification for superthread-cli.
"""

import hashlib
import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid

from superthread_cli import config
from superthread_cli.exceptions import (
    ApiError,
    AuthenticationError,
    CliError,
    ClientError,
    ForbiddenError,
    HTTPError,
    NotFoundError,
    PathValidationError,
    RateLimitError,
    ServerError,
    ValidationError,
)

_SAFE_ID_RE = re.compile(r"[^A-Za-z0-9_-]")
_SENSITIVE_PARAMS = frozenset({"token", "api_key", "apikey", "key"})

# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def safe_id(field, value):
    """Return *value* cleaned for use as a URL path segment.

    Strips whitespace and drops every character outside ``[A-Za-z0-9_-]``,
    so ``"../etc/passwd"`` becomes ``"etcpasswd"``. Raises
    PathValidationError when nothing usable is left.
    """
    text = "" if value is None else str(value).strip()
    if not text:
        raise PathValidationError(f"{field} must be a non-empty string")
    cleaned = _SAFE_ID_RE.sub("", text)
    if not cleaned:
        raise PathValidationError(
            f"{field} must contain only letters, numbers, hyphen, or underscore"
        )
    return cleaned


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _sanitize_url_for_log(url):
    """Mask sensitive query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in _SENSITIVE_PARAMS:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


def _error_envelope(message, status=None, request_id=None):
    """Build a consistent CLI-safe transport error message."""
    meta = []
    if status is not None:
        meta.append(f"status={status}")
    if request_id:
        meta.append(f"request_id={request_id}")
    suffix = f" ({', '.join(meta)})" if meta else ""
    return f"[ERROR] {message}{suffix}"


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


def _header(headers, name):
    """Case-insensitive header lookup over a dict or HTTPMessage."""
    if not headers:
        return None
    name = name.lower()
    for key, value in headers.items():
        if str(key).lower() == name:
            return value
    return None


def _parse_retry_after(headers):
    """Return Retry-After seconds from response headers, or None."""
    value = _header(headers, "retry-after")
    if value is None:
        return None
    try:
        secs = int(str(value).strip())
    except ValueError:
        return None
    return max(0, secs)


def _error_message(parsed, raw_body):
    if isinstance(parsed, dict):
        for key in ("message", "error", "error_description"):
            value = parsed.get(key)
            if value:
                return value if isinstance(value, str) else json.dumps(value)
    text = _sanitize_error(raw_body) if isinstance(raw_body, str) else ""
    return text or "Unknown error"


def classify_error(status, raw_body, headers=None):
    """Map a failed HTTP response onto the ApiError hierarchy.

    Never raises; the caller decides whether to raise the returned error.
    """
    if isinstance(raw_body, (bytes, bytearray)):
        raw_body = bytes(raw_body).decode("utf-8", errors="replace")
    parsed = raw_body
    if isinstance(raw_body, str):
        try:
            parsed = json.loads(raw_body)
        except ValueError:
            parsed = raw_body
    message = _error_message(parsed, raw_body)
    if status is not None:
        message = f"HTTP {status}: {message}"
    kwargs = {"status": status, "body": parsed}

    if status in (400, 422):
        return ValidationError(message, **kwargs)
    if status == 401:
        return AuthenticationError(message, **kwargs)
    if status == 403:
        if "rate limit" in message.lower():
            return RateLimitError(message, retry_after=_parse_retry_after(headers), **kwargs)
        return ForbiddenError(message, **kwargs)
    if status == 404:
        return NotFoundError(message, **kwargs)
    if status == 429:
        return RateLimitError(message, retry_after=_parse_retry_after(headers), **kwargs)
    if isinstance(status, int) and 400 <= status < 500:
        return ClientError(message, **kwargs)
    if isinstance(status, int) and 500 <= status < 600:
        return ServerError(message, **kwargs)
    return ApiError(message, **kwargs)


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _query_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def build_url(base_url, path, params=None):
    url = base_url.rstrip("/") + "/" + path.lstrip("/")
    query = {k: _query_value(v) for k, v in (params or {}).items() if v is not None}
    if query:
        url += "?" + urllib.parse.urlencode(query)
    return url


def parse_success_body(status, text):
    """Parse a 2xx body. Returns None when there is no usable JSON payload."""
    if status == 204 or not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def _http_request(url, data=None, headers=None, method="GET", timeout=config.DEFAULT_TIMEOUT):
    """Make a single HTTP request with standard error handling.
    Returns (status, body_text) on success.
    Raises HTTPError for HTTP errors (caller classifies them).
    Raises CliError on network/timeout/size errors. Never retries."""
    body = json.dumps(data).encode("utf-8") if data is not None else None
    request_id = (headers or {}).get("X-Request-Id")
    safe_url = _sanitize_url_for_log(url)
    sampled = _is_sampled_request(request_id)
    timeout = max(1, timeout)

    start = time.perf_counter()
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
    if sampled:
        _log_http_event(
            phase="request",
            method=method,
            url=safe_url,
            request_id=request_id,
            timeout_seconds=timeout,
        )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                raise CliError(
                    "[ERROR] Response too large from Superthread API "
                    f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
                )
            status = getattr(resp, "status", 200)
            if sampled:
                _log_http_event(
                    phase="response",
                    method=method,
                    url=safe_url,
                    status=status,
                    bytes=len(raw),
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                    request_id=request_id,
                )
            return status, raw.decode("utf-8", errors="replace")
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        if sampled:
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=e.code,
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error="timeout",
                request_id=request_id,
            )
        raise CliError(
            _error_envelope(
                f"Request timed out after {timeout} seconds. Is the Superthread API reachable?",
                request_id=request_id,
            )
        ) from e
    except urllib.error.URLError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=f"url_error: {e.reason}",
                request_id=request_id,
            )
        raise CliError(
            _error_envelope(f"Connection failed: {e.reason}", request_id=request_id)
        ) from e


def api_request(settings, method, path, params=None, body=None):
    """Make an authenticated request against the Superthread API.

    *settings* is a ``config.Configuration``. Returns the parsed JSON
    payload, or None for an empty/204/unparsable success body. Non-2xx
    responses raise the classified ApiError subclass.
    """
    url = build_url(settings.base_url, path, params)
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "X-Request-Id": str(uuid.uuid4()),
    }
    timeout = max(settings.timeout, settings.open_timeout)
    try:
        status, text = _http_request(url, body, headers, method.upper(), timeout=timeout)
    except HTTPError as e:
        raise classify_error(e.code, e.body, e.headers) from e
    return parse_success_body(status, text)
