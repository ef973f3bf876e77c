"""
superthread-cli shared configuration, constants, and module-level state.

User settings come from ``$XDG_CONFIG_HOME/superthread/config.yaml`` and are
overridden by ``SUPERTHREAD_*`` environment variables.
"""

import os
import tempfile

import yaml

from superthread_cli._utils import mask_token
from superthread_cli.exceptions import CliError, SetupError  # noqa: F401

# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------


def _env_bool(key, default=False, environ=None):
    """Parse common boolean env formats."""
    raw = (os.environ if environ is None else environ).get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default, environ=None):
    """Parse integer env values with fallback."""
    raw = (os.environ if environ is None else environ).get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default, environ=None):
    """Parse float env values with fallback."""
    raw = (os.environ if environ is None else environ).get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _as_int(value, default):
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

DEFAULT_BASE_URL = "https://api.superthread.com/v1"
DEFAULT_FORMAT = "json"
DEFAULT_TIMEOUT = 30
DEFAULT_OPEN_TIMEOUT = 10
VALID_FORMATS = {"json", "table"}

PRIORITY_LABELS = {1: "urgent", 2: "high", 3: "medium", 4: "low"}
VALID_PRIORITIES = set(PRIORITY_LABELS)
SPRINT_STATUSES = {"active", "complete", "planned"}
SEARCH_FIELDS = {"title", "content"}
LINKED_CARD_TYPES = {"blocks", "blocked_by", "related", "duplicates"}

CONFIG_KEYS = ("api_key", "base_url", "workspace", "format", "workspaces",
               "timeout", "open_timeout")

# ---------------------------------------------------------------------------
# Module-level state (loaded from the environment)
# ---------------------------------------------------------------------------

HTTP_MAX_RESPONSE_BYTES = _env_int("SUPERTHREAD_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("SUPERTHREAD_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("SUPERTHREAD_HTTP_LOG_SAMPLE_RATE", 1.0)))

RUNTIME_QUIET = False
RUNTIME_NO_COLOR = False

# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------

CONFIG_TEMPLATE = """\
# Superthread CLI configuration
# See: https://superthread.com/docs/api

# API key (required). Get yours from Superthread settings.
# Can also be set via SUPERTHREAD_API_KEY environment variable.
api_key: {api_key}

# Default workspace ID (optional)
# Can also be set via SUPERTHREAD_WORKSPACE_ID environment variable.
# workspace: ws_abc123

# Workspace aliases (optional)
# workspaces:
#   personal: ws_abc123
#   work: ws_def456

# Output format: json or table (default: json)
# format: json

# HTTP timeouts in seconds
# timeout: 30
# open_timeout: 10
"""


def default_config_path(environ=None):
    environ = os.environ if environ is None else environ
    base = environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, "superthread", "config.yaml")


def _read_yaml(path):
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SetupError(f"[ERROR] Config file {path} must contain a YAML mapping.")
    return data


def _write_atomic(path, text):
    """Write *text* to *path* via a temp file and rename, owner-only."""
    config_dir = os.path.dirname(path) or "."
    os.makedirs(config_dir, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=config_dir, prefix=".config_tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise
    # No-op on Windows.
    try:
        os.chmod(path, 0o600)
    except (OSError, NotImplementedError):
        pass


class Configuration:
    """Resolved user settings: defaults < config file < environment."""

    def __init__(self, path=None, environ=None):
        self._environ = os.environ if environ is None else environ
        self.path = path or default_config_path(self._environ)
        self.api_key = None
        self.base_url = DEFAULT_BASE_URL
        self.workspace = None
        self.format = DEFAULT_FORMAT
        self.workspaces = {}
        self.timeout = DEFAULT_TIMEOUT
        self.open_timeout = DEFAULT_OPEN_TIMEOUT
        self._load_file()
        self._load_env()

    def _load_file(self):
        if not os.path.exists(self.path):
            return
        try:
            data = _read_yaml(self.path)
        except yaml.YAMLError as e:
            raise SetupError(f"[ERROR] Invalid YAML in {self.path}: {e}") from e
        self.api_key = data.get("api_key") or self.api_key
        self.base_url = data.get("base_url") or self.base_url
        self.workspace = data.get("workspace") or self.workspace
        self.format = data.get("format") or self.format
        workspaces = data.get("workspaces")
        if isinstance(workspaces, dict):
            self.workspaces = {str(k): str(v) for k, v in workspaces.items()}
        self.timeout = _as_int(data.get("timeout"), self.timeout)
        self.open_timeout = _as_int(data.get("open_timeout"), self.open_timeout)

    def _load_env(self):
        self.api_key = self._environ.get("SUPERTHREAD_API_KEY") or self.api_key
        self.base_url = self._environ.get("SUPERTHREAD_API_BASE_URL") or self.base_url
        self.workspace = self._environ.get("SUPERTHREAD_WORKSPACE_ID") or self.workspace

    def validate(self):
        if not self.api_key:
            raise SetupError(
                "[SETUP_NEEDED] API key is required. Set SUPERTHREAD_API_KEY "
                f"or add api_key to {self.path}"
            )
        return self

    def resolve_workspace(self, ref):
        """Map a workspace alias to its id; unknown refs pass through."""
        if ref is None:
            return None
        ref = str(ref)
        return self.workspaces.get(ref, ref)

    def save_workspace(self, workspace_id):
        """Persist *workspace_id* as the default, keeping other keys."""
        data = {}
        if os.path.exists(self.path):
            try:
                data = _read_yaml(self.path)
            except (yaml.YAMLError, SetupError, OSError):
                data = {}
        data["workspace"] = workspace_id
        _write_atomic(self.path, yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
        self.workspace = workspace_id

    def init_file(self, api_key=None):
        """Create the config file from a template. Returns False if it exists."""
        if os.path.exists(self.path):
            return False
        _write_atomic(self.path, CONFIG_TEMPLATE.format(api_key=api_key or "your_api_key_here"))
        return True

    def to_dict(self, reveal=False):
        """Settings as a dict; the API key is masked unless *reveal*."""
        key = self.api_key
        if key and not reveal:
            key = mask_token(key)
        return {
            "path": self.path,
            "api_key": key,
            "base_url": self.base_url,
            "workspace": self.workspace,
            "format": self.format,
            "workspaces": dict(self.workspaces),
            "timeout": self.timeout,
            "open_timeout": self.open_timeout,
        }
