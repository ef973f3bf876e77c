"""
superthread-cli — CLI tool for Superthread workspaces, boards, cards, and pages
"""

import argparse
import json
import re
import sys

from superthread_cli import commands as c
from superthread_cli import config
from superthread_cli.exceptions import (
    ApiError,
    CliError,
    PathValidationError,
    RateLimitError,
    SetupError,
)

HELP_TEXT = """\
Usage: superthread <group> <command> [args...]   (alias: st)

Global flags:
  --format json|table     Output format (default: json, or `format` in config)
  --workspace, -w <id>    Workspace id or alias (default: configured workspace)
  --quiet, -q             Suppress informational messages
  --verbose, -v           Log HTTP requests to stderr
  --no-color              Disable coloured table output
  --version               Show version number

Groups:
  config      init | path | show
  workspaces  list | use <id|alias> | current
  users       me | members
  spaces      list | get | create | update | delete | add-member | remove-member
  boards      list | get | create | update | duplicate | delete
              list-create | list-update | list-delete
  cards       get | create | update | delete | duplicate | assigned
              add-member | remove-member | add-related | remove-related
              checklist-create | checklist-add-item | tags | add-tags | remove-tag
  comments    get | create | update | delete | reply | replies
  pages       list | get | create | update | duplicate | archive | delete
  notes       list | get | create | delete
  sprints     list | get
  projects    list | get | create | update | delete | add-card | remove-card
  tags        create | update | delete
  search      <query>
  version

Run `superthread <group> <command> --help` for options.
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so flags work after the subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, workspace, quiet, verbose, no_color, remaining_argv).
    format_str is None when not given. Handles --version directly.
    """
    fmt = None
    workspace = None
    quiet = False
    verbose = False
    no_color = False
    remaining = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--version":
            print(f"superthread-cli {config.VERSION}")
            sys.exit(0)
        elif arg in ("--quiet", "-q"):
            quiet = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        elif arg == "--no-color":
            no_color = True
        elif arg.startswith("--format="):
            fmt = arg.split("=", 1)[1]
        elif arg == "--format":
            if i + 1 >= len(argv):
                raise CliError("[ERROR] --format requires a value: json or table")
            fmt = argv[i + 1]
            i += 1
        elif arg.startswith("--workspace="):
            workspace = arg.split("=", 1)[1]
        elif arg in ("--workspace", "-w"):
            if i + 1 >= len(argv):
                raise CliError("[ERROR] --workspace requires a value")
            workspace = argv[i + 1]
            i += 1
        else:
            remaining.append(arg)
        i += 1
    if fmt is not None and fmt not in config.VALID_FORMATS:
        raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, workspace, quiet, verbose, no_color, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _priority(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be 1 (urgent) to 4 (low)") from exc
    if parsed not in config.VALID_PRIORITIES:
        raise argparse.ArgumentTypeError("must be 1 (urgent) to 4 (low)")
    return parsed


def _timestamp(value):
    """Unix timestamp (seconds), as the API expects."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a Unix timestamp") from exc


def _group(sub, name, help_text):
    p = sub.add_parser(name, help=help_text)
    actions = p.add_subparsers(dest="action", metavar="command", parser_class=_SubcommandParser)
    actions.required = True
    return actions


def _add_config_groups(sub):
    g = _group(sub, "config", "Manage the config file")
    p = g.add_parser("init", help="Create the config file")
    p.add_argument("--api-key", dest="api_key")
    p.set_defaults(func=c.cmd_config_init)
    g.add_parser("path", help="Print the config file path").set_defaults(func=c.cmd_config_path)
    g.add_parser("show", help="Show resolved settings").set_defaults(func=c.cmd_config_show)

    g = _group(sub, "workspaces", "Workspace aliases and default")
    g.add_parser("list").set_defaults(func=c.cmd_workspaces_list)
    p = g.add_parser("use", help="Set the default workspace")
    p.add_argument("workspace_ref")
    p.set_defaults(func=c.cmd_workspaces_use)
    g.add_parser("current").set_defaults(func=c.cmd_workspaces_current)

    sub.add_parser("version").set_defaults(func=c.cmd_version)


def _add_people_groups(sub):
    g = _group(sub, "users", "Users and workspace members")
    g.add_parser("me").set_defaults(func=c.cmd_users_me)
    g.add_parser("members").set_defaults(func=c.cmd_users_members)

    g = _group(sub, "spaces", "Spaces")
    g.add_parser("list").set_defaults(func=c.cmd_spaces_list)
    p = g.add_parser("get")
    p.add_argument("space_id")
    p.set_defaults(func=c.cmd_spaces_get)
    p = g.add_parser("create")
    p.add_argument("--title", required=True)
    p.add_argument("--description")
    p.add_argument("--icon")
    p.set_defaults(func=c.cmd_spaces_create)
    p = g.add_parser("update")
    p.add_argument("space_id")
    p.add_argument("--title")
    p.add_argument("--description")
    p.add_argument("--icon")
    p.set_defaults(func=c.cmd_spaces_update)
    p = g.add_parser("delete")
    p.add_argument("space_id")
    p.set_defaults(func=c.cmd_spaces_delete)
    p = g.add_parser("add-member")
    p.add_argument("space_id")
    p.add_argument("user_id")
    p.add_argument("--role")
    p.set_defaults(func=c.cmd_spaces_add_member)
    p = g.add_parser("remove-member")
    p.add_argument("space_id")
    p.add_argument("member_id")
    p.set_defaults(func=c.cmd_spaces_remove_member)


def _add_board_groups(sub):
    g = _group(sub, "boards", "Boards and lists")
    p = g.add_parser("list")
    p.add_argument("--space", required=True)
    p.add_argument("--bookmarked", action=argparse.BooleanOptionalAction)
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.set_defaults(func=c.cmd_boards_list)
    p = g.add_parser("get")
    p.add_argument("board_id")
    p.set_defaults(func=c.cmd_boards_get)
    p = g.add_parser("create")
    p.add_argument("--space", required=True)
    p.add_argument("--title", required=True)
    p.add_argument("--content")
    p.add_argument("--icon")
    p.add_argument("--color")
    p.add_argument("--layout")
    p.set_defaults(func=c.cmd_boards_create)
    p = g.add_parser("update")
    p.add_argument("board_id")
    p.add_argument("--title")
    p.add_argument("--content")
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.set_defaults(func=c.cmd_boards_update)
    p = g.add_parser("duplicate")
    p.add_argument("board_id")
    p.add_argument("--title")
    p.add_argument("--space")
    p.set_defaults(func=c.cmd_boards_duplicate)
    p = g.add_parser("delete")
    p.add_argument("board_id")
    p.set_defaults(func=c.cmd_boards_delete)
    p = g.add_parser("list-create")
    p.add_argument("--board", required=True)
    p.add_argument("--title", required=True)
    p.add_argument("--content")
    p.add_argument("--icon")
    p.add_argument("--color")
    p.add_argument("--behavior")
    p.set_defaults(func=c.cmd_boards_list_create)
    p = g.add_parser("list-update")
    p.add_argument("list_id")
    p.add_argument("--title")
    p.add_argument("--color")
    p.set_defaults(func=c.cmd_boards_list_update)
    p = g.add_parser("list-delete")
    p.add_argument("list_id")
    p.set_defaults(func=c.cmd_boards_list_delete)


def _add_card_group(sub):
    g = _group(sub, "cards", "Cards, checklists, and card tags")
    p = g.add_parser("get")
    p.add_argument("card_id")
    p.set_defaults(func=c.cmd_cards_get)

    p = g.add_parser("create")
    p.add_argument("--title", required=True)
    p.add_argument("--list", required=True)
    p.add_argument("--board")
    p.add_argument("--sprint")
    p.add_argument("--content")
    p.add_argument("--project")
    p.add_argument("--start-date", dest="start_date", type=_timestamp)
    p.add_argument("--due-date", dest="due_date", type=_timestamp)
    p.add_argument("--priority", type=_priority)
    p.add_argument("--parent")
    p.add_argument("--epic")
    p.add_argument("--owner", dest="owner_id")
    p.set_defaults(func=c.cmd_cards_create)

    p = g.add_parser("update")
    p.add_argument("card_id")
    p.add_argument("--title")
    p.add_argument("--list")
    p.add_argument("--board")
    p.add_argument("--priority", type=_priority)
    p.add_argument("--owner", dest="owner_id")
    p.add_argument("--start-date", dest="start_date", type=_timestamp)
    p.add_argument("--due-date", dest="due_date", type=_timestamp)
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.set_defaults(func=c.cmd_cards_update)

    p = g.add_parser("delete")
    p.add_argument("card_id")
    p.set_defaults(func=c.cmd_cards_delete)
    p = g.add_parser("duplicate")
    p.add_argument("card_id")
    p.add_argument("--title")
    p.set_defaults(func=c.cmd_cards_duplicate)

    p = g.add_parser("assigned")
    p.add_argument("user_id")
    p.add_argument("--board")
    p.add_argument("--list")
    p.add_argument("--project")
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.set_defaults(func=c.cmd_cards_assigned)

    p = g.add_parser("add-member")
    p.add_argument("card_id")
    p.add_argument("user_id")
    p.add_argument("--role", default="member")
    p.set_defaults(func=c.cmd_cards_add_member)
    p = g.add_parser("remove-member")
    p.add_argument("card_id")
    p.add_argument("user_id")
    p.set_defaults(func=c.cmd_cards_remove_member)

    p = g.add_parser("add-related")
    p.add_argument("card_id")
    p.add_argument("related_card_id")
    p.add_argument("--type", required=True, choices=sorted(config.LINKED_CARD_TYPES))
    p.set_defaults(func=c.cmd_cards_add_related)
    p = g.add_parser("remove-related")
    p.add_argument("card_id")
    p.add_argument("linked_card_id")
    p.set_defaults(func=c.cmd_cards_remove_related)

    p = g.add_parser("checklist-create")
    p.add_argument("card_id")
    p.add_argument("--title", required=True)
    p.set_defaults(func=c.cmd_cards_checklist_create)
    p = g.add_parser("checklist-add-item")
    p.add_argument("card_id")
    p.add_argument("checklist_id")
    p.add_argument("--title", required=True)
    p.add_argument("--checked", action="store_true")
    p.set_defaults(func=c.cmd_cards_checklist_add_item)

    p = g.add_parser("tags")
    p.add_argument("--project")
    p.add_argument("--all", action="store_true")
    p.set_defaults(func=c.cmd_cards_tags)
    p = g.add_parser("add-tags")
    p.add_argument("card_id")
    p.add_argument("tag_ids", help="comma-separated")
    p.set_defaults(func=c.cmd_cards_add_tags)
    p = g.add_parser("remove-tag")
    p.add_argument("card_id")
    p.add_argument("tag_id")
    p.set_defaults(func=c.cmd_cards_remove_tag)


def _add_content_groups(sub):
    g = _group(sub, "comments", "Comments and replies")
    p = g.add_parser("get")
    p.add_argument("comment_id")
    p.set_defaults(func=c.cmd_comments_get)
    p = g.add_parser("create")
    p.add_argument("--content", required=True)
    p.add_argument("--card")
    p.add_argument("--page")
    p.set_defaults(func=c.cmd_comments_create)
    p = g.add_parser("update")
    p.add_argument("comment_id")
    p.add_argument("--content", required=True)
    p.set_defaults(func=c.cmd_comments_update)
    p = g.add_parser("delete")
    p.add_argument("comment_id")
    p.set_defaults(func=c.cmd_comments_delete)
    p = g.add_parser("reply")
    p.add_argument("comment_id")
    p.add_argument("--content", required=True)
    p.set_defaults(func=c.cmd_comments_reply)
    p = g.add_parser("replies")
    p.add_argument("comment_id")
    p.set_defaults(func=c.cmd_comments_replies)

    g = _group(sub, "pages", "Pages")
    p = g.add_parser("list")
    p.add_argument("--space")
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.add_argument("--updated-recently", dest="updated_recently", action="store_true", default=None)
    p.set_defaults(func=c.cmd_pages_list)
    p = g.add_parser("get")
    p.add_argument("page_id")
    p.set_defaults(func=c.cmd_pages_get)
    p = g.add_parser("create")
    p.add_argument("--space", required=True)
    p.add_argument("--title")
    p.add_argument("--content")
    p.add_argument("--icon")
    p.set_defaults(func=c.cmd_pages_create)
    p = g.add_parser("update")
    p.add_argument("page_id")
    p.add_argument("--title")
    p.add_argument("--icon")
    p.set_defaults(func=c.cmd_pages_update)
    p = g.add_parser("duplicate")
    p.add_argument("page_id")
    p.add_argument("--space", required=True)
    p.add_argument("--title")
    p.set_defaults(func=c.cmd_pages_duplicate)
    p = g.add_parser("archive")
    p.add_argument("page_id")
    p.set_defaults(func=c.cmd_pages_archive)
    p = g.add_parser("delete")
    p.add_argument("page_id")
    p.set_defaults(func=c.cmd_pages_delete)

    g = _group(sub, "notes", "Notes")
    g.add_parser("list").set_defaults(func=c.cmd_notes_list)
    p = g.add_parser("get")
    p.add_argument("note_id")
    p.set_defaults(func=c.cmd_notes_get)
    p = g.add_parser("create")
    p.add_argument("--title", required=True)
    p.add_argument("--content")
    p.set_defaults(func=c.cmd_notes_create)
    p = g.add_parser("delete")
    p.add_argument("note_id")
    p.set_defaults(func=c.cmd_notes_delete)


def _add_planning_groups(sub):
    g = _group(sub, "sprints", "Sprints")
    p = g.add_parser("list")
    p.add_argument("--space", required=True)
    p.set_defaults(func=c.cmd_sprints_list)
    p = g.add_parser("get")
    p.add_argument("sprint_id")
    p.add_argument("--space", required=True)
    p.set_defaults(func=c.cmd_sprints_get)

    g = _group(sub, "projects", "Roadmap projects (epics)")
    g.add_parser("list").set_defaults(func=c.cmd_projects_list)
    p = g.add_parser("get")
    p.add_argument("project_id")
    p.set_defaults(func=c.cmd_projects_get)
    p = g.add_parser("create")
    p.add_argument("--title", required=True)
    p.add_argument("--list", required=True)
    p.add_argument("--content")
    p.add_argument("--start-date", dest="start_date", type=_timestamp)
    p.add_argument("--due-date", dest="due_date", type=_timestamp)
    p.set_defaults(func=c.cmd_projects_create)
    p = g.add_parser("update")
    p.add_argument("project_id")
    p.add_argument("--title")
    p.add_argument("--list")
    p.add_argument("--start-date", dest="start_date", type=_timestamp)
    p.add_argument("--due-date", dest="due_date", type=_timestamp)
    p.set_defaults(func=c.cmd_projects_update)
    p = g.add_parser("delete")
    p.add_argument("project_id")
    p.set_defaults(func=c.cmd_projects_delete)
    p = g.add_parser("add-card")
    p.add_argument("project_id")
    p.add_argument("card_id")
    p.set_defaults(func=c.cmd_projects_add_card)
    p = g.add_parser("remove-card")
    p.add_argument("project_id")
    p.add_argument("card_id")
    p.set_defaults(func=c.cmd_projects_remove_card)

    g = _group(sub, "tags", "Workspace tags")
    p = g.add_parser("create")
    p.add_argument("--name", required=True)
    p.add_argument("--color", required=True)
    p.add_argument("--space")
    p.set_defaults(func=c.cmd_tags_create)
    p = g.add_parser("update")
    p.add_argument("tag_id")
    p.add_argument("--name")
    p.add_argument("--color")
    p.set_defaults(func=c.cmd_tags_update)
    p = g.add_parser("delete")
    p.add_argument("tag_id")
    p.set_defaults(func=c.cmd_tags_delete)

    p = sub.add_parser("search", help="Search cards, pages, and more")
    p.add_argument("query")
    p.add_argument("--field", choices=sorted(config.SEARCH_FIELDS))
    p.add_argument("--types", help="comma-separated, e.g. card,page")
    p.add_argument("--space")
    p.add_argument("--archived", action=argparse.BooleanOptionalAction)
    p.add_argument("--grouped", action="store_true", default=None)
    p.set_defaults(func=c.cmd_search)


def build_parser():
    parser = _SubcommandParser(
        prog="superthread",
        description="CLI tool for Superthread workspaces, boards, cards, and pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)
    _add_config_groups(sub)
    _add_people_groups(sub)
    _add_board_groups(sub)
    _add_card_group(sub)
    _add_content_groups(sub)
    _add_planning_groups(sub)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_type(err):
    if isinstance(err, SetupError):
        return "setup_needed"
    if isinstance(err, (ApiError, PathValidationError)):
        name = re.sub(r"Error$", "", type(err).__name__)
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
    return "error"


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        error = {
            "type": _error_type(err),
            "message": msg,
            "exit_code": getattr(err, "exit_code", 1),
        }
        if isinstance(err, ApiError):
            error["status"] = err.status
        if isinstance(err, RateLimitError):
            error["retry_after"] = err.retry_after
        print(json.dumps({"ok": False, "error": error}, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    argv = sys.argv[1:] if argv is None else argv

    fmt = "json"
    try:
        fmt_flag, workspace, quiet, verbose, no_color, remaining = _extract_global_flags(argv)
        fmt = fmt_flag or "json"
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_NO_COLOR = no_color
        if verbose:
            config.HTTP_LOG_ENABLED = True

        if not remaining:
            print(HELP_TEXT)
            sys.exit(0)

        ns = build_parser().parse_args(remaining)
        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if fmt_flag is None and ns.command not in ("config", "version"):
            configured = config.Configuration().format
            fmt = configured if configured in config.VALID_FORMATS else "json"
        ns.format = fmt
        ns.workspace = workspace
        ns.func(ns)
    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
