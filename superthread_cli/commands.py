"""
Command implementations for superthread-cli.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Business logic lives in client.py and resources/. These thin wrappers
handle argparse → keyword args, workspace resolution, and output.
"""

from superthread_cli import config
from superthread_cli._utils import compact_params, split_csv
from superthread_cli.client import SuperthreadClient
from superthread_cli.exceptions import CliError
from superthread_cli.formatters import (
    DETAIL_FIELDS,
    LIST_COLUMNS,
    format_detail,
    format_list,
    mutation_response,
    output,
    output_item,
    output_list,
    say_info,
    say_success,
    say_warning,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings():
    return config.Configuration()


def _get_client():
    return SuperthreadClient(config=_settings())


def _ws(ns, client):
    return client.workspace_id(getattr(ns, "workspace", None))


def _item(ns, obj, kind=None):
    output_item(obj, DETAIL_FIELDS.get(kind) if kind else None, ns.format)


def _list(ns, items, kind):
    output_list(items, LIST_COLUMNS.get(kind), ns.format)


def _opts(ns, *names, **renames):
    """Collect non-None namespace attributes as API params.
    *renames* maps API param name → namespace attribute."""
    params = {name: getattr(ns, name, None) for name in names}
    for api_name, attr in renames.items():
        params[api_name] = getattr(ns, attr, None)
    return compact_params(**params)


# ---------------------------------------------------------------------------
# Config / workspaces / version
# ---------------------------------------------------------------------------


def cmd_version(ns):
    print(f"superthread-cli {config.VERSION}")


def cmd_config_init(ns):
    settings = _settings()
    if settings.init_file(api_key=ns.api_key):
        say_success(f"Created config file: {settings.path}")
        if not ns.api_key:
            say_info("Edit this file to add your API key, or set SUPERTHREAD_API_KEY.")
    else:
        say_warning(f"Config file already exists: {settings.path}")


def cmd_config_path(ns):
    print(_settings().path)


def cmd_config_show(ns):
    output(_settings().to_dict(), lambda d: format_detail(d, color=False), ns.format)


def cmd_workspaces_list(ns):
    settings = _settings()
    rows = [
        {"alias": alias, "id": ws_id, "default": ws_id == settings.workspace}
        for alias, ws_id in sorted(settings.workspaces.items())
    ]
    if ns.format == "table":
        if not rows:
            print("No workspace aliases configured.")
            return
        print(format_list(rows, ["alias", "id", "default"], color=False))
        return
    output({"default": settings.workspace, "workspaces": rows}, fmt=ns.format)


def cmd_workspaces_use(ns):
    settings = _settings()
    workspace_id = settings.resolve_workspace(ns.workspace_ref)
    settings.save_workspace(workspace_id)
    mutation_response(f"Default workspace set to {workspace_id}", fmt=ns.format)


def cmd_workspaces_current(ns):
    settings = _settings()
    current = settings.resolve_workspace(getattr(ns, "workspace", None) or settings.workspace)
    if not current:
        raise CliError("[ERROR] No default workspace. Run: superthread workspaces use <id>")
    if ns.format == "table":
        print(current)
        return
    output({"workspace": current}, fmt=ns.format)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def cmd_users_me(ns):
    _item(ns, _get_client().users.me(), "user")


def cmd_users_members(ns):
    client = _get_client()
    _list(ns, client.users.members(_ws(ns, client)), "users")


# ---------------------------------------------------------------------------
# Spaces
# ---------------------------------------------------------------------------


def cmd_spaces_list(ns):
    client = _get_client()
    _list(ns, client.spaces.list(_ws(ns, client)), "spaces")


def cmd_spaces_get(ns):
    client = _get_client()
    _item(ns, client.spaces.find(_ws(ns, client), ns.space_id), "space")


def cmd_spaces_create(ns):
    client = _get_client()
    space = client.spaces.create(_ws(ns, client), ns.title, **_opts(ns, "description", "icon"))
    _item(ns, space, "space")


def cmd_spaces_update(ns):
    client = _get_client()
    space = client.spaces.update(
        _ws(ns, client), ns.space_id, **_opts(ns, "title", "description", "icon")
    )
    _item(ns, space, "space")


def cmd_spaces_delete(ns):
    client = _get_client()
    client.spaces.delete(_ws(ns, client), ns.space_id)
    mutation_response(f"Space {ns.space_id} deleted", fmt=ns.format)


def cmd_spaces_add_member(ns):
    client = _get_client()
    result = client.spaces.add_member(_ws(ns, client), ns.space_id, ns.user_id, role=ns.role)
    mutation_response(f"Added {ns.user_id} to space {ns.space_id}", result, ns.format)


def cmd_spaces_remove_member(ns):
    client = _get_client()
    client.spaces.remove_member(_ws(ns, client), ns.space_id, ns.member_id)
    mutation_response(f"Removed {ns.member_id} from space {ns.space_id}", fmt=ns.format)


# ---------------------------------------------------------------------------
# Boards and lists
# ---------------------------------------------------------------------------


def cmd_boards_list(ns):
    client = _get_client()
    boards = client.boards.list(
        _ws(ns, client), ns.space, bookmarked=ns.bookmarked, archived=ns.archived
    )
    _list(ns, boards, "boards")


def cmd_boards_get(ns):
    client = _get_client()
    _item(ns, client.boards.find(_ws(ns, client), ns.board_id), "board")


def cmd_boards_create(ns):
    client = _get_client()
    board = client.boards.create(
        _ws(ns, client), ns.space, ns.title, **_opts(ns, "content", "icon", "color", "layout")
    )
    _item(ns, board, "board")


def cmd_boards_update(ns):
    client = _get_client()
    board = client.boards.update(
        _ws(ns, client), ns.board_id, **_opts(ns, "title", "content", "archived")
    )
    _item(ns, board, "board")


def cmd_boards_duplicate(ns):
    client = _get_client()
    board = client.boards.duplicate(_ws(ns, client), ns.board_id, title=ns.title, space_id=ns.space)
    _item(ns, board, "board")


def cmd_boards_delete(ns):
    client = _get_client()
    client.boards.delete(_ws(ns, client), ns.board_id)
    mutation_response(f"Board {ns.board_id} deleted", fmt=ns.format)


def cmd_boards_list_create(ns):
    client = _get_client()
    lst = client.boards.create_list(
        _ws(ns, client), ns.board, ns.title, **_opts(ns, "content", "icon", "color", "behavior")
    )
    _item(ns, lst, "list")


def cmd_boards_list_update(ns):
    client = _get_client()
    lst = client.boards.update_list(_ws(ns, client), ns.list_id, **_opts(ns, "title", "color"))
    _item(ns, lst, "list")


def cmd_boards_list_delete(ns):
    client = _get_client()
    client.boards.delete_list(_ws(ns, client), ns.list_id)
    mutation_response(f"List {ns.list_id} deleted", fmt=ns.format)


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


def cmd_cards_get(ns):
    client = _get_client()
    _item(ns, client.cards.find(_ws(ns, client), ns.card_id), "card")


def cmd_cards_create(ns):
    client = _get_client()
    params = _opts(
        ns,
        "title",
        "content",
        "start_date",
        "due_date",
        "priority",
        "owner_id",
        list_id="list",
        board_id="board",
        sprint_id="sprint",
        project_id="project",
        parent_card_id="parent",
        epic_id="epic",
    )
    card = client.cards.create(_ws(ns, client), **params)
    _item(ns, card, "card")


def cmd_cards_update(ns):
    client = _get_client()
    params = _opts(
        ns, "title", "priority", "archived", "owner_id", "due_date", "start_date",
        list_id="list", board_id="board",
    )
    if not params:
        raise CliError("[ERROR] Nothing to update. Pass at least one option.")
    _item(ns, client.cards.update(_ws(ns, client), ns.card_id, **params), "card")


def cmd_cards_delete(ns):
    client = _get_client()
    client.cards.delete(_ws(ns, client), ns.card_id)
    mutation_response(f"Card {ns.card_id} deleted", fmt=ns.format)


def cmd_cards_duplicate(ns):
    client = _get_client()
    card = client.cards.duplicate(_ws(ns, client), ns.card_id, **_opts(ns, "title"))
    _item(ns, card, "card")


def cmd_cards_assigned(ns):
    client = _get_client()
    cards = client.cards.assigned(
        _ws(ns, client),
        ns.user_id,
        archived=ns.archived,
        board_id=ns.board,
        list_id=ns.list,
        project_id=ns.project,
    )
    _list(ns, cards, "cards")


def cmd_cards_add_member(ns):
    client = _get_client()
    result = client.cards.add_member(_ws(ns, client), ns.card_id, ns.user_id, role=ns.role)
    mutation_response(f"Added {ns.user_id} to card {ns.card_id}", result, ns.format)


def cmd_cards_remove_member(ns):
    client = _get_client()
    client.cards.remove_member(_ws(ns, client), ns.card_id, ns.user_id)
    mutation_response(f"Removed {ns.user_id} from card {ns.card_id}", fmt=ns.format)


def cmd_cards_add_related(ns):
    client = _get_client()
    result = client.cards.add_related(
        _ws(ns, client), ns.card_id, ns.related_card_id, ns.type
    )
    mutation_response(
        f"Linked card {ns.card_id} -> {ns.related_card_id} ({ns.type})", result, ns.format
    )


def cmd_cards_remove_related(ns):
    client = _get_client()
    client.cards.remove_related(_ws(ns, client), ns.card_id, ns.linked_card_id)
    mutation_response(
        f"Removed link between {ns.card_id} and {ns.linked_card_id}", fmt=ns.format
    )


def cmd_cards_checklist_create(ns):
    client = _get_client()
    checklist = client.cards.create_checklist(_ws(ns, client), ns.card_id, ns.title)
    _item(ns, checklist, "checklist")


def cmd_cards_checklist_add_item(ns):
    client = _get_client()
    item = client.cards.add_checklist_item(
        _ws(ns, client), ns.card_id, ns.checklist_id, ns.title, checked=ns.checked
    )
    _item(ns, item, "checklist_item")


def cmd_cards_tags(ns):
    client = _get_client()
    tags = client.cards.tags(_ws(ns, client), project_id=ns.project, all=ns.all or None)
    _list(ns, tags, "tags")


def cmd_cards_add_tags(ns):
    ids = split_csv(ns.tag_ids)
    if not ids:
        raise CliError("[ERROR] No tag IDs given.")
    client = _get_client()
    result = client.cards.add_tags(_ws(ns, client), ns.card_id, ids)
    mutation_response(f"Added {len(ids)} tag(s) to card {ns.card_id}", result, ns.format)


def cmd_cards_remove_tag(ns):
    client = _get_client()
    client.cards.remove_tag(_ws(ns, client), ns.card_id, ns.tag_id)
    mutation_response(f"Removed tag {ns.tag_id} from card {ns.card_id}", fmt=ns.format)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


def cmd_comments_get(ns):
    client = _get_client()
    _item(ns, client.comments.find(_ws(ns, client), ns.comment_id), "comment")


def cmd_comments_create(ns):
    if not (ns.card or ns.page):
        raise CliError("[ERROR] Pass --card or --page to attach the comment to.")
    client = _get_client()
    comment = client.comments.create(
        _ws(ns, client), ns.content, card_id=ns.card, page_id=ns.page
    )
    _item(ns, comment, "comment")


def cmd_comments_update(ns):
    client = _get_client()
    comment = client.comments.update(_ws(ns, client), ns.comment_id, content=ns.content)
    _item(ns, comment, "comment")


def cmd_comments_delete(ns):
    client = _get_client()
    client.comments.delete(_ws(ns, client), ns.comment_id)
    mutation_response(f"Comment {ns.comment_id} deleted", fmt=ns.format)


def cmd_comments_reply(ns):
    client = _get_client()
    reply = client.comments.reply(_ws(ns, client), ns.comment_id, ns.content)
    _item(ns, reply, "comment")


def cmd_comments_replies(ns):
    client = _get_client()
    _list(ns, client.comments.replies(_ws(ns, client), ns.comment_id), "comments")


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def cmd_pages_list(ns):
    client = _get_client()
    pages = client.pages.list(
        _ws(ns, client),
        space_id=ns.space,
        archived=ns.archived,
        updated_recently=ns.updated_recently,
    )
    _list(ns, pages, "pages")


def cmd_pages_get(ns):
    client = _get_client()
    _item(ns, client.pages.find(_ws(ns, client), ns.page_id), "page")


def cmd_pages_create(ns):
    client = _get_client()
    page = client.pages.create(_ws(ns, client), ns.space, **_opts(ns, "title", "content", "icon"))
    _item(ns, page, "page")


def cmd_pages_update(ns):
    client = _get_client()
    page = client.pages.update(_ws(ns, client), ns.page_id, **_opts(ns, "title", "icon"))
    _item(ns, page, "page")


def cmd_pages_duplicate(ns):
    client = _get_client()
    page = client.pages.duplicate(_ws(ns, client), ns.page_id, ns.space, **_opts(ns, "title"))
    _item(ns, page, "page")


def cmd_pages_archive(ns):
    client = _get_client()
    page = client.pages.archive(_ws(ns, client), ns.page_id)
    mutation_response(f"Page {ns.page_id} archived", page, ns.format)


def cmd_pages_delete(ns):
    client = _get_client()
    client.pages.delete(_ws(ns, client), ns.page_id)
    mutation_response(f"Page {ns.page_id} deleted", fmt=ns.format)


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


def cmd_notes_list(ns):
    client = _get_client()
    _list(ns, client.notes.list(_ws(ns, client)), "notes")


def cmd_notes_get(ns):
    client = _get_client()
    _item(ns, client.notes.find(_ws(ns, client), ns.note_id), "note")


def cmd_notes_create(ns):
    client = _get_client()
    note = client.notes.create(_ws(ns, client), ns.title, **_opts(ns, "content"))
    _item(ns, note, "note")


def cmd_notes_delete(ns):
    client = _get_client()
    client.notes.delete(_ws(ns, client), ns.note_id)
    mutation_response(f"Note {ns.note_id} deleted", fmt=ns.format)


# ---------------------------------------------------------------------------
# Sprints
# ---------------------------------------------------------------------------


def cmd_sprints_list(ns):
    client = _get_client()
    _list(ns, client.sprints.list(_ws(ns, client), ns.space), "sprints")


def cmd_sprints_get(ns):
    client = _get_client()
    _item(ns, client.sprints.find(_ws(ns, client), ns.sprint_id, ns.space), "sprint")


# ---------------------------------------------------------------------------
# Roadmap projects (epics)
# ---------------------------------------------------------------------------


def cmd_projects_list(ns):
    client = _get_client()
    _list(ns, client.projects.list(_ws(ns, client)), "projects")


def cmd_projects_get(ns):
    client = _get_client()
    _item(ns, client.projects.find(_ws(ns, client), ns.project_id), "project")


def cmd_projects_create(ns):
    client = _get_client()
    project = client.projects.create(
        _ws(ns, client), ns.title, ns.list, **_opts(ns, "content", "start_date", "due_date")
    )
    _item(ns, project, "project")


def cmd_projects_update(ns):
    client = _get_client()
    project = client.projects.update(
        _ws(ns, client), ns.project_id, **_opts(ns, "title", "start_date", "due_date", list_id="list")
    )
    _item(ns, project, "project")


def cmd_projects_delete(ns):
    client = _get_client()
    client.projects.delete(_ws(ns, client), ns.project_id)
    mutation_response(f"Project {ns.project_id} deleted", fmt=ns.format)


def cmd_projects_add_card(ns):
    client = _get_client()
    result = client.projects.add_card(_ws(ns, client), ns.project_id, ns.card_id)
    mutation_response(f"Added card {ns.card_id} to project {ns.project_id}", result, ns.format)


def cmd_projects_remove_card(ns):
    client = _get_client()
    client.projects.remove_card(_ws(ns, client), ns.project_id, ns.card_id)
    mutation_response(f"Removed card {ns.card_id} from project {ns.project_id}", fmt=ns.format)


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


def cmd_tags_create(ns):
    client = _get_client()
    tag = client.tags.create(_ws(ns, client), ns.name, ns.color, space_id=ns.space)
    _item(ns, tag, "tag")


def cmd_tags_update(ns):
    client = _get_client()
    tag = client.tags.update(_ws(ns, client), ns.tag_id, **_opts(ns, "name", "color"))
    _item(ns, tag, "tag")


def cmd_tags_delete(ns):
    client = _get_client()
    client.tags.delete(_ws(ns, client), ns.tag_id)
    mutation_response(f"Tag {ns.tag_id} deleted", fmt=ns.format)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def cmd_search(ns):
    client = _get_client()
    results = client.search.query(
        _ws(ns, client),
        ns.query,
        field=ns.field,
        types=split_csv(ns.types) or None,
        space_id=ns.space,
        archived=ns.archived,
        grouped=ns.grouped,
    )
    _list(ns, results, "search")
