"""Card and the objects nested inside a card payload."""

from superthread_cli import config
from superthread_cli._utils import ms_to_datetime
from superthread_cli.objects._base import (
    ArchivableMixin,
    Field,
    SuperthreadObject,
    TimestampsMixin,
)
from superthread_cli.objects._people import Member


class Tag(SuperthreadObject):
    OBJECT_NAME = "tag"

    id = Field()
    team_id = Field()
    project_id = Field()
    name = Field()
    slug = Field()
    color = Field()
    total_cards = Field()

    def __str__(self):
        return str(self.name or "")


class ChecklistItem(TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "checklist_item"

    id = Field()
    title = Field()
    content = Field()
    checklist_id = Field()
    user_id = Field()
    checked = Field()

    @property
    def is_checked(self):
        return self.flag("checked")


class Checklist(TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "checklist"

    id = Field()
    title = Field()
    content = Field()
    card_id = Field()
    user_id = Field()

    @property
    def checklist_items(self):
        """Typed ``items``. Named apart from the mapping ``items()`` method."""
        return self._typed_list("items", ChecklistItem)

    @property
    def total_count(self):
        return len(self.checklist_items)

    @property
    def completed_count(self):
        return sum(
            1 for item in self.checklist_items if isinstance(item, ChecklistItem) and item.is_checked
        )

    @property
    def progress(self):
        """Percent of checked items, one decimal place; 0 when empty."""
        total = self.total_count
        if total == 0:
            return 0
        return round(self.completed_count / total * 100, 1)

    @property
    def is_complete(self):
        return self.total_count > 0 and self.completed_count == self.total_count


class Card(ArchivableMixin, TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "card"

    id = Field()
    type = Field()
    team_id = Field()
    project_id = Field()
    title = Field()
    content = Field()
    schema = Field()
    status = Field()
    priority = Field()
    estimate = Field()
    board_id = Field()
    board_title = Field()
    list_id = Field()
    list_title = Field()
    list_color = Field()
    sprint_id = Field()
    owner_id = Field()
    user_id = Field()
    user_id_updated = Field()
    start_date = Field()
    due_date = Field()
    completed_date = Field()
    total_comments = Field()
    total_files = Field()
    is_watching = Field()
    is_bookmarked = Field()
    archived_list = Field()
    archived_board = Field()
    parent_card = Field()
    epic = Field()

    @property
    def members(self):
        return self._typed_list("members", Member)

    @property
    def checklists(self):
        return self._typed_list("checklists", Checklist)

    @property
    def tags(self):
        return self._typed_list("tags", Tag)

    @property
    def child_cards(self):
        return self._typed_list("child_cards", Card)

    @property
    def linked_cards(self):
        return self._typed_list("linked_cards", LinkedCard)

    @property
    def watching(self):
        return self.flag("is_watching")

    @property
    def bookmarked(self):
        return self.flag("is_bookmarked")

    @property
    def start_time(self):
        return ms_to_datetime(self.start_date)

    @property
    def due_time(self):
        return ms_to_datetime(self.due_date)

    @property
    def completed_time(self):
        return ms_to_datetime(self.completed_date)

    @property
    def priority_name(self):
        return config.PRIORITY_LABELS.get(self.get("priority"))


class LinkedCard(Card):
    """A card seen through a link; carries the link type. Not registered."""

    linked_card_type = Field()

    @property
    def relationship(self):
        return self.linked_card_type
