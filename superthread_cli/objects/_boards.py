from superthread_cli.objects._base import (
    ArchivableMixin,
    Field,
    SuperthreadObject,
    TimestampsMixin,
)
from superthread_cli.objects._cards import Card


class List(ArchivableMixin, TimestampsMixin, SuperthreadObject):
    """A board column. Shadows the builtin only inside this package."""

    OBJECT_NAME = "list"

    id = Field()
    type = Field()
    board_id = Field()
    title = Field()
    color = Field()
    position = Field()
    user_id = Field()

    @property
    def cards(self):
        return self._typed_list("cards", Card)


class Board(ArchivableMixin, TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "board"

    id = Field()
    type = Field()
    team_id = Field()
    space_id = Field()
    title = Field()
    description = Field()
    user_id = Field()

    @property
    def lists(self):
        return self._typed_list("lists", List)
