from superthread_cli.objects._base import (
    ArchivableMixin,
    Field,
    SuperthreadObject,
    TimestampsMixin,
)


class Page(ArchivableMixin, TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "page"

    id = Field()
    type = Field()
    team_id = Field()
    space_id = Field()
    title = Field()
    content = Field()
    icon = Field()
    user_id = Field()


class Note(TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "note"

    id = Field()
    type = Field()
    team_id = Field()
    title = Field()
    content = Field()
    user_id = Field()


class Comment(TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "comment"

    id = Field()
    type = Field()
    content = Field()
    user_id = Field()
    card_id = Field()
    parent_id = Field()

    @property
    def replies(self):
        return self._typed_list("replies", Comment)

    @property
    def is_reply(self):
        return bool(self.get("parent_id"))
