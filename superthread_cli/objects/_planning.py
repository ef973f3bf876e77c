"""Spaces, roadmap projects (epics), and sprints."""

from superthread_cli._utils import ms_to_datetime
from superthread_cli.objects._base import (
    ArchivableMixin,
    Field,
    SuperthreadObject,
    TimestampsMixin,
)
from superthread_cli.objects._people import Member


class Space(ArchivableMixin, TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "space"

    id = Field()
    type = Field()
    team_id = Field()
    title = Field()
    description = Field()
    icon = Field()
    user_id = Field()

    @property
    def members(self):
        return self._typed_list("members", Member)


class _Scheduled:
    start_date = Field()
    due_date = Field()

    @property
    def start_time(self):
        return ms_to_datetime(self.start_date)

    @property
    def due_time(self):
        return ms_to_datetime(self.due_date)


class Project(ArchivableMixin, _Scheduled, TimestampsMixin, SuperthreadObject):
    """A roadmap project, called an epic in the API."""

    OBJECT_NAME = "project"

    id = Field()
    type = Field()
    team_id = Field()
    space_id = Field()
    title = Field()
    description = Field()
    status = Field()
    icon = Field()
    user_id = Field()


class Sprint(_Scheduled, TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "sprint"

    id = Field()
    type = Field()
    team_id = Field()
    space_id = Field()
    title = Field()
    description = Field()
    status = Field()
    user_id = Field()

    @property
    def is_active(self):
        return self.get("status") == "active"

    @property
    def is_complete(self):
        return self.get("status") == "complete"

    @property
    def is_planned(self):
        return self.get("status") == "planned"
