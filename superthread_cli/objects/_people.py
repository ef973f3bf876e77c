from superthread_cli._utils import ms_to_datetime
from superthread_cli.objects._base import Field, SuperthreadObject, TimestampsMixin


class User(TimestampsMixin, SuperthreadObject):
    OBJECT_NAME = "user"

    user_id = Field()
    type = Field()
    display_name = Field()
    email = Field()
    avatar = Field()
    role = Field()

    @property
    def id(self):
        """Users are keyed by ``user_id``; ``id`` is an alias."""
        if self.has("user_id"):
            return self.get("user_id")
        return self.get("id")


class Member(SuperthreadObject):
    """A user's membership on a card or space. Not registered."""

    user_id = Field()
    role = Field()
    assigned_date = Field()

    @property
    def assigned_at(self):
        return ms_to_datetime(self.assigned_date)
