"""One class per API resource, composed onto SuperthreadClient."""

from superthread_cli.resources.boards import Boards
from superthread_cli.resources.cards import Cards
from superthread_cli.resources.comments import Comments
from superthread_cli.resources.notes import Notes
from superthread_cli.resources.pages import Pages
from superthread_cli.resources.projects import Projects
from superthread_cli.resources.search import Search
from superthread_cli.resources.spaces import Spaces
from superthread_cli.resources.sprints import Sprints
from superthread_cli.resources.tags import Tags
from superthread_cli.resources.users import Users

__all__ = [
    "Boards",
    "Cards",
    "Comments",
    "Notes",
    "Pages",
    "Projects",
    "Search",
    "Spaces",
    "Sprints",
    "Tags",
    "Users",
]
