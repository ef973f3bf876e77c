"""superthread-cli — SDK and CLI for the Superthread project management API."""

from superthread_cli.client import SuperthreadClient
from superthread_cli.config import VERSION, Configuration
from superthread_cli.exceptions import (
    ApiError,
    AuthenticationError,
    CliError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    PathValidationError,
    RateLimitError,
    ServerError,
    SetupError,
    ValidationError,
)
from superthread_cli.objects import (
    Board,
    Card,
    Collection,
    Comment,
    List,
    Note,
    Page,
    Project,
    Space,
    Sprint,
    SuperthreadObject,
    User,
)

__version__ = VERSION

__all__ = [
    "VERSION",
    "__version__",
    "SuperthreadClient",
    "Configuration",
    "CliError",
    "SetupError",
    "PathValidationError",
    "ApiError",
    "ClientError",
    "ValidationError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "SuperthreadObject",
    "Collection",
    "User",
    "Space",
    "Board",
    "List",
    "Card",
    "Project",
    "Sprint",
    "Page",
    "Note",
    "Comment",
]
