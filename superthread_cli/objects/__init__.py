"""
Response object model for superthread-cli.

Re-exports the public API so callers can use:
    from superthread_cli.objects import Card, Collection, construct_from
"""

from superthread_cli.objects._base import (
    DISCRIMINATOR_KEY,
    ArchivableMixin,
    Field,
    SuperthreadObject,
    TimestampsMixin,
    construct_from,
    to_plain,
)
from superthread_cli.objects._boards import Board, List
from superthread_cli.objects._cards import Card, Checklist, ChecklistItem, LinkedCard, Tag
from superthread_cli.objects._collection import ITEMS_KEYS, Collection
from superthread_cli.objects._docs import Comment, Note, Page
from superthread_cli.objects._people import Member, User
from superthread_cli.objects._planning import Project, Space, Sprint
from superthread_cli.objects._registry import TypeRegistry, build_registry
from superthread_cli.objects._types import OBJECT_TYPES, REGISTRY

__all__ = [
    "DISCRIMINATOR_KEY",
    "ITEMS_KEYS",
    "OBJECT_TYPES",
    "REGISTRY",
    "ArchivableMixin",
    "Board",
    "Card",
    "Checklist",
    "ChecklistItem",
    "Collection",
    "Comment",
    "Field",
    "LinkedCard",
    "List",
    "Member",
    "Note",
    "Page",
    "Project",
    "Space",
    "Sprint",
    "SuperthreadObject",
    "Tag",
    "TimestampsMixin",
    "TypeRegistry",
    "User",
    "build_registry",
    "construct_from",
    "to_plain",
]
