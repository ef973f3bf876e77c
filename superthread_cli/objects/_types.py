"""The default discriminator table, built once at import and frozen."""

from superthread_cli.objects._base import SuperthreadObject
from superthread_cli.objects._boards import Board, List
from superthread_cli.objects._cards import Card, Checklist, ChecklistItem, Tag
from superthread_cli.objects._docs import Comment, Note, Page
from superthread_cli.objects._people import User
from superthread_cli.objects._planning import Project, Space, Sprint
from superthread_cli.objects._registry import build_registry

OBJECT_TYPES = (
    ("card", Card),
    ("board", Board),
    ("list", List),
    ("user", User),
    ("project", Project),
    ("space", Space),
    ("sprint", Sprint),
    ("comment", Comment),
    ("page", Page),
    ("note", Note),
    ("tag", Tag),
    ("checklist", Checklist),
    ("checklist_item", ChecklistItem),
)

REGISTRY = build_registry(OBJECT_TYPES, fallback=SuperthreadObject)
