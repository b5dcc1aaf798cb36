"""User contexts and their storage."""

from .models import Categories, Category, Context, Tag, Tags, UserContext
from .store import DEFAULT_CONTEXT_NAME, ContextStore

__all__ = [
    "DEFAULT_CONTEXT_NAME",
    "Categories",
    "Category",
    "Context",
    "ContextStore",
    "Tag",
    "Tags",
    "UserContext",
]
