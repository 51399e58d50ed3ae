"""Core grouping and session primitives for the word finder."""

from .grouping import KeySelector, group_by, pluralize
from .session import RequestSequencer, SavedWordList

__all__ = [
    "KeySelector",
    "group_by",
    "pluralize",
    "RequestSequencer",
    "SavedWordList",
]
