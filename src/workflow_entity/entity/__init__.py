"""
Workflow entities - adapters between host events and workflow rules.
"""

from .base import DisplayTextProvider, Entity, UrlProvider
from .file_entity import (
    DISPLAY_TEMPLATES,
    NODE_PAIR_KINDS,
    SINGLE_NODE_KINDS,
    TAG_ASSIGNED_TEMPLATE,
    FileEntity,
)

__all__ = [
    "DisplayTextProvider",
    "Entity",
    "UrlProvider",
    "DISPLAY_TEMPLATES",
    "NODE_PAIR_KINDS",
    "SINGLE_NODE_KINDS",
    "TAG_ASSIGNED_TEMPLATE",
    "FileEntity",
]
