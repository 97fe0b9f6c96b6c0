"""
Infrastructure layer - in-memory implementations of the host collaborators.
"""

from .routing import DEFAULT_ROUTES, RouteUrlGenerator
from .session import CapturingRuleMatcher, StaticUserSession
from .sharing import InMemoryShareManager, Share
from .storage import InMemoryRootFolder
from .tags import InMemoryTagManager
from .translation import CatalogTranslator, substitute

__all__ = [
    "DEFAULT_ROUTES",
    "RouteUrlGenerator",
    "CapturingRuleMatcher",
    "StaticUserSession",
    "InMemoryShareManager",
    "Share",
    "InMemoryRootFolder",
    "InMemoryTagManager",
    "CatalogTranslator",
    "substitute",
]
