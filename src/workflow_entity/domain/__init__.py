"""
Domain Layer - Workflow Entity

Value objects handed over by the host, the interfaces of the host services
the entity consumes, and the Result type used to report resolution failures.
"""

from .value_objects import AccessList, Node, Storage, SystemTag, User
from .collaborators import (
    NodeRepository,
    RuleMatcher,
    ShareManager,
    TagManager,
    Translator,
    UrlGenerator,
    UserSession,
)
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    try_catch,
    DomainError,
    NotFoundError,
    InvalidPathError,
    TagNotFoundError,
)

__all__ = [
    # Value objects
    "AccessList",
    "Node",
    "Storage",
    "SystemTag",
    "User",
    # Collaborators
    "NodeRepository",
    "RuleMatcher",
    "ShareManager",
    "TagManager",
    "Translator",
    "UrlGenerator",
    "UserSession",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "try_catch",
    "DomainError",
    "NotFoundError",
    "InvalidPathError",
    "TagNotFoundError",
]
