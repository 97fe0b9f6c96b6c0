"""Base entity interfaces for the workflow engine."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..domain.collaborators import RuleMatcher
from ..events.catalog import EntityEvent
from ..events.envelope import ResolvedContext


class Entity(ABC):
    """Something workflow rules can be written against."""

    @abstractmethod
    def get_name(self) -> str:
        """Return the localized entity name."""
        pass

    @abstractmethod
    def get_icon(self) -> str:
        """Return the URL of the entity icon."""
        pass

    @abstractmethod
    def get_events(self) -> List[EntityEvent]:
        """Return the events rules on this entity can be triggered by."""
        pass

    @abstractmethod
    def create_context(self, event_name: str, event: Any) -> ResolvedContext:
        """Wrap a raw event for the other entity operations."""
        pass

    @abstractmethod
    def prepare_rule_matcher(self, rule_matcher: RuleMatcher, event_name: str, event: Any) -> Optional[ResolvedContext]:
        """Feed the rule matcher with what this entity knows about the event.

        Returns:
            The context built for the event, or None for events the entity
            ignores
        """
        pass

    @abstractmethod
    def is_legitimated_for_user_id(self, context: ResolvedContext, uid: str) -> bool:
        """Check whether ``uid`` may see the object behind the event."""
        pass


class DisplayTextProvider(ABC):
    """Entities that can describe an event in a sentence."""

    @abstractmethod
    def get_display_text(self, context: ResolvedContext, verbosity: int = 0) -> str:
        pass


class UrlProvider(ABC):
    """Entities that can link to the object behind an event."""

    @abstractmethod
    def get_url(self, context: ResolvedContext) -> str:
        pass
