"""File entity - exposes filesystem events to workflow rules.

The entity turns a raw filesystem or tag event into a subject node for the
rule matcher, decides whether a user may see that node and renders a short
localized sentence describing what happened.

Every operation is fail-soft. An event whose node cannot be resolved yields
no rule matcher context, a denied authorization, an empty sentence and an
empty URL.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional

from ..domain.collaborators import (
    NodeRepository,
    RuleMatcher,
    ShareManager,
    TagManager,
    Translator,
    UrlGenerator,
    UserSession,
)
from ..domain.result import (
    InvalidPathError,
    NotFoundError,
    Result,
    TagNotFoundError,
    failure,
    success,
    try_catch,
)
from ..domain.value_objects import Node
from ..events.catalog import EntityEvent, build_event_catalog
from ..events.dispatcher import envelope_from_event
from ..events.envelope import (
    EventKind,
    NodePair,
    ResolvedContext,
    SingleNode,
    TagMapping,
    is_envelope,
)
from ..models.config import EntityConfig
from .base import DisplayTextProvider, Entity, UrlProvider

logger = logging.getLogger(__name__)

SINGLE_NODE_KINDS: FrozenSet[EventKind] = frozenset({
    EventKind.CREATED,
    EventKind.UPDATED,
    EventKind.DELETED,
    EventKind.TOUCHED,
})
NODE_PAIR_KINDS: FrozenSet[EventKind] = frozenset({
    EventKind.RENAMED,
    EventKind.COPIED,
})

DISPLAY_TEMPLATES: Dict[EventKind, str] = {
    EventKind.CREATED: '%s created %s',
    EventKind.UPDATED: '%s modified %s',
    EventKind.DELETED: '%s deleted %s',
    EventKind.TOUCHED: '%s accessed %s',
    EventKind.RENAMED: '%s renamed %s',
    EventKind.COPIED: '%s copied %s',
}
TAG_ASSIGNED_TEMPLATE = '%s assigned %s to %s'


class FileEntity(Entity, DisplayTextProvider, UrlProvider):
    """
    Workflow entity for files and folders.

    The instance holds only its collaborators. Everything specific to one
    event lives in the ResolvedContext built by ``create_context``, so a
    single FileEntity can serve any number of events.
    """

    def __init__(
        self,
        l10n: Translator,
        url_generator: UrlGenerator,
        root: NodeRepository,
        share_manager: ShareManager,
        user_session: UserSession,
        tag_manager: TagManager,
        config: Optional[EntityConfig] = None
    ):
        self._l10n = l10n
        self._url_generator = url_generator
        self._root = root
        self._share_manager = share_manager
        self._user_session = user_session
        self._tag_manager = tag_manager
        self._config = config or EntityConfig.default()

    def get_name(self) -> str:
        return self._l10n.t('File')

    def get_icon(self) -> str:
        return self._url_generator.image_path(self._config.icon_app, self._config.icon_path)

    def get_events(self) -> List[EntityEvent]:
        return build_event_catalog(self._l10n)

    def create_context(self, event_name: Any, event: Any) -> ResolvedContext:
        """Build the per-event context.

        ``event`` may be a raw host event or an envelope. Events the entity
        does not understand are kept as they are; the context then reports
        itself as unrecognized.
        """
        envelope = envelope_from_event(event)
        return ResolvedContext.for_event(event_name, envelope if envelope is not None else event)

    def prepare_rule_matcher(self, rule_matcher: RuleMatcher, event_name: Any, event: Any) -> Optional[ResolvedContext]:
        context = self.create_context(event_name, event)
        if not context.is_recognized:
            return None

        subject = self.resolve_subject(context)
        if subject.is_failure():
            return context

        node = subject.value()
        file_info = try_catch(lambda: (node.storage, node.internal_path), NotFoundError)
        if file_info.is_failure():
            logger.debug(f"No file info for node of {context.event_name}: {file_info.error()}")
            return context

        storage, internal_path = file_info.value()
        rule_matcher.set_entity_subject(self, node)
        rule_matcher.set_file_info(storage, internal_path)
        return context

    def resolve_subject(self, context: ResolvedContext) -> Result[Node, NotFoundError]:
        """Find the node an event is about.

        The outcome is cached on the context, so repeated calls for the same
        event return the same node or the same failure without another lookup.
        """
        cached = context.cached_subject
        if cached is not None:
            return cached

        result = self._resolve(context.kind, context.envelope)
        if result.is_failure():
            logger.debug(f"Cannot resolve subject of {context.event_name or context.kind}: {result.error()}")
        return context.remember_subject(result)

    def _resolve(self, kind: Optional[EventKind], envelope: Any) -> Result[Node, NotFoundError]:
        if not is_envelope(envelope):
            return failure(NotFoundError(f"Unsupported event payload {type(envelope).__name__}"))

        if kind in SINGLE_NODE_KINDS:
            if isinstance(envelope, SingleNode) and isinstance(envelope.node, Node):
                return success(envelope.node)
        elif kind in NODE_PAIR_KINDS:
            if isinstance(envelope, NodePair) and isinstance(envelope.target, Node):
                return success(envelope.target)
        elif kind is EventKind.TAG_ASSIGNED:
            if isinstance(envelope, TagMapping):
                return self._resolve_tag_mapping(envelope)
        else:
            return failure(NotFoundError("Unknown event kind"))

        return failure(NotFoundError(f"{type(envelope).__name__} payload does not match {kind.name}"))

    def _resolve_tag_mapping(self, mapping: TagMapping) -> Result[Node, NotFoundError]:
        if mapping.object_type != self._config.object_type:
            return failure(NotFoundError(f"Tags were assigned to a {mapping.object_type} object"))

        try:
            object_id = int(mapping.object_id)
        except (TypeError, ValueError):
            return failure(NotFoundError(f"Invalid object id {mapping.object_id!r}"))

        # The same object may be reachable under several paths; the first one wins.
        return try_catch(lambda: self._root.get_by_id(object_id), NotFoundError).flat_map(
            lambda nodes: success(nodes[0]) if nodes else failure(NotFoundError(f"No node with id {object_id}"))
        )

    def is_legitimated_for_user_id(self, context: ResolvedContext, uid: str) -> bool:
        subject = self.resolve_subject(context)
        if subject.is_failure():
            return False
        node = subject.value()

        owner = try_catch(lambda: node.owner, NotFoundError)
        if owner.is_failure():
            return False
        if owner.value() is not None and owner.value().uid == uid:
            return True

        access_list = try_catch(
            lambda: self._share_manager.get_access_list(node, include_owner=True, transitive=True),
            NotFoundError
        )
        return access_list.is_success() and uid in access_list.value().users

    def get_display_text(self, context: ResolvedContext, verbosity: int = 0) -> str:
        # verbosity is accepted for callers asking for more detail; all levels render alike
        subject = self.resolve_subject(context)
        if subject.is_failure():
            return ''
        node = subject.value()

        user = self._user_session.get_user()
        actor = user.display_name if user else self._l10n.t('Someone')

        if context.kind in DISPLAY_TEMPLATES:
            return self._l10n.t(DISPLAY_TEMPLATES[context.kind], [actor, node.name])

        if context.kind is EventKind.TAG_ASSIGNED:
            tag_string = ', '.join(self._visible_tag_names(context.envelope))
            if tag_string == '':
                return ''
            return self._l10n.t(TAG_ASSIGNED_TEMPLATE, [actor, tag_string, node.name])

        return ''

    def _visible_tag_names(self, mapping: TagMapping) -> List[str]:
        """Names of the assigned tags users are allowed to see."""
        if not mapping.tag_ids:
            return []

        tags = try_catch(lambda: self._tag_manager.get_tags_by_ids(list(mapping.tag_ids)), TagNotFoundError)
        if tags.is_failure():
            logger.debug(f"Tag lookup failed for {mapping.tag_ids}: {tags.error()}")
            return []

        return [tag.name for tag in tags.value() if tag.is_user_visible()]

    def get_url(self, context: ResolvedContext) -> str:
        subject = self.resolve_subject(context)
        if subject.is_failure():
            return ''

        node = subject.value()
        link = try_catch(
            lambda: self._url_generator.link_to_route_absolute(
                self._config.show_file_route, {'fileid': node.id}
            ),
            (InvalidPathError, NotFoundError)
        )
        return link.or_else('')
