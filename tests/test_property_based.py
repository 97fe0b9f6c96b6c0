"""Property-based tests for the file entity.

Uses Hypothesis to generate arbitrary events and verify the invariants every
entity operation must keep: resolution is stable, rendering never raises and
internal tags never leak into user-facing text.
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from workflow_entity.domain.value_objects import Node, Storage, SystemTag, User
from workflow_entity.entity.file_entity import FileEntity
from workflow_entity.events.catalog import build_event_catalog
from workflow_entity.events.dispatcher import GenericEvent, MapperEvent
from workflow_entity.events.envelope import (
    TAG_ASSIGN_CHANNEL,
    EventKind,
    NodePair,
    SingleNode,
    TagMapping,
)
from workflow_entity.infrastructure.routing import RouteUrlGenerator
from workflow_entity.infrastructure.session import CapturingRuleMatcher, StaticUserSession
from workflow_entity.infrastructure.sharing import InMemoryShareManager
from workflow_entity.infrastructure.storage import InMemoryRootFolder
from workflow_entity.infrastructure.tags import InMemoryTagManager
from workflow_entity.infrastructure.translation import CatalogTranslator, substitute

ALICE = User("alice", "Alice")
NODE_IDS = st.integers(min_value=1, max_value=5)

names = st.text(min_size=1, max_size=20)
nodes = st.builds(
    lambda node_id, name: Node(
        id=node_id, name=name, owner=ALICE, storage=Storage("home::alice"), internal_path=f"files/{node_id}"
    ),
    NODE_IDS,
    names,
)
optional_nodes = st.one_of(st.none(), nodes)
not_nodes = st.one_of(st.text(max_size=10), st.integers(), st.tuples(st.integers()))
members = st.one_of(optional_nodes, not_nodes)

envelopes = st.one_of(
    st.builds(SingleNode, members),
    st.builds(NodePair, members, members),
    st.builds(
        TagMapping,
        st.sampled_from(["files", "calendar", "comments", ""]),
        st.one_of(NODE_IDS.map(str), st.text(max_size=5)),
        st.lists(st.sampled_from(["1", "2", "3", "404"]), max_size=4).map(tuple),
    ),
)
raw_events = st.one_of(
    envelopes,
    st.builds(GenericEvent, st.one_of(
        nodes, st.lists(members, min_size=2, max_size=2), st.tuples(members, members), st.integers(), st.none()
    )),
    st.builds(MapperEvent, st.just(TAG_ASSIGN_CHANNEL), st.sampled_from(["files", "calendar"]), NODE_IDS.map(str),
              st.lists(st.sampled_from(["1", "2", "3"]), max_size=3)),
    st.none(),
    st.integers(),
    st.text(max_size=10),
)
event_names = st.one_of(
    st.sampled_from([kind.channel for kind in EventKind]),
    st.text(max_size=30),
)


def build_entity(tag_names=("Visible", "Hidden", "Other")):
    root = InMemoryRootFolder()
    for node_id in range(1, 4):
        root.add(Node(id=node_id, name=f"file{node_id}.txt", owner=ALICE,
                      storage=Storage("home::alice"), internal_path=f"files/file{node_id}.txt"))

    tags = InMemoryTagManager()
    tags.add(SystemTag("1", tag_names[0], user_visible=True))
    tags.add(SystemTag("2", tag_names[1], user_visible=False))
    tags.add(SystemTag("3", tag_names[2], user_visible=True))

    return FileEntity(
        l10n=CatalogTranslator(),
        url_generator=RouteUrlGenerator("https://cloud.example.com"),
        root=root,
        share_manager=InMemoryShareManager(root),
        user_session=StaticUserSession(ALICE),
        tag_manager=tags,
    )


@given(event_names, raw_events)
@settings(max_examples=200)
def test_entity_operations_never_raise(event_name, event) -> None:
    """Every public operation degrades instead of raising."""
    entity = build_entity()
    matcher = CapturingRuleMatcher()

    context = entity.prepare_rule_matcher(matcher, event_name, event)
    context = context or entity.create_context(event_name, event)

    assert isinstance(entity.get_display_text(context), str)
    assert isinstance(entity.get_url(context), str)
    assert isinstance(entity.is_legitimated_for_user_id(context, "bob"), bool)


@given(event_names, raw_events)
def test_resolution_is_idempotent(event_name, event) -> None:
    """Resolving twice gives the same node or the same failure."""
    entity = build_entity()
    context = entity.create_context(event_name, event)

    first = entity.resolve_subject(context)
    second = entity.resolve_subject(context)

    assert first.is_success() == second.is_success()
    if first.is_success():
        assert first.value() is second.value()
    else:
        assert first.error() is second.error()


@given(event_names, raw_events)
def test_separate_contexts_agree(event_name, event) -> None:
    """Two fresh contexts for the same event resolve alike."""
    entity = build_entity()
    first = entity.resolve_subject(entity.create_context(event_name, event))
    second = entity.resolve_subject(entity.create_context(event_name, event))

    assert first.is_success() == second.is_success()
    if first.is_success():
        assert first.value() == second.value()


@given(raw_events)
def test_unresolved_events_are_empty_and_denied(event) -> None:
    """Whenever resolution fails, text and URL are empty and access is denied."""
    entity = build_entity()
    context = entity.create_context(EventKind.TAG_ASSIGNED.channel, event)

    if entity.resolve_subject(context).is_failure():
        assert entity.get_display_text(context) == ""
        assert entity.get_url(context) == ""
        assert entity.is_legitimated_for_user_id(context, "alice") is False


@given(
    st.lists(st.sampled_from(["1", "2", "3"]), min_size=1, max_size=6),
    st.text(alphabet=st.characters(min_codepoint=0x4e00, max_codepoint=0x4fff), min_size=3, max_size=8),
)
def test_hidden_tags_never_rendered(tag_ids, hidden_name) -> None:
    """The name of a tag users cannot see never appears in display text."""
    entity = build_entity(tag_names=("Visible", hidden_name, "Other"))
    context = entity.create_context(TAG_ASSIGN_CHANNEL, TagMapping("files", "1", tuple(tag_ids)))

    text = entity.get_display_text(context)

    assert hidden_name not in text
    if set(tag_ids) == {"2"}:
        assert text == ""
    else:
        assert text.startswith("Alice assigned ")
        assert text.endswith(" to file1.txt")


@given(nodes, nodes)
def test_pair_subject_is_target(source, target) -> None:
    entity = build_entity()
    for kind in (EventKind.RENAMED, EventKind.COPIED):
        context = entity.create_context(kind.channel, NodePair(source, target))
        assert entity.resolve_subject(context).value() is target


def test_catalog_is_stable() -> None:
    l10n = CatalogTranslator()
    catalogs = [build_event_catalog(l10n) for _ in range(3)]
    assert catalogs[0] == catalogs[1] == catalogs[2]
    assert len(catalogs[0]) == len(EventKind)


@given(st.text(max_size=20), st.text(max_size=20))
def test_substituted_text_is_not_rescanned(actor, name) -> None:
    """Arguments that look like placeholders come out verbatim."""
    assert substitute('%s created %s', [actor + '%s', name]) == f"{actor}%s created {name}"
