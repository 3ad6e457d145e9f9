"""Enumeration of the names under which items are reachable from a module."""

import logging
from collections.abc import Iterator

from rustdoc_comments.item_descriptor import ItemDescriptor, ItemId
from rustdoc_comments.item_graph import ItemGraph
from rustdoc_comments.item_kind import ItemKind

logger = logging.getLogger(__name__)


def follow_reexport(graph: ItemGraph, item: ItemDescriptor) -> ItemDescriptor | None:
    """Follow a chain of re-exports to the item it finally names.

    Returns the item itself when it is not a re-export, and None when the chain
    leaves the index or loops back on itself.
    """
    seen: set[ItemId] = set()
    current = item
    while current.kind is ItemKind.USE:
        if current.id in seen:
            logger.debug("Re-export cycle through %s; skipping", current.id)
            return None
        seen.add(current.id)
        if current.target is None:
            return None
        nxt = graph.get(current.target)
        if nxt is None:
            logger.debug(
                "Re-export %s points at external item %s", current.id, current.target
            )
            return None
        current = nxt
    return current


def visible_members(graph: ItemGraph, item_id: ItemId) -> list[tuple[str, ItemId]]:
    """List (visible name, resolved id) pairs for the members of an item."""
    return list(_iter_members(graph, item_id, set()))


def _iter_members(
    graph: ItemGraph, item_id: ItemId, expanded: set[ItemId]
) -> Iterator[tuple[str, ItemId]]:
    if item_id in expanded:
        return
    expanded.add(item_id)
    item = graph.get(item_id)
    if not item:
        return
    # (name, id, came through a glob) in declaration order
    members: list[tuple[str, ItemId, bool]] = []
    for child_id in item.children:
        child = graph.get(child_id)
        if child is None:
            continue
        if child.kind is not ItemKind.USE:
            if child.name is not None:
                members.append((child.name, child.id, False))
            continue
        target = follow_reexport(graph, child)
        if target is None:
            continue
        if child.is_glob:
            members.extend(
                (name, member_id, True)
                for name, member_id in _iter_members(graph, target.id, expanded)
            )
            continue
        # `pub use a::b as c` is visible as `c`
        name = child.name or target.name
        if name is not None:
            members.append((name, target.id, False))

    # Items named in the module itself shadow glob imports of the same name.
    explicit = {name for name, _, from_glob in members if not from_glob}
    for name, member_id, from_glob in members:
        if from_glob and name in explicit:
            continue
        yield name, member_id
