"""Resolution of module paths against an ItemGraph.

Paths are matched one segment at a time against the names items are visible
under, rather than against precomputed canonical paths, so an item re-exported
elsewhere is found under every path it is reachable by.
"""

from collections import deque
from collections.abc import Iterable

from rustdoc_comments.errors import PathNotFoundError
from rustdoc_comments.item_descriptor import ItemId
from rustdoc_comments.item_graph import ItemGraph
from rustdoc_comments.item_kind import ItemKind, kind_matches
from rustdoc_comments.split_module_path import PATH_SEPARATOR, split_module_path
from rustdoc_comments.visible_members import visible_members


def resolve(
    graph: ItemGraph,
    path: str,
    kind: ItemKind | None = None,
    *,
    recursive: bool = False,
) -> list[ItemId]:
    """Resolve a module path to the ids of the matching items.

    The result holds the items the path names plus, for each module among them,
    the module's members (all nested members when `recursive`), filtered by
    `kind` (None keeps every kind) and ordered by position in the index.

    Raises PathNotFoundError when a segment matches nothing.
    """
    segments = split_module_path(path)
    frontier: list[ItemId] = [graph.root]
    for depth, segment in enumerate(segments):
        nxt: dict[ItemId, None] = {}
        for item_id in frontier:
            for name, member_id in visible_members(graph, item_id):
                if name == segment:
                    nxt.setdefault(member_id, None)
        if not nxt:
            prefix = PATH_SEPARATOR.join(segments[:depth])
            raise PathNotFoundError(segment, prefix, path)
        frontier = list(nxt)

    candidates: dict[ItemId, None] = dict.fromkeys(frontier)
    for item_id in frontier:
        item = graph.get(item_id)
        if item and item.kind is ItemKind.MODULE:
            candidates.update(dict.fromkeys(module_members(graph, item_id, recursive)))
    return _select(graph, candidates, kind)


def resolve_all(graph: ItemGraph, kind: ItemKind | None = None) -> list[ItemId]:
    """Return every item of the given kind reachable from the root."""
    return _select(graph, module_members(graph, graph.root, recursive=True), kind)


def module_members(
    graph: ItemGraph, module_id: ItemId, recursive: bool = False
) -> list[ItemId]:
    """Return the ids of a module's members, descending into submodules if asked."""
    found: dict[ItemId, None] = {}
    visited: set[ItemId] = set()
    pending = deque([module_id])
    while pending:
        current = pending.popleft()
        if current in visited:
            continue
        visited.add(current)
        for _, member_id in visible_members(graph, current):
            found.setdefault(member_id, None)
            if recursive:
                member = graph.get(member_id)
                if member and member.kind is ItemKind.MODULE:
                    pending.append(member_id)
    return list(found)


def _select(
    graph: ItemGraph, ids: Iterable[ItemId], kind: ItemKind | None
) -> list[ItemId]:
    selected = []
    for item_id in sorted(set(ids), key=graph.position):
        item = graph.get(item_id)
        if item and kind_matches(item.kind, kind):
            selected.append(item_id)
    return selected
