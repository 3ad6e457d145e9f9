"""Extraction of raw doc comments for resolved items."""

from collections.abc import Iterable
from typing import NamedTuple

from rustdoc_comments.item_descriptor import ItemId
from rustdoc_comments.item_graph import ItemGraph


class CollectedComment(NamedTuple):
    """A doc comment paired with the name of the item it documents."""

    name: str
    doc: str


def collect(graph: ItemGraph, ids: Iterable[ItemId]) -> list[CollectedComment]:
    """Return (name, doc) for each documented item, in the order given.

    Undocumented items are skipped; empty docs are kept as they are.
    """
    out: list[CollectedComment] = []
    for item_id in ids:
        item = graph.get(item_id)
        if item is None or item.doc is None:
            continue
        out.append(CollectedComment(item.name or "", item.doc))
    return out
