"""Logic for loading a rustdoc JSON documentation index into an ItemGraph."""

import json
import logging
from pathlib import Path
from typing import Any

from rustdoc_comments.errors import IndexLoadError, SchemaMismatchError
from rustdoc_comments.item_descriptor import ItemDescriptor
from rustdoc_comments.item_graph import INDEX_ROOT_ID, ItemGraph
from rustdoc_comments.item_kind import ItemKind
from rustdoc_comments.parse_item import normalize_id, parse_item

logger = logging.getLogger(__name__)

# FORMAT_TOOLCHAIN is the nightly that writes FORMAT_VERSION; update both together.
FORMAT_VERSION = 39
FORMAT_TOOLCHAIN = "nightly-2025-01-15"


def load_index(
    path: Path | str, expected_format_version: int = FORMAT_VERSION
) -> ItemGraph:
    """Read a rustdoc JSON file and build its item graph."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IndexLoadError(p, str(exc)) from exc
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise IndexLoadError(p, f"invalid JSON ({exc})") from exc
    return parse_index(doc, expected_format_version, source=p)


def parse_index(
    doc: Any,
    expected_format_version: int = FORMAT_VERSION,
    source: object = "<memory>",
) -> ItemGraph:
    """Build an ItemGraph from an already deserialized rustdoc JSON document."""
    if not isinstance(doc, dict):
        raise IndexLoadError(source, "top level is not a JSON object")

    found = doc.get("format_version")
    if found != expected_format_version:
        raise SchemaMismatchError(found, expected_format_version)

    index = doc.get("index")
    if not isinstance(index, dict):
        raise IndexLoadError(source, "missing 'index' object")
    try:
        crate_root = normalize_id(doc.get("root"))
    except ValueError as exc:
        raise IndexLoadError(source, f"missing or invalid 'root' ({exc})") from exc
    if crate_root not in index:
        raise IndexLoadError(source, f"root item {crate_root!r} is not in the index")

    items: list[ItemDescriptor] = [
        ItemDescriptor(
            id=INDEX_ROOT_ID,
            name=None,
            kind=ItemKind.MODULE,
            doc=None,
            children=(crate_root,),
        )
    ]
    for key, raw in index.items():
        if not isinstance(raw, dict):
            raise SchemaMismatchError(
                found, expected_format_version, f"index entry {key!r} is not an object"
            )
        try:
            items.append(parse_item(raw))
        except ValueError as exc:
            raise SchemaMismatchError(found, expected_format_version, str(exc)) from exc

    crate_version = doc.get("crate_version")
    graph = ItemGraph(
        items,
        INDEX_ROOT_ID,
        crate_version=str(crate_version) if crate_version is not None else None,
        format_version=found,
    )
    logger.debug("Loaded %d items from %s", len(graph) - 1, source)
    return graph
