"""Conversion of raw rustdoc JSON items into item descriptors."""

from typing import Any

from rustdoc_comments.item_descriptor import ItemDescriptor, ItemId, Visibility
from rustdoc_comments.item_kind import ItemKind, kind_from_tag


def normalize_id(value: object) -> ItemId:
    """Normalize an integer or string id to the string form used as key."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = f"invalid item id {value!r}"
        raise ValueError(msg)
    return str(value)


def _id_list(values: object) -> tuple[ItemId, ...]:
    if values is None:
        return ()
    if not isinstance(values, list):
        msg = f"expected a list of ids, got {type(values).__name__}"
        raise ValueError(msg)
    return tuple(normalize_id(v) for v in values)


def parse_visibility(raw: object) -> Visibility:
    """Parse the `visibility` field of a rustdoc item."""
    if isinstance(raw, str):
        try:
            return Visibility(raw)
        except ValueError:
            pass
    elif isinstance(raw, dict) and "restricted" in raw:
        return Visibility.RESTRICTED
    msg = f"unknown visibility {raw!r}"
    raise ValueError(msg)


def split_inner(raw: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return the tag and payload of the externally tagged `inner` field."""
    inner = raw.get("inner")
    # Unit-like variants are serialized as a bare string.
    if isinstance(inner, str):
        return inner, {}
    if not isinstance(inner, dict) or len(inner) != 1:
        msg = f"item {raw.get('id')!r} has no tagged 'inner' object"
        raise ValueError(msg)
    tag, payload = next(iter(inner.items()))
    return tag, payload if isinstance(payload, dict) else {}


def parse_item(raw: dict[str, Any]) -> ItemDescriptor:
    """Build an ItemDescriptor from one entry of the rustdoc `index` map.

    Raises ValueError when the entry does not have the expected shape.
    """
    item_id = normalize_id(raw.get("id"))
    tag, payload = split_inner(raw)
    kind = kind_from_tag(tag)

    name = raw.get("name")
    docs = raw.get("docs")
    children: tuple[ItemId, ...] = ()
    impls: tuple[ItemId, ...] = ()
    target: ItemId | None = None
    is_glob = False
    is_trait_impl = False

    if kind is ItemKind.MODULE:
        children = _id_list(payload.get("items"))
    elif kind is ItemKind.USE:
        # The alias a re-export is visible under lives in the payload.
        name = payload.get("name") or name
        raw_target = payload.get("id")
        target = normalize_id(raw_target) if raw_target is not None else None
        is_glob = bool(payload.get("is_glob", payload.get("glob", False)))
    elif kind is ItemKind.ENUM:
        children = _id_list(payload.get("variants"))
        impls = _id_list(payload.get("impls"))
    elif kind is ItemKind.TRAIT:
        children = _id_list(payload.get("items"))
    elif kind is ItemKind.IMPL:
        children = _id_list(payload.get("items"))
        is_trait_impl = payload.get("trait") is not None
    elif "impls" in payload:
        # structs and unions
        impls = _id_list(payload.get("impls"))

    if name is not None and not isinstance(name, str):
        msg = f"item {item_id!r} has a non-string name"
        raise ValueError(msg)
    if docs is not None and not isinstance(docs, str):
        msg = f"item {item_id!r} has non-string docs"
        raise ValueError(msg)

    span = raw.get("span")
    return ItemDescriptor(
        id=item_id,
        name=name,
        kind=kind,
        doc=docs,
        visibility=parse_visibility(raw.get("visibility", "default")),
        children=children,
        target=target,
        is_glob=is_glob,
        impls=impls,
        is_trait_impl=is_trait_impl,
        span=span if isinstance(span, dict) else None,
    )
