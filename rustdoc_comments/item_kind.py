"""Closed set of item kinds and the kind selector used by queries."""

from enum import Enum

from rustdoc_comments.errors import InvalidQueryError

WILDCARD_KINDS = {"any", "all", "*"}


class ItemKind(Enum):
    """Kind of an item in the documentation index."""

    MODULE = "module"
    FUNCTION = "function"
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    CONSTANT = "constant"
    TYPE_ALIAS = "type_alias"
    OTHER = "other"
    # Structural kinds; followed or skipped while walking, never selectable.
    USE = "use"
    IMPL = "impl"


# rustdoc `inner` tags that do not share their name with an ItemKind value.
_TAG_ALIASES = {
    "import": ItemKind.USE,
    "typedef": ItemKind.TYPE_ALIAS,
    "assoc_const": ItemKind.CONSTANT,
    "method": ItemKind.FUNCTION,
}

SELECTABLE_KINDS = tuple(
    k for k in ItemKind if k not in {ItemKind.USE, ItemKind.IMPL}
)


def kind_from_tag(tag: str) -> ItemKind:
    """Map a rustdoc `inner` tag onto an ItemKind; unknown tags are OTHER."""
    t = tag.lower()
    if t in _TAG_ALIASES:
        return _TAG_ALIASES[t]
    try:
        return ItemKind(t)
    except ValueError:
        return ItemKind.OTHER


def parse_kind_filter(value: str | None) -> ItemKind | None:
    """Parse a user-supplied kind; None means any kind."""
    if value is None:
        return None
    v = value.strip().lower().replace("-", "_")
    if v in WILDCARD_KINDS:
        return None
    if v == "typedef":
        v = ItemKind.TYPE_ALIAS.value
    for kind in SELECTABLE_KINDS:
        if kind.value == v:
            return kind
    choices = ", ".join([k.value for k in SELECTABLE_KINDS] + ["any"])
    msg = f"Unknown item kind '{value}' (choose from: {choices})"
    raise InvalidQueryError(msg)


def kind_matches(kind: ItemKind, kind_filter: ItemKind | None) -> bool:
    """Check whether an item kind passes the filter."""
    if kind in {ItemKind.USE, ItemKind.IMPL}:
        return False
    return kind_filter is None or kind is kind_filter
