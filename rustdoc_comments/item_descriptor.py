"""Data model for a single entry of the documentation index."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rustdoc_comments.item_kind import ItemKind

ItemId = str


class Visibility(Enum):
    """Declared visibility of an item."""

    PUBLIC = "public"
    DEFAULT = "default"  # private, or inherited (enum variants, trait items)
    CRATE = "crate"
    RESTRICTED = "restricted"


@dataclass(frozen=True)
class ItemDescriptor:
    """Represents a documented item (module, function, re-export, etc.)."""

    id: ItemId
    name: str | None
    kind: ItemKind
    doc: str | None  # None: undocumented, "": documented but empty
    visibility: Visibility = Visibility.PUBLIC
    children: tuple[ItemId, ...] = ()
    target: ItemId | None = None  # re-export target, USE only
    is_glob: bool = False
    impls: tuple[ItemId, ...] = ()
    is_trait_impl: bool = False
    span: dict[str, Any] | None = None

    @property
    def is_public(self) -> bool:
        """Check if the item is part of the public API."""
        return self.visibility is Visibility.PUBLIC
