"""In-memory graph of index items connected by opaque identifiers."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from rustdoc_comments.item_descriptor import ItemDescriptor, ItemId
from rustdoc_comments.item_kind import ItemKind

INDEX_ROOT_ID: ItemId = "<index-root>"


class ItemGraph:
    """Read-only arena of item descriptors keyed by id, with a root item.

    Iteration order is the order the items were given in, which mirrors the
    item ordering of the index file.
    """

    def __init__(
        self,
        items: Iterable[ItemDescriptor],
        root: ItemId,
        *,
        crate_version: str | None = None,
        format_version: int | None = None,
    ) -> None:
        """Build the graph; later duplicates of an id replace earlier ones."""
        by_id: dict[ItemId, ItemDescriptor] = {}
        for item in items:
            by_id[item.id] = item
        if root not in by_id:
            msg = f"Root item {root!r} is not part of the graph"
            raise ValueError(msg)
        self._items = MappingProxyType(by_id)
        self._positions = MappingProxyType({uid: i for i, uid in enumerate(by_id)})
        self.root = root
        self.crate_version = crate_version
        self.format_version = format_version

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemDescriptor]:
        return iter(self._items.values())

    def get(self, item_id: ItemId) -> ItemDescriptor | None:
        """Return the descriptor for an id, or None for external ids."""
        return self._items.get(item_id)

    def position(self, item_id: ItemId) -> int:
        """Return the insertion index of an id (used for stable ordering)."""
        return self._positions[item_id]

    def associated_methods(self, item_id: ItemId) -> list[ItemId]:
        """Return the items of the inherent impl blocks of a struct or enum.

        Trait impls are skipped, as are impl blocks and items that are not in
        the index.
        """
        item = self._items.get(item_id)
        if not item:
            return []
        methods: list[ItemId] = []
        for impl_id in item.impls:
            impl = self._items.get(impl_id)
            if not impl or impl.kind is not ItemKind.IMPL or impl.is_trait_impl:
                continue
            methods.extend(m for m in impl.children if m in self._items)
        return methods
