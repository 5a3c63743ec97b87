"""
Relation storage shared by the mutable resource and the builder.

Relations are held in sequence form. The HAL document shape (a bare item
for a single value, a list for several) is produced on export and undone on
adoption, so the collapse/expand rule lives only here.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
)

T = TypeVar("T")

FilterCallback = Callable[[T, int, Sequence[T]], Any]

# HAL clients expect curies as a list even when only one is declared.
ALWAYS_SEQUENCE = frozenset({"curies"})


def select(
    items: Sequence[T],
    where: Optional[FilterCallback] = None,
    begin: Optional[int] = None,
    end: Optional[int] = None,
) -> List[T]:
    """
    Filter then slice.
    `where` receives (item, index, items) with the unfiltered sequence.
    `begin`/`end` follow Python slice semantics; end=0 yields an empty list.
    """
    if where is not None:
        items = [item for index, item in enumerate(items) if where(item, index, items)]
    return list(items[begin:end])


class RelationStore(Generic[T]):
    """Ordered mapping of relation name to an ordered list of items."""

    def __init__(self, keep_sequence: Iterable[str] = ALWAYS_SEQUENCE):
        self._rels: Dict[str, List[T]] = {}
        self.keep_sequence = frozenset(keep_sequence)

    @classmethod
    def from_json(
        cls,
        raw: Mapping[str, Any],
        convert: Callable[[Any], T],
        keep_sequence: Iterable[str] = ALWAYS_SEQUENCE,
    ) -> "RelationStore[T]":
        """Expand a `_links`/`_embedded` object; empty relations are dropped."""
        store: RelationStore[T] = cls(keep_sequence)
        for rel, value in raw.items():
            values = value if isinstance(value, list) else [value]
            if values:
                store._rels[rel] = [convert(v) for v in values]
        return store

    def compact(self, dump: Callable[[T], Any] = lambda item: item) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for rel, items in self._rels.items():
            if len(items) == 1 and rel not in self.keep_sequence:
                out[rel] = dump(items[0])
            else:
                out[rel] = [dump(item) for item in items]
        return out

    def rels(self) -> List[str]:
        return list(self._rels)

    def get(self, rel: str) -> List[T]:
        return list(self._rels.get(rel, ()))

    def append(self, rel: str, items: Iterable[T]) -> None:
        self._rels.setdefault(rel, []).extend(items)

    def insert(self, rel: str, index: int, items: Iterable[T]) -> None:
        """Splice `items` in at `index`; a negative index appends."""
        items = list(items)
        if not items:
            return
        if index < 0 or rel not in self._rels:
            self.append(rel, items)
            return
        current = self._rels[rel]
        current[index:index] = items

    def remove(self, rel: str, where: Optional[FilterCallback] = None) -> int:
        """
        Drop the whole relation, or only the items matching `where`.
        Returns how many items were removed; an unknown rel removes nothing.
        """
        items = self._rels.get(rel)
        if items is None:
            return 0
        if where is None:
            del self._rels[rel]
            return len(items)

        kept = [item for index, item in enumerate(items) if not where(item, index, items)]
        removed = len(items) - len(kept)
        if kept:
            self._rels[rel] = kept
        else:
            del self._rels[rel]
        return removed

    def __contains__(self, rel: object) -> bool:
        return rel in self._rels

    def __iter__(self) -> Iterator[str]:
        return iter(self._rels)

    def __len__(self) -> int:
        return len(self._rels)

    def __repr__(self) -> str:
        counts = {rel: len(items) for rel, items in self._rels.items()}
        return f"{type(self).__name__}({counts!r})"


__all__ = ["ALWAYS_SEQUENCE", "FilterCallback", "RelationStore", "select"]
