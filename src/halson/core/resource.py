from __future__ import annotations

import copy
import logging
from collections.abc import MutableMapping
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ValidationError

from .codec import Document, dump_document, load_document
from .errors import HalsonValidationError
from .link import Link, LinkLike, as_link, dump_link
from .relations import FilterCallback, RelationStore, select

LINKS = "_links"
EMBEDDED = "_embedded"

M = TypeVar("M", bound=BaseModel)

log = logging.getLogger(__name__)


class HALResource(MutableMapping):
    """
    Mutable HAL document.
    - Own attributes are deep-copied from the source document
    - `_links` values become Link objects, `_embedded` values become
      HALResource instances, recursively
    - Relations are normalized on adoption and compacted on export:
      one value is a bare item, several are a list
    """

    def __init__(self, data: Optional[Document] = None):
        if isinstance(data, HALResource):
            data = data.to_dict()
        self._data: Dict[str, Any] = {}
        for key, value in load_document(data).items():
            self[key] = value

    @classmethod
    def wrap(cls, data: Optional[Document] = None) -> "HALResource":
        """Wrap a document; an existing HALResource is returned unchanged."""
        if isinstance(data, HALResource):
            return data
        resource = cls(data)
        log.debug(
            "hal.wrap",
            extra={
                "op": "wrap",
                "count": len(resource.list_link_rels())
                + len(resource.list_embed_rels()),
            },
        )
        return resource

    # --- mapping protocol ---

    def __getitem__(self, key: str) -> Any:
        """
        Reserved keys read as a read-only snapshot in document shape: links
        as plain objects, embeds as HALResource. Edit relations through the
        mutators or by assigning the whole key.
        """
        value = self._data[key]
        if isinstance(value, RelationStore):
            if key == LINKS:
                return MappingProxyType(value.compact(dump_link))
            return MappingProxyType(value.compact())
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        if key == LINKS and isinstance(value, Mapping):
            self._data[key] = RelationStore.from_json(value, as_link)
        elif key == EMBEDDED and isinstance(value, Mapping):
            self._data[key] = RelationStore.from_json(value, _as_resource)
        else:
            self._data[key] = copy.deepcopy(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HALResource):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

    # --- relation access ---

    def _store(self, key: str, *, create: bool = False) -> Optional[RelationStore]:
        store = self._data.get(key)
        if isinstance(store, RelationStore):
            return store
        if not create:
            return None
        store = RelationStore()
        self._data[key] = store
        return store

    def list_link_rels(self) -> List[str]:
        store = self._store(LINKS)
        return store.rels() if store is not None else []

    def list_embed_rels(self) -> List[str]:
        store = self._store(EMBEDDED)
        return store.rels() if store is not None else []

    def get_links(
        self,
        rel: str,
        where: Optional[FilterCallback] = None,
        begin: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Link]:
        store = self._store(LINKS)
        items = store.get(rel) if store is not None else []
        return select(items, where, begin, end)

    def get_link(
        self,
        rel: str,
        where: Optional[FilterCallback] = None,
        default: Any = None,
    ) -> Any:
        return _first(self._store(LINKS), rel, where, default)

    def get_embeds(
        self,
        rel: str,
        where: Optional[FilterCallback] = None,
        begin: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List["HALResource"]:
        store = self._store(EMBEDDED)
        items = store.get(rel) if store is not None else []
        return select(items, where, begin, end)

    def get_embed(
        self,
        rel: str,
        where: Optional[FilterCallback] = None,
        default: Any = None,
    ) -> Any:
        return _first(self._store(EMBEDDED), rel, where, default)

    # --- mutators (all return self for chaining) ---

    def add_link(self, rel: str, link: LinkLike) -> "HALResource":
        self._store(LINKS, create=True).append(rel, [as_link(link)])
        return self

    def add_embed(
        self, rel: str, embed: Union[Document, Sequence[Document]]
    ) -> "HALResource":
        return self.insert_embed(rel, -1, embed)

    def insert_embed(
        self,
        rel: str,
        index: int,
        embed: Union[Document, Sequence[Document]],
    ) -> "HALResource":
        values = embed if isinstance(embed, (list, tuple)) else [embed]
        if not values:
            return self
        store = self._store(EMBEDDED, create=True)
        store.insert(rel, index, [_as_resource(v) for v in values])
        return self

    def remove_links(
        self, rel: str, where: Optional[FilterCallback] = None
    ) -> "HALResource":
        store = self._store(LINKS)
        if store is not None:
            removed = store.remove(rel, where)
            log.debug(
                "hal.remove",
                extra={"op": "remove_links", "rel": rel, "count": removed},
            )
        return self

    def remove_embeds(
        self, rel: str, where: Optional[FilterCallback] = None
    ) -> "HALResource":
        store = self._store(EMBEDDED)
        if store is not None:
            removed = store.remove(rel, where)
            log.debug(
                "hal.remove",
                extra={"op": "remove_embeds", "rel": rel, "count": removed},
            )
        return self

    # --- export ---

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key, value in self._data.items():
            if isinstance(value, RelationStore):
                dump = dump_link if key == LINKS else _dump_resource
                out[key] = value.compact(dump)
            else:
                out[key] = copy.deepcopy(value)
        return out

    def to_json(self, indent: Optional[int] = None) -> str:
        return dump_document(self.to_dict(), indent=indent)

    def to_model(self, model: Type[M]) -> M:
        try:
            return model.model_validate(self.to_dict())
        except ValidationError as exc:
            raise HalsonValidationError(
                f"Document did not match model {model.__name__}: {exc}"
            ) from exc


def _as_resource(value: Any) -> Any:
    if isinstance(value, HALResource):
        return value
    if isinstance(value, Mapping):
        return HALResource(value)
    # Non-object embeds are carried through untouched.
    return value


def _dump_resource(value: Any) -> Any:
    return value.to_dict() if isinstance(value, HALResource) else value


def _first(
    store: Optional[RelationStore],
    rel: str,
    where: Optional[FilterCallback],
    default: Any,
) -> Any:
    if store is None:
        return default
    items = store.get(rel)
    for index, item in enumerate(items):
        if where is None or where(item, index, items):
            return item
    return default


def wrap_resource(data: Optional[Document] = None) -> HALResource:
    """Entry point for read/write access to a HAL document."""
    return HALResource.wrap(data)


__all__ = ["EMBEDDED", "LINKS", "HALResource", "wrap_resource"]
