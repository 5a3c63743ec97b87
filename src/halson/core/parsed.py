"""
Read-only traversal view over a parsed HAL document.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .codec import Document, load_document
from .errors import HalsonValidationError
from .link import Link, as_link

M = TypeVar("M", bound=BaseModel)


class ParsedResource:
    """
    Snapshot of a document with every relation normalized to a list.
    `data` is the raw document and is never modified.
    """

    __slots__ = ("data", "_links", "_embedded")

    def __init__(self, data: Mapping[str, Any]):
        self.data = data
        self._links: Mapping[str, List[Link]] = self._parse("_links", as_link)
        self._embedded: Mapping[str, List["ParsedResource"]] = self._parse(
            "_embedded", _as_parsed
        )

    def _parse(self, key: str, convert) -> Mapping[str, list]:
        raw = self.data.get(key) or {}
        if not isinstance(raw, Mapping):
            raw = {}
        ret: Dict[str, list] = {}
        for rel, value in raw.items():
            items = value if isinstance(value, list) else [value]
            ret[rel] = [convert(item) for item in items]
        return MappingProxyType(ret)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def links(self, rel: str) -> List[Link]:
        return list(self._links.get(rel, ()))

    def link(self, rel: str) -> Optional[Link]:
        links = self._links.get(rel)
        return links[0] if links else None

    def link_by_name(self, rel: str, name: str) -> Optional[Link]:
        for link in self._links.get(rel, ()):
            if getattr(link, "name", None) == name:
                return link
        return None

    def embeds(self, rel: str) -> List["ParsedResource"]:
        return list(self._embedded.get(rel, ()))

    def embed(self, rel: str) -> Optional["ParsedResource"]:
        embeds = self._embedded.get(rel)
        return embeds[0] if embeds else None

    def embed_by_uri(self, rel: str, uri: str) -> Optional["ParsedResource"]:
        for embed in self._embedded.get(rel, ()):
            if not isinstance(embed, ParsedResource):
                continue
            self_link = embed.link("self")
            if self_link is not None and getattr(self_link, "href", None) == uri:
                return embed
        return None

    def self_link(self, attribute: Optional[str] = None) -> Any:
        """
        The `self` link, or one of its attributes.
        None when the document has no self link.
        """
        link = self.link("self")
        if link is None or not attribute:
            return link
        return getattr(link, attribute, None)

    def to_model(self, model: Type[M]) -> M:
        try:
            return model.model_validate(self.data)
        except ValidationError as exc:
            raise HalsonValidationError(
                f"Document did not match model {model.__name__}: {exc}"
            ) from exc

    def __repr__(self) -> str:
        return f"ParsedResource({dict(self.data)!r})"


def _as_parsed(value: Any) -> Any:
    return ParsedResource(value) if isinstance(value, Mapping) else value


def parse(data: Document) -> ParsedResource:
    """Entry point for read-only traversal; raises HalsonParseError on bad text."""
    if isinstance(data, ParsedResource):
        return data
    return ParsedResource(load_document(data))


__all__ = ["ParsedResource", "parse"]
