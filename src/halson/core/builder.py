"""
Write-side construction of HAL documents.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional, Union

from .codec import dump_document
from .errors import HalsonValidationError
from .link import Link, LinkLike, validate_link
from .observability import log_event
from .relations import RelationStore
from .resource import EMBEDDED, LINKS, HALResource

RESERVED_KEYS = (LINKS, EMBEDDED)
CURIES = "curies"
REL_PLACEHOLDER = "{rel}"

Embeddable = Union["Builder", HALResource, Mapping[str, Any]]


def _reject(reason: str, **fields: Any) -> HalsonValidationError:
    log_event("builder.rejected", reason=reason, **fields)
    return HalsonValidationError(reason)


class Builder:
    """
    Accumulates attributes, links and embedded documents, validating as it
    goes, and exports the compacted HAL object on demand.
    Exporting does not consume the builder.
    """

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        self_link: Optional[LinkLike] = None,
    ):
        self.data: Dict[str, Any] = {}
        self.links: RelationStore[Link] = RelationStore()
        self.embedded: RelationStore[Dict[str, Any]] = RelationStore()
        for key, value in (data or {}).items():
            self.set(key, value)
        if self_link is not None:
            self.link("self", self_link)

    def link(self, rel: str, link: LinkLike) -> "Builder":
        try:
            parsed = validate_link(link)
        except HalsonValidationError as exc:
            raise _reject(str(exc), rel=rel) from exc

        if rel == CURIES:
            parsed = self._check_curie(parsed)

        self.links.append(rel, [parsed])
        return self

    @staticmethod
    def _check_curie(link: Link) -> Link:
        if not link.name:
            raise _reject("Curie must be named", rel=CURIES)

        if link.templated is None:
            link = Link.model_validate({**link.to_dict(), "templated": True})

        if REL_PLACEHOLDER not in link.href:
            raise _reject(
                f"Curie must contain {REL_PLACEHOLDER} placeholder", rel=CURIES
            )
        return link

    def curie(self, name: str, template: str) -> "Builder":
        return self.link(CURIES, {"name": name, "href": template, "templated": True})

    def embed(self, rel: str, embed: Embeddable) -> "Builder":
        if isinstance(embed, Builder):
            data = embed.to_dict()
        elif isinstance(embed, HALResource):
            data = embed.to_dict()
        elif isinstance(embed, Mapping):
            data = copy.deepcopy(dict(embed))
        else:
            raise _reject(
                f"Embedded resource must be an object, got {type(embed).__name__}",
                rel=rel,
            )
        self.embedded.append(rel, [data])
        return self

    def set(self, key: str, value: Any) -> "Builder":
        if key in RESERVED_KEYS:
            raise _reject(f"Reserved attribute {key}")
        self.data[key] = value
        return self

    def to_dict(self) -> Dict[str, Any]:
        out = copy.deepcopy(self.data)
        if len(self.links):
            out[LINKS] = self.links.compact(lambda link: link.to_dict())
        if len(self.embedded):
            out[EMBEDDED] = self.embedded.compact(copy.deepcopy)
        return out

    to_object = to_dict

    def to_json(self, indent: Optional[int] = None) -> str:
        return dump_document(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"Builder(data={self.data!r}, links={self.links!r}, "
            f"embedded={self.embedded!r})"
        )


def new_builder(
    data: Optional[Mapping[str, Any]] = None,
    self_link: Optional[LinkLike] = None,
) -> Builder:
    return Builder(data, self_link)


__all__ = ["Builder", "CURIES", "RESERVED_KEYS", "new_builder"]
