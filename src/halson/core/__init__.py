"""Core HAL document model (no I/O, no environment access)."""

from .builder import Builder, new_builder
from .codec import dump_document, load_document
from .errors import HalsonError, HalsonParseError, HalsonValidationError
from .hal import (
    get_embedded,
    get_embeds,
    get_link,
    get_link_href,
    get_link_title,
    get_links,
)
from .link import Link, as_link, validate_link
from .parsed import ParsedResource, parse
from .relations import RelationStore, select
from .resource import HALResource, wrap_resource

__all__ = [
    # Entry points
    "wrap_resource",
    "parse",
    "new_builder",
    # Types
    "HALResource",
    "ParsedResource",
    "Builder",
    "Link",
    "RelationStore",
    # Exceptions
    "HalsonError",
    "HalsonParseError",
    "HalsonValidationError",
    # Conversion helpers
    "as_link",
    "validate_link",
    "select",
    "load_document",
    "dump_document",
    # Raw payload helpers
    "get_link",
    "get_links",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "get_embeds",
]
