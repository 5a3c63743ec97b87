"""halson package exports."""

from .config import Settings, configure_logging, load_env_config
from .core import (
    Builder,
    HalsonError,
    HalsonParseError,
    HalsonValidationError,
    HALResource,
    Link,
    ParsedResource,
    RelationStore,
    get_embedded,
    get_embeds,
    get_link,
    get_link_href,
    get_link_title,
    get_links,
    new_builder,
    parse,
    wrap_resource,
)

__version__ = "0.1.0"

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
    # HAL utilities
    "get_link",
    "get_links",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "get_embeds",
    # Config helpers
    "Settings",
    "load_env_config",
    "configure_logging",
]
