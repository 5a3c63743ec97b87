from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import HalsonValidationError

LinkLike = Union[str, Mapping[str, Any], "Link"]


class Link(BaseModel):
    """
    HAL link object: a required href plus the optional attributes named by
    the HAL draft. Extension attributes are kept as extras.
    """

    href: str = Field(min_length=1)
    templated: Optional[bool] = None
    type: Optional[str] = None
    deprecation: Optional[str] = None
    name: Optional[str] = None
    profile: Optional[str] = None
    title: Optional[str] = None
    hreflang: Optional[str] = None

    model_config = ConfigDict(extra="allow", frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        # Only what was supplied, so a link round-trips to its source object.
        return self.model_dump(exclude_unset=True)


def as_link(value: Any) -> Any:
    """
    Lenient conversion used when adopting received documents.
    Nothing is validated; values that are neither strings nor objects are
    kept as they are.
    """
    if isinstance(value, Link):
        return value
    if isinstance(value, str):
        return Link.model_construct(href=value)
    if isinstance(value, Mapping):
        values = dict(value)
        # A missing href reads as None but stays out of the dump.
        supplied = {key for key in values if key in Link.model_fields}
        return Link.model_construct(supplied, **{"href": None, **values})
    return value


def validate_link(value: LinkLike) -> Link:
    """
    Strict conversion used by the builder.
    Raises HalsonValidationError when href is missing or empty.
    """
    if isinstance(value, str):
        value = {"href": value}
    elif isinstance(value, Link):
        value = value.to_dict()
    elif not isinstance(value, Mapping):
        raise HalsonValidationError(
            f"Link must be a string or an object, got {type(value).__name__}"
        )

    if not value.get("href"):
        raise HalsonValidationError("Link MUST contain a href attribute")

    try:
        return Link.model_validate(dict(value))
    except ValidationError as exc:
        raise HalsonValidationError(f"Invalid link: {exc}") from exc


def dump_link(link: Any) -> Any:
    return link.to_dict() if isinstance(link, Link) else link


__all__ = ["Link", "LinkLike", "as_link", "validate_link", "dump_link"]
