"""
JSON boundary for HAL documents.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union

from .errors import HalsonParseError

Document = Union[str, bytes, bytearray, Mapping[str, Any]]


def load_document(data: Optional[Document]) -> Mapping[str, Any]:
    """
    Accept a parsed JSON object or its text form.
    - None means an empty document
    - Raises HalsonParseError on malformed text or a non-object top level
    """
    if data is None:
        return {}

    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HalsonParseError(f"Document is not valid UTF-8: {exc}") from exc

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as exc:
            snippet = data[:200]
            raise HalsonParseError(
                f"Expected JSON document, got malformed text: {snippet!r}"
            ) from exc

    if not isinstance(data, Mapping):
        raise HalsonParseError(
            f"Expected top-level JSON object, got {type(data).__name__}"
        )
    return data


def dump_document(data: Dict[str, Any], indent: Optional[int] = None) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


__all__ = ["Document", "load_document", "dump_document"]
