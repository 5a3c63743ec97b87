from typing import Any, Dict, List, Optional


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def get_links(payload: Dict[str, Any], relation: str) -> List[Dict[str, Any]]:
    """
    All link objects of a relation, whether stored as one object or a list.
    """
    if not payload or not isinstance(payload.get("_links"), dict):
        return []
    return _as_list(payload["_links"].get(relation))


def get_link(payload: Dict[str, Any], relation: str) -> Optional[Dict[str, Any]]:
    """
    Safely retrieves the first link object of a relation from _links.
    """
    links = get_links(payload, relation)
    return links[0] if links else None


def get_link_href(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'href' (URL) from a specific link relation.
    Example: get_link_href(user_json, 'avatar') -> '/avatars/113901'
    """
    link = get_link(payload, relation)
    return link.get("href") if isinstance(link, dict) else None


def get_link_title(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'title' (readable name) from a specific link relation.
    Example: get_link_title(repo_json, 'author') -> 'Joyent'
    """
    link = get_link(payload, relation)
    return link.get("title") if isinstance(link, dict) else None


def get_embeds(payload: Dict[str, Any], relation: str) -> List[Dict[str, Any]]:
    if not payload or not isinstance(payload.get("_embedded"), dict):
        return []
    return _as_list(payload["_embedded"].get(relation))


def get_embedded(payload: Dict[str, Any], relation: str) -> Optional[Dict[str, Any]]:
    """
    Extracts the first embedded resource of a relation from _embedded.
    Example: get_embedded(user_json, 'starred') -> {'title': 'joyent / node', ...}
    """
    embeds = get_embeds(payload, relation)
    return embeds[0] if embeds else None


__all__ = [
    "get_link",
    "get_links",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "get_embeds",
]
