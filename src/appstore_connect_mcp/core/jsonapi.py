import json
from typing import Any, Dict, Iterable, List, Optional


def empty_document() -> Dict[str, Any]:
    """Canonical envelope for 2xx responses without a body."""
    return {"data": None}


def next_link(payload: Dict[str, Any]) -> Optional[str]:
    """
    Extracts links.next from a collection envelope.
    Example: next_link(page) -> 'https://api.appstoreconnect.apple.com/v1/apps?cursor=AQ'
    """
    links = payload.get("links") if isinstance(payload, dict) else None
    if not isinstance(links, dict):
        return None
    href = links.get("next")
    return href if isinstance(href, str) and href else None


def collection_data(payload: Dict[str, Any]) -> List[Any]:
    """Return the data array of a collection page (a lone resource becomes [resource])."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def merge_pages(first: Dict[str, Any], items: List[Any]) -> Dict[str, Any]:
    """Build the combined envelope: first page with concatenated data and no links.next."""
    merged = dict(first)
    merged["data"] = items
    links = first.get("links")
    if isinstance(links, dict):
        merged["links"] = {k: v for k, v in links.items() if k != "next"}
    return merged


def resource_identifier(resource_type: str, resource_id: str) -> Dict[str, str]:
    return {"type": resource_type, "id": resource_id}


def to_one(resource_type: str, resource_id: Optional[str]) -> Dict[str, Any]:
    """
    Relationship object for a single related resource.
    A None id clears the relationship: {"data": null}.
    """
    if resource_id is None:
        return {"data": None}
    return {"data": resource_identifier(resource_type, resource_id)}


def to_many(resource_type: str, resource_ids: Iterable[str]) -> Dict[str, Any]:
    return {"data": [resource_identifier(resource_type, i) for i in resource_ids]}


def resource_document(
    resource_type: str,
    *,
    resource_id: Optional[str] = None,
    attributes: Optional[Dict[str, Any]] = None,
    relationships: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {"type": resource_type}
    if resource_id is not None:
        data["id"] = resource_id
    if attributes is not None:
        data["attributes"] = attributes
    if relationships is not None:
        data["relationships"] = relationships
    return {"data": data}


def linkage_document(resource_type: str, resource_ids: Iterable[str]) -> Dict[str, Any]:
    """Body for /relationships/... endpoints: {"data": [{type, id}, ...]}."""
    return to_many(resource_type, resource_ids)


def render_json(payload: Any) -> str:
    """Tool output: the raw envelope, two-space indented, key order as received."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def acknowledgement(message: str) -> str:
    """Tool output for operations whose response body carries nothing useful."""
    return json.dumps(
        {"success": True, "message": message},
        separators=(",", ":"),
        ensure_ascii=False,
    )


__all__ = [
    "empty_document",
    "next_link",
    "collection_data",
    "merge_pages",
    "resource_identifier",
    "to_one",
    "to_many",
    "resource_document",
    "linkage_document",
    "render_json",
    "acknowledgement",
]
