from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError


class JsonApiError(BaseModel):
    """
    One entry of a JSON:API ``errors`` array.
    App Store Connect sends id/status/code/title/detail and sometimes
    source/meta; unknown keys are preserved so the list round-trips.
    """

    status: Optional[Union[str, int]] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    def summary(self) -> str:
        parts = [str(p) for p in (self.code, self.title, self.detail) if p]
        return " - ".join(parts) or "unknown error"

    def as_dict(self) -> Dict[str, Any]:
        # unvalidated entries may hold off-type values; dump them as received
        data = self.model_dump(exclude_unset=True, warnings=False)
        data.update(self.model_extra or {})
        return data


def _parse_entry(item: Any) -> JsonApiError:
    if not isinstance(item, dict):
        return JsonApiError.model_construct(detail=item)
    try:
        return JsonApiError.model_validate(item)
    except ValidationError:
        # keep the entry as sent rather than losing it
        return JsonApiError.model_construct(**item)


def parse_error_list(payload: Any) -> Optional[List[JsonApiError]]:
    """
    Return one JsonApiError per entry of a JSON:API ``errors`` array, or
    None when the payload has no ``errors`` list at all.
    Entries are validated one by one; an entry that fails validation is kept
    with its raw values so the list always mirrors the body.
    """
    if not isinstance(payload, dict):
        return None
    raw = payload.get("errors")
    if not isinstance(raw, list):
        return None
    return [_parse_entry(item) for item in raw]


__all__ = ["JsonApiError", "parse_error_list"]
