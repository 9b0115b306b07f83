# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request body parsing and cleanup.

JSON, urlencoded and multipart bodies all arrive as a flat dict, with
strings trimmed and blank strings turned into None.
"""
import json
from typing import Any, Dict

from fastapi import HTTPException, Request

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def clean_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for key, value in body.items():
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[key] = value
    return cleaned


async def cleaned_body(request: Request) -> Dict[str, Any]:
    """FastAPI dependency: the parsed, cleaned request body ({} when there is none)."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        # last value wins, so a checkbox overrides its hidden 'false' twin
        return clean_fields(dict(form.multi_items()))

    raw = await request.body()
    if not raw.strip():
        return {}
    if "json" not in content_type and content_type:
        raise HTTPException(status_code=415, detail=f"Unsupported content type '{content_type}'")
    try:
        body = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="JSON body must be an object")
    return clean_fields(body)
