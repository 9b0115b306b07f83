# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Content negotiation for API responses — JSON, XML, YAML or plain text by Accept header.

JSON is written as-is. XML wraps the body in its root element, writes
'_'-prefixed keys as attributes and names list items by the singular of
their parent. YAML and plain text both carry YAML.
"""
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Tuple

import yaml
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

JSON, XML, YAML, TEXT = "json", "xml", "yaml", "text"

_MEDIA_TYPES: Dict[str, str] = {
    "application/json": JSON,
    "application/*": JSON,
    "*/*": JSON,
    "application/xml": XML,
    "text/xml": XML,
    "text/yaml": YAML,
    "application/yaml": YAML,
    "application/x-yaml": YAML,
    "text/plain": TEXT,
    "text/*": TEXT,
}

_CONTENT_TYPES = {
    XML: "application/xml",
    YAML: "text/yaml",
    TEXT: "text/plain",
}


def _ranges(accept: str) -> List[Tuple[str, float]]:
    ranges = []
    for part in accept.split(","):
        media, _, params = part.strip().partition(";")
        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.strip().partition("=")
            if name == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if media:
            ranges.append((media.strip().lower(), quality))
    # stable: equal q keeps the client's order
    return sorted(ranges, key=lambda r: -r[1])


def preferred_format(accept: Optional[str]) -> str:
    for media, quality in _ranges(accept or ""):
        if quality > 0 and media in _MEDIA_TYPES:
            return _MEDIA_TYPES[media]
    return JSON


def singular(name: str) -> str:
    return name[:-1] if name.endswith("s") and len(name) > 1 else name


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _element(tag: str, value: Any) -> ET.Element:
    el = ET.Element(tag)
    if isinstance(value, list):
        for item in value:
            el.append(_element(singular(tag), item))
    elif isinstance(value, dict):
        for key, item in value.items():
            if key.startswith("_") and not isinstance(item, (dict, list)):
                el.set(key, _scalar(item))
            else:
                el.append(_element(key, item))
    else:
        el.text = _scalar(value)
    return el


def to_xml(body: Any, root: str) -> str:
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(_element(root, body), encoding="unicode")


def to_yaml(body: Any) -> str:
    return yaml.safe_dump(body, default_flow_style=False, sort_keys=False, allow_unicode=True)


def negotiate(request: Request, body: Any, root: str, status_code: int = 200,
              headers: Optional[Dict[str, str]] = None) -> Response:
    """Render body in the format the client's Accept header prefers."""
    data = jsonable_encoder(body)
    fmt = preferred_format(request.headers.get("accept"))
    if fmt == XML:
        content = to_xml(data, root)
    elif fmt in (YAML, TEXT):
        content = to_yaml(data)
    else:
        return JSONResponse(content=data, status_code=status_code, headers=headers)
    return Response(content=content, status_code=status_code, headers=headers,
                    media_type=_CONTENT_TYPES[fmt])
