# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Ajax passthrough — relays admin ajax calls to the API app.

  GET admin.example.com/ajax/members/7  →  GET api.example.com/members/7

The admin session's JWT is sent as the Bearer token. Every outcome,
including network failure, becomes a response; nothing is raised.
"""
import time
from typing import Any, Dict, Optional

import httpx
from fastapi import Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from membership.core.config import settings
from membership.core.logging import get_logger
from membership.metrics import AJAX_PASSTHROUGH

logger = get_logger(__name__)


class PassthroughService:
    def __init__(self, http_client: httpx.AsyncClient, api_url: str = settings.API_URL):
        self._client = http_client
        self._api_url = api_url.rstrip("/")

    def target_url(self, request: Request, path: str) -> str:
        if self._api_url:
            base = self._api_url
        else:
            host = request.headers.get("host", request.url.netloc).replace("admin", "api", 1)
            base = f"{request.url.scheme}://{host}"
        url = f"{base}/{path.lstrip('/')}"
        if request.url.query:
            url += f"?{request.url.query}"
        return url

    async def relay(self, request: Request, path: str, body: Optional[Dict[str, Any]],
                    token: Optional[str]) -> Response:
        method = request.method
        headers = {
            "Content-Type": "application/json",
            "Accept": request.headers.get("accept", "*/*"),
            "Authorization": f"Bearer {token or ''}",
        }
        start = time.monotonic()
        try:
            url = self.target_url(request, path)
            resp = await self._client.request(
                method=method, url=url,
                json=body if body else None,
                headers=headers, timeout=settings.AJAX_TIMEOUT,
            )
            if not resp.content:
                response = Response(status_code=resp.status_code)
            elif "application/json" in resp.headers.get("content-type", ""):
                response = JSONResponse(content=resp.json(), status_code=resp.status_code)
            else:
                response = PlainTextResponse(content=resp.text, status_code=resp.status_code)
        except Exception as exc:
            logger.warning("Ajax passthrough %s /%s failed: %s", method, path, exc)
            response = PlainTextResponse(content=str(exc) or type(exc).__name__, status_code=500)

        AJAX_PASSTHROUGH.labels(method=method, status=response.status_code).inc()
        logger.info("ajax %s /%s → %d %.0fms", method, path, response.status_code,
                    (time.monotonic() - start) * 1000)
        return response
