# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error boundary — maps service outcomes to HTTP statuses and renders errors.

API errors are negotiated {"message": ...} bodies under root 'error'; the
admin and www sites render 404 / 500 pages.
"""
import traceback

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from membership.core.config import settings
from membership.core.formatting import negotiate
from membership.core.logging import get_logger
from membership.core.templating import PageRenderer
from membership.middleware import security_headers
from membership.services.result import ErrorKind, Result

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.UNRECOGNISED_FIELD: 403,
    ErrorKind.INVALID: 422,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNAUTHORIZED: 401,
}

NOT_FOUND_MESSAGE = "Couldn’t find that one!..."


def unwrap(result: Result):
    """Value of a successful Result; HTTPException for a failed one."""
    if result.ok:
        return result.value
    raise HTTPException(status_code=STATUS_BY_KIND[result.kind], detail=result.message)


def _validation_message(exc: RequestValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())


# ── API ──

def install_api_errors(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.detail)
        return negotiate(request, {"message": exc.detail}, "error", exc.status_code,
                         headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return negotiate(request, {"message": _validation_message(exc)}, "error", 422)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        message = "Internal server error" if settings.IS_PRODUCTION else str(exc)
        return negotiate(request, {"message": message}, "error", 500)


# ── Sites (admin / www) ──

def install_page_errors(app: FastAPI, pages: PageRenderer) -> None:
    def render(request: Request, status: int, message: str, stack: str = ""):
        err = {
            "status": status,
            "message": message,
            "stack": "" if settings.IS_PRODUCTION else stack,
        }
        template = "404-not-found" if status == 404 else "500-internal-server-error"
        return pages.render(request, template, status_code=status, err=err)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = str(exc.detail)
        if exc.status_code == 404 and message == "Not Found":
            message = NOT_FOUND_MESSAGE
        return render(request, exc.status_code, message)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s: %s", pages.site, exc)
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        response = render(request, 500, str(exc) or "Internal server error", stack)
        # Runs outside the middleware stack
        response.headers.update(security_headers())
        return response
