# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Flash messages — kept in the signed session cookie until the next page render."""
from typing import List

from fastapi import Request

_KEY = "_flash"


def flash(request: Request, message: str) -> None:
    request.session[_KEY] = request.session.get(_KEY, []) + [message]


def pop_flash(request: Request) -> List[str]:
    if "session" not in request.scope:
        return []
    return request.session.pop(_KEY, [])
