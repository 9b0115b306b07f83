# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Dependency injection — database handle, HTTP client and service wiring."""
import threading
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from membership.core.config import settings
from membership.core.database import Database
from membership.repositories import MemberRepository, TeamMemberRepository, TeamRepository
from membership.services.auth_service import AuthService
from membership.services.member_service import MemberService
from membership.services.passthrough_service import PassthroughService
from membership.services.team_member_service import TeamMemberService
from membership.services.team_service import TeamService

_database: Database | None = None
_database_lock = threading.Lock()
_http_client: httpx.AsyncClient | None = None
_passthrough_service: PassthroughService | None = None
_auth_service = AuthService()

_bearer = HTTPBearer(auto_error=False)


# ── Database ──

def init_database(database: Optional[Database] = None) -> Database:
    global _database
    _database = (database or Database(settings.DB_CONNECTION)).init()
    return _database


def get_database() -> Database:
    global _database
    if _database is None:
        with _database_lock:
            if _database is None:
                _database = Database(settings.DB_CONNECTION)
    return _database


def close_database():
    global _database
    if _database is not None:
        _database.dispose()
        _database = None


# ── HTTP client (ajax passthrough) ──

def init_http_client(client: Optional[httpx.AsyncClient] = None):
    global _http_client, _passthrough_service
    _http_client = client or httpx.AsyncClient(timeout=settings.AJAX_TIMEOUT)
    _passthrough_service = PassthroughService(_http_client)


async def close_http_client():
    global _http_client, _passthrough_service
    if _http_client:
        await _http_client.aclose()
    _http_client = None
    _passthrough_service = None


def get_passthrough_service() -> PassthroughService:
    if _passthrough_service is None:
        init_http_client()
    return _passthrough_service


# ── Services ──

def get_member_service() -> MemberService:
    db = get_database()
    return MemberService(MemberRepository(db), TeamMemberRepository(db))


def get_team_service() -> TeamService:
    db = get_database()
    return TeamService(TeamRepository(db), TeamMemberRepository(db))


def get_team_member_service() -> TeamMemberService:
    return TeamMemberService(TeamMemberRepository(get_database()))


def get_auth_service() -> AuthService:
    return _auth_service


# ── API auth ──

def require_auth(credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
                 auth: AuthService = Depends(get_auth_service)) -> Dict[str, Any]:
    """JWT claims of the caller; 401 when the Bearer token is missing or invalid."""
    claims = auth.verify_token(credentials.credentials if credentials else None)
    if claims is None:
        raise HTTPException(status_code=401, detail="Invalid JWT auth credentials",
                            headers={"WWW-Authenticate": "Bearer"})
    return claims


def current_role(claims: Dict[str, Any] = Depends(require_auth)) -> Optional[str]:
    return claims.get("role")
