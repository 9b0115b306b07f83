# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Authentication service — credential validation and JWT issue / verification."""
import hmac
import time
from typing import Any, Dict, Optional, Tuple

import jwt

from membership.core.config import settings
from membership.core.logging import get_logger
from membership.services.result import ErrorKind, Result

logger = get_logger(__name__)


class AuthService:
    def __init__(self, users: Optional[Dict[str, Tuple[str, str]]] = None,
                 secret: str = settings.JWT_SECRET,
                 algorithm: str = settings.JWT_ALGORITHM,
                 expiry_seconds: int = settings.JWT_EXPIRY_SECONDS):
        self._users = settings.USER_CREDENTIALS if users is None else users
        self._secret = secret
        self._algorithm = algorithm
        self._expiry = expiry_seconds

    def login(self, email: Optional[str], password: Optional[str]) -> Result:
        """Result value is {'jwt', 'email', 'role'}."""
        if not email or not password:
            return Result.failure(ErrorKind.UNAUTHORIZED, "Email and password required")
        email = email.strip().lower()
        expected = self._users.get(email)
        if expected is None or not hmac.compare_digest(expected[0], password):
            logger.warning("Failed login for %s", email)
            return Result.failure(ErrorKind.UNAUTHORIZED, "Invalid credentials")
        role = expected[1]
        return Result.success({"jwt": self.issue_token(email, role), "email": email, "role": role})

    def issue_token(self, email: str, role: str) -> str:
        now = int(time.time())
        claims = {"sub": email, "role": role, "iat": now, "exp": now + self._expiry}
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Decoded claims, or None for a missing, expired or tampered token."""
        if not token:
            return None
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as exc:
            logger.info("Rejected JWT: %s", exc)
            return None
