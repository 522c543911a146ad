import logging
import secrets
import threading
from datetime import datetime, timedelta
from typing import Dict, Optional

from fastapi import Header

from canchas_api import config
from canchas_api.core.errors import Unauthorized

logger = logging.getLogger(__name__)


class AdminSessionStore:
    """
    Tokens de sesión del administrador, en memoria del proceso.

    Cada token vence a las ``ttl`` de emitido, sin renovación. Un reinicio
    invalida todas las sesiones, y con más de una instancia cada proceso
    tiene su propio conjunto de tokens.
    """

    def __init__(self, ttl: timedelta):
        self.ttl = ttl
        self._tokens: Dict[str, datetime] = {}
        self._lock = threading.Lock()

    def issue(self) -> str:
        token = secrets.token_hex(32)
        now = datetime.utcnow()
        with self._lock:
            self._purge_expired(now)
            self._tokens[token] = now + self.ttl
        return token

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._tokens.pop(token, None)

    def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        now = datetime.utcnow()
        with self._lock:
            expires_at = self._tokens.get(token)
            if expires_at is None:
                return False
            if expires_at <= now:
                del self._tokens[token]
                return False
            return True

    def clear(self) -> None:
        with self._lock:
            self._tokens.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def _purge_expired(self, now: datetime) -> None:
        for token in [t for t, exp in self._tokens.items() if exp <= now]:
            del self._tokens[token]


sessions = AdminSessionStore(timedelta(hours=config.ADMIN_TOKEN_TTL_HOURS))


def check_credentials(email: Optional[str], password: Optional[str]) -> bool:
    if not config.ADMIN_EMAIL or not config.ADMIN_PASSWORD:
        logger.warning("ADMIN_EMAIL / ADMIN_PASSWORD not configured, admin login disabled")
        return False
    if email is None or password is None:
        return False
    # Compare both fields so the response never tells which one was wrong
    email_ok = secrets.compare_digest(email.encode(), config.ADMIN_EMAIL.encode())
    password_ok = secrets.compare_digest(password.encode(), config.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


def login(email: Optional[str], password: Optional[str]) -> str:
    if not check_credentials(email, password):
        raise Unauthorized("Credenciales inválidas")
    logger.info("Admin login")
    return sessions.issue()


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extrae el token de un header 'Bearer <token>'."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    return bearer_token(authorization)


def require_admin(authorization: Optional[str] = Header(None)) -> str:
    token = bearer_token(authorization)
    if not sessions.is_valid(token):
        raise Unauthorized()
    return token
