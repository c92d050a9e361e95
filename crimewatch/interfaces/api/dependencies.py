"""FastAPI dependency utilities."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.requests import HTTPConnection
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from crimewatch.application.use_cases.notifications import NotificationDispatcher
from crimewatch.config import get_settings
from crimewatch.infrastructure.database import SessionLocal, get_db
from crimewatch.infrastructure.notifications import NotificationGateway, PresenceRegistry
from crimewatch.utils import is_valid_identifier

ADMIN_TOKEN_PREFIX = "admin-"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Caller identity derived from the bearer token."""

    subject_id: str
    is_admin: bool = False


def resolve_identity(token: str) -> Identity:
    """Translate a bearer token into an :class:`Identity`.

    The token itself carries the identifier; administrator tokens use the
    ``admin-`` prefix.
    """

    is_admin = token.startswith(ADMIN_TOKEN_PREFIX)
    subject_id = token[len(ADMIN_TOKEN_PREFIX):] if is_admin else token
    if not is_valid_identifier(subject_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Identity(subject_id=subject_id, is_admin=is_admin)


def get_optional_identity(token: str | None = Depends(oauth2_scheme)) -> Identity | None:
    """Return the caller identity, or ``None`` for anonymous requests."""

    if not token:
        return None
    return resolve_identity(token)


def get_current_identity(identity: Identity | None = Depends(get_optional_identity)) -> Identity:
    """Ensure the request carries a valid bearer token."""

    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autenticado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """Ensure the authenticated caller has administrator privileges."""

    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No autorizado",
        )
    return identity


def ensure_identifier(value: str, detail: str) -> str:
    """Reject malformed identifiers before they reach the store."""

    if not is_valid_identifier(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return value


def get_presence_registry(connection: HTTPConnection) -> PresenceRegistry:
    """Return the registry owned by the running application."""

    return connection.app.state.presence_registry


def get_notification_dispatcher(
    db: Session = Depends(get_db),
    registry: PresenceRegistry = Depends(get_presence_registry),
) -> NotificationDispatcher:
    """Return a dispatcher bound to the request session."""

    return NotificationDispatcher(db, registry)


def get_notification_gateway(
    registry: PresenceRegistry = Depends(get_presence_registry),
) -> NotificationGateway:
    """Return the websocket gateway for the running application."""

    return NotificationGateway(
        registry,
        SessionLocal,
        initial_load_limit=get_settings().notification_initial_load_limit,
    )
