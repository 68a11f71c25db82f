"""FastAPI dependency utilities."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bravo_api.domain.entities import User
from bravo_api.infrastructure.database import get_db
from bravo_api.infrastructure.repositories import ActivityLogRepository, UserRepository
from bravo_api.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user_id = payload.get("uid")
    if not isinstance(user_id, int):
        raise _credentials_exception()

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive",
        )
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_optional_user(
    token: str | None = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the authenticated user when a valid token is present."""

    if not token:
        return None
    try:
        return resolve_current_user(token, db)
    except HTTPException:
        return None


def require_roles(*aliases: str) -> Callable[..., User]:
    """Build a dependency ensuring the current user holds one of ``aliases``."""

    def _require(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_any_role(*aliases):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )
        return current_user

    return _require


def get_activity_store(db: Session = Depends(get_db)) -> ActivityLogRepository:
    """Return the activity log repository bound to the request session."""

    return ActivityLogRepository(db)
