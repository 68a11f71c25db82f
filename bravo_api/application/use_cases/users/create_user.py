"""Use case for creating users."""

from sqlalchemy.orm import Session

from bravo_api.domain.entities import ROLE_ADMIN, ROLE_AGENT, ROLE_MANAGER, User
from bravo_api.infrastructure.repositories import RoleRepository, UserRepository
from bravo_api.infrastructure.security import get_password_hash
from bravo_api.utils import ensure_utc_naive_datetime, now_utc

from .validators import ensure_valid_username

ALLOWED_ROLES = {
    ROLE_AGENT: "Sales agent",
    ROLE_MANAGER: "Sales manager",
    ROLE_ADMIN: "Administrator",
}


def create_user(
    session: Session,
    *,
    name: str,
    username: str,
    email: str,
    password: str,
    role_alias: str = ROLE_AGENT,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)
    role_repository = RoleRepository(session)

    normalized_username = ensure_valid_username(username)
    if repository.get_by_login(normalized_username):
        raise ValueError("Username is already registered")
    if repository.get_by_email(email):
        raise ValueError("Email is already registered")

    alias = role_alias.strip().lower()
    if alias not in ALLOWED_ROLES:
        raise ValueError(f"Role not allowed: {role_alias}")
    role = role_repository.get_or_create(alias, ALLOWED_ROLES[alias])

    user = User(
        id=None,
        role=role,
        name=name,
        username=normalized_username,
        email=email,
        password=get_password_hash(password),
        last_login=None,
        created_at=ensure_utc_naive_datetime(now_utc()),
        is_active=True,
    )

    return repository.create(user)
