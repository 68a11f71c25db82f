"""Endpoints related to authentication and work sessions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from bravo_api.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    record_login,
    record_logout,
)
from bravo_api.domain.entities import User
from bravo_api.infrastructure.database import get_db
from bravo_api.infrastructure.security import create_access_token
from bravo_api.interfaces.api.dependencies import get_optional_user
from bravo_api.interfaces.api.schemas import SuccessResponse, Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


# The signature is the one expected by OAuth2PasswordRequestForm.
@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate by username or email and return a JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={
            "sub": user.email,
            "uid": user.id,
            "username": user.username,
            "role": user.role.alias,
        },
    )
    record_login(db, user)
    logger.info("User %s logged in", user.username)
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role.alias,
        "username": user.username,
    }


@router.post("/logout", response_model=SuccessResponse)
def logout(
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> SuccessResponse:
    """Close the work session of the caller.

    Tokens are stateless, so the client discards its own token; a ``logout``
    activity event is recorded only when the token still identifies a user.
    """

    if current_user is not None:
        record_logout(db, current_user)
        logger.info("User %s logged out", current_user.username)
    return SuccessResponse()
