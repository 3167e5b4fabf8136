"""Account sign-up and login routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from resume_builder.api.schemas.users import CredentialsRequest, UserInfoResponse
from resume_builder.data.db import get_session
from resume_builder.data.models import User
from resume_builder.services.auth import authenticate_user, create_user

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_info(username: str) -> UserInfoResponse:
    with get_session() as session:
        user = session.query(User).filter(User.username == username.strip()).first()
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"User '{username}' not found",
            )
        return UserInfoResponse.model_validate(user)


@router.post(
    "/signup",
    response_model=UserInfoResponse,
    status_code=status.HTTP_201_CREATED,
)
def signup(credentials: CredentialsRequest) -> UserInfoResponse:
    """Create an account.

    Raises:
        HTTPException: 409 if the username is taken, 400 for blank input.
    """
    ok, error = create_user(credentials.username, credentials.password)
    if not ok:
        code = (
            status.HTTP_409_CONFLICT
            if error == "Username already exists."
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=error)
    return _user_info(credentials.username)


@router.post("/login", response_model=UserInfoResponse)
def login(credentials: CredentialsRequest) -> UserInfoResponse:
    """Check credentials and return the account.

    Clients send the returned username as ``X-Username`` on later calls.
    """
    ok, error = authenticate_user(credentials.username, credentials.password)
    if not ok:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=error)
    return _user_info(credentials.username)
