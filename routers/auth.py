import logging
from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import Settings, get_settings
from database import get_db
from models import Users
from schemas.auth import SignupSchema, LoginSchema, AuthUserSchema
from utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
    dummy_verify,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# The raw token travels in the Authorization header, without a scheme prefix
token_header = APIKeyHeader(name="Authorization", auto_error=False)


def issue_user_token(user: Users, settings: Settings) -> str:
    return create_access_token(
        {"id": user.id, "role": user.role},
        settings.secret_key,
        timedelta(minutes=settings.user_token_expire_minutes),
        settings.algorithm,
    )


# ------------------------------------------------------------------------
# Access control: token validity first, then a role check per route
# ------------------------------------------------------------------------
def get_token_claims(
    token: Optional[str] = Depends(token_header),
    settings: Settings = Depends(get_settings),
) -> dict:
    "Validate the presented token and return its claims."
    if token and token.lower().startswith("bearer "):
        token = token[7:]
    if not token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "missing_token", "message": "No token provided."},
        )
    payload = decode_access_token(token, settings.secret_key, settings.algorithm)
    if not payload or "role" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_token", "message": "Unauthorized."},
        )
    return payload


def require_role(role: str):
    """Build a dependency that admits only tokens issued for `role`."""

    def check_role(claims: dict = Depends(get_token_claims)) -> dict:
        if claims.get("role") != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={"error": "forbidden", "message": "Token does not grant access to this resource."},
            )
        return claims

    return check_role


require_admin = require_role("admin")


def get_current_user_id(claims: dict = Depends(require_role("student"))) -> int:
    "User-scoped routes need a token that names its user."
    user_id = claims.get("id")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "forbidden", "message": "Token does not identify a user."},
        )
    return int(user_id)


# ------------------------------------------------------------------------
# POST /auth/signup: create an account and log it in
# ------------------------------------------------------------------------
@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user account and return an access token",
)
def signup(
    data: SignupSchema,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    The unique constraint on `users.email` is the only duplicate check:
    a violation on insert is reported as 400.
    """
    new_user = Users(
        name=data.name,
        college_id=data.college_id,
        email=data.email,
        password=hash_password(data.password),
        role="student",
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "email_exists", "message": "Email already registered."},
        )
    db.refresh(new_user)
    logger.info("New account created for %s", new_user.email)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "success": True,
            "message": "Account created!",
            "token": issue_user_token(new_user, settings),
            "user": AuthUserSchema.model_validate(new_user).model_dump(),
        },
    )


# ------------------------------------------------------------------------
# POST /auth/login: exchange email + password for an access token
# ------------------------------------------------------------------------
@router.post(
    "/login",
    summary="User login to receive access token",
)
def login(
    data: LoginSchema,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = db.query(Users).filter(Users.email == data.email).first()
    if user is None:
        # Same cost as a real check, so unknown emails are not distinguishable
        dummy_verify()
    if not user or not verify_password(data.password, user.password):
        logger.info("Failed login for %s", data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_credentials", "message": "Invalid credentials."},
        )

    return {
        "success": True,
        "message": "Welcome back!",
        "token": issue_user_token(user, settings),
        "user": AuthUserSchema.model_validate(user).model_dump(),
    }
