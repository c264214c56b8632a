"""Token endpoints: obtain a token pair and refresh an access token."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, Field
from sqlmodel import Session

from src.bookshelf.api.http.deps import (
    get_authentication_service,
    get_db_session,
    get_jwt_generation_service,
    get_jwt_verify_service,
)
from src.bookshelf.core.models.token import TokenPair
from src.bookshelf.core.services import (
    AuthenticationService,
    JwtGeneratorService,
    JwtVerificationService,
)
from src.bookshelf.entities.core.user import UserRepository

router = APIRouter(tags=["auth"])

NO_ACTIVE_ACCOUNT = "No active account found with the given credentials"


def _no_active_account() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=NO_ACTIVE_ACCOUNT,
        headers={"WWW-Authenticate": "Bearer"},
    )


class TokenObtainRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenRefreshRequest(BaseModel):
    refresh: str = Field(min_length=1)


class AccessTokenResponse(BaseModel):
    access: str


@router.post("/", response_model=TokenPair)
def obtain_token_pair(
    credentials: TokenObtainRequest,
    auth_service: AuthenticationService = Depends(get_authentication_service),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> TokenPair:
    """Exchange a username and password for a refresh/access token pair."""
    user = auth_service.authenticate(credentials.username, credentials.password)
    if user is None:
        raise _no_active_account()
    logger.info("Issued token pair for user {}", user.id)
    return jwt_gen.generate_token_pair(user.id)


@router.post("/refresh/", response_model=AccessTokenResponse)
def refresh_access_token(
    body: TokenRefreshRequest,
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
    db: Session = Depends(get_db_session),
) -> AccessTokenResponse:
    """Issue a new access token from a valid refresh token.

    The token owner must still exist and be active.
    """
    claims = jwt_verify.verify_jwt(body.refresh, expected_type="refresh")
    user = UserRepository(db).get(claims.subject)
    if user is None or not user.is_active:
        logger.info("Refresh refused: no active account for {}", claims.subject)
        raise _no_active_account()
    return AccessTokenResponse(access=jwt_gen.generate_access_token(claims.subject))
