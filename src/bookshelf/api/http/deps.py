"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.core.models.token import TokenClaims
from src.bookshelf.core.services import (
    AuthenticationService,
    JwtGeneratorService,
    JwtVerificationService,
)
from src.bookshelf.entities.core.user import User, UserRepository
from src.bookshelf.entities.service.book import BookRepository
from src.bookshelf.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed after the response."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.jwt_generation_service


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.jwt_verify_service


def get_authentication_service(
    db: Session = Depends(get_db_session),
) -> AuthenticationService:
    return AuthenticationService(db)


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(db)


def _bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Authentication credentials were not provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth_header.split(" ", 1)[1].strip()


def get_current_user(
    request: Request,
    db: Session = Depends(get_db_session),
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> User:
    """Authenticate the request using a Bearer access token."""
    claims: TokenClaims = jwt_verify.verify_jwt(
        _bearer_token(request), expected_type="access"
    )

    user = UserRepository(db).get(claims.subject)
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=401,
            detail={"detail": "User not found", "code": "user_not_found"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.claims = claims
    return user


def book_access_policy(
    request: Request,
    db: Session = Depends(get_db_session),
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> None:
    """Allow anyone unless ``auth.protect_books`` is enabled."""
    if not get_config().auth.protect_books:
        return
    get_current_user(request, db, jwt_verify)
