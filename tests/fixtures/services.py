"""Service fixtures for testing."""

import pytest
from sqlmodel import Session

from src.bookshelf.core.services import (
    AuthenticationService,
    JwtGeneratorService,
    JwtVerificationService,
)


@pytest.fixture
def jwt_generate_service() -> JwtGeneratorService:
    return JwtGeneratorService()


@pytest.fixture
def jwt_verify_service() -> JwtVerificationService:
    return JwtVerificationService()


@pytest.fixture
def auth_service(session: Session) -> AuthenticationService:
    return AuthenticationService(session)
