"""Core services exports."""

from .database.db_session import DbSessionService
from .jwt.jwt_gen import JwtGeneratorService
from .jwt.jwt_verify import JwtVerificationService
from .user.authentication import AuthenticationService

__all__ = [
    # JWT Services
    "JwtGeneratorService",
    "JwtVerificationService",
    # User Services
    "AuthenticationService",
    # Database Service
    "DbSessionService",
]
