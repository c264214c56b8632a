from dataclasses import dataclass

from loguru import logger

from src.bookshelf.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)


@dataclass
class ApplicationDependencies:
    """Long-lived services shared by every request, stored on ``app.state``."""

    database_service: DbSessionService
    jwt_generation_service: JwtGeneratorService
    jwt_verify_service: JwtVerificationService

    @classmethod
    def create(cls) -> "ApplicationDependencies":
        """Build the services from the current configuration and ensure tables exist."""
        database_service = DbSessionService()
        database_service.create_all()
        return cls(
            database_service=database_service,
            jwt_generation_service=JwtGeneratorService(),
            jwt_verify_service=JwtVerificationService(),
        )

    def close(self) -> None:
        logger.debug("Disposing database engine")
        self.database_service.dispose()
