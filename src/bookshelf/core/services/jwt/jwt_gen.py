import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.bookshelf.core.models.token import TokenPair
from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.context import get_config

RESERVED_CLAIMS = frozenset({"iss", "sub", "aud", "exp", "iat", "nbf", "jti"})


class JwtGeneratorService:
    """Service for generating JWT tokens for API authentication."""

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int = 3600,
        valid_after_seconds: int = 0,
        issuer: str | None = None,
        audience: str | list[str] | None = None,
        algorithm: str | None = None,
        include_jti: bool = True,
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT using authlib.

        Args:
            subject: Subject (sub) claim - the user ID
            claims: Additional claims to include in the token
            expires_in_seconds: Token lifetime in seconds (default: 1 hour)
            valid_after_seconds: Time in seconds before the token is valid (default: 0)
            issuer: Issuer (iss) claim (defaults to config issuer)
            audience: Audience (aud) claim (defaults to config audiences)
            algorithm: Signing algorithm (defaults to config algorithm)
            include_jti: Whether to include a unique JWT ID claim (default: True)
            secret: Optional secret key for signing. If None, will use config secret.

        Returns:
            Signed JWT token string

        Raises:
            HTTPException: If configuration is missing or invalid
        """
        config: ConfigData = get_config()

        issuer = issuer or config.jwt.gen_issuer
        secret = secret or config.jwt.signing_secret
        algorithm = algorithm or config.jwt.algorithm

        if not secret:
            raise HTTPException(
                status_code=500, detail="JWT signing secret not configured"
            )

        if algorithm not in config.jwt.allowed_algorithms:
            logger.debug(
                "Refusing to sign with {}; allowed algorithms are {}",
                algorithm,
                config.jwt.allowed_algorithms,
            )
            raise HTTPException(
                status_code=500, detail=f"Algorithm {algorithm} not allowed"
            )

        now = int(time.time())
        aud = audience or config.jwt.audiences

        payload: dict[str, Any] = {
            "iss": issuer,
            "sub": subject,
            "aud": aud,
            "exp": now + expires_in_seconds,
            "iat": now,
            "nbf": now + valid_after_seconds,
        }

        if include_jti:
            payload["jti"] = generate_token(16)

        if claims:
            payload.update(
                {k: v for k, v in claims.items() if k not in RESERVED_CLAIMS}
            )

        try:
            header = {"alg": algorithm, "typ": "JWT"}
            token = jwt.encode(header, payload, secret)
            return token.decode() if isinstance(token, bytes) else token
        except JoseError as e:
            raise HTTPException(
                status_code=500, detail=f"JWT encoding failed: {str(e)}"
            ) from e

    def generate_access_token(
        self,
        user_id: str,
        expires_in_seconds: int | None = None,
        **extra_claims,
    ) -> str:
        """Generate a short-lived access token.

        Args:
            user_id: User identifier for the subject claim
            expires_in_seconds: Token lifetime (defaults to ``jwt.access_token_lifetime``)
            **extra_claims: Additional claims to include

        Returns:
            Signed access token JWT
        """
        lifetime = expires_in_seconds or get_config().jwt.access_token_lifetime
        claims = {**extra_claims, "token_type": "access"}
        return self.generate_jwt(
            subject=user_id, claims=claims, expires_in_seconds=lifetime
        )

    def generate_refresh_token(
        self,
        user_id: str,
        expires_in_seconds: int | None = None,
        **extra_claims,
    ) -> str:
        """Generate a refresh token used to obtain new access tokens.

        Args:
            user_id: User identifier for the subject claim
            expires_in_seconds: Token lifetime (defaults to ``jwt.refresh_token_lifetime``)
            **extra_claims: Additional claims to include

        Returns:
            Signed refresh token JWT
        """
        lifetime = expires_in_seconds or get_config().jwt.refresh_token_lifetime
        claims = {**extra_claims, "token_type": "refresh"}
        return self.generate_jwt(
            subject=user_id, claims=claims, expires_in_seconds=lifetime
        )

    def generate_token_pair(self, user_id: str) -> TokenPair:
        """Issue a refresh/access pair for a freshly authenticated user."""
        return TokenPair(
            refresh=self.generate_refresh_token(user_id),
            access=self.generate_access_token(user_id),
        )
