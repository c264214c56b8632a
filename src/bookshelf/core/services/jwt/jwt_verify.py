"""JWT verification service."""

import time

from authlib.jose import JoseError, jwt
from authlib.jose.errors import DecodeError
from fastapi import HTTPException
from loguru import logger

from src.bookshelf.core.models.token import TokenClaims, TokenType
from src.bookshelf.core.services.jwt.jwt_gen import RESERVED_CLAIMS
from src.bookshelf.runtime.context import get_config

TOKEN_NOT_VALID = "token_not_valid"


def _as_list(v):
    return [v] if isinstance(v, str) else list(v or ())


def _invalid(detail: str = "Token is invalid or expired") -> HTTPException:
    return HTTPException(
        status_code=401,
        detail={"detail": detail, "code": TOKEN_NOT_VALID},
        headers={"WWW-Authenticate": "Bearer"},
    )


class JwtVerificationService:
    """Verifies tokens issued by ``JwtGeneratorService``."""

    def verify_jwt(
        self,
        token: str,
        *,
        expected_type: TokenType | None = None,
        key: str | None = None,
    ) -> TokenClaims:
        cfg = get_config()
        verification_key = key or cfg.jwt.signing_secret
        if not verification_key:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.gen_issuer]},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        try:
            claims = jwt.decode(
                token,
                verification_key,
                claims_options=claims_options,
            )
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (DecodeError, JoseError, ValueError) as exc:
            logger.debug("JWT rejected: {}", exc)
            raise _invalid() from exc

        alg = claims.header.get("alg")
        if alg not in cfg.jwt.allowed_algorithms:
            logger.debug("JWT rejected: disallowed algorithm {}", alg)
            raise _invalid()

        aud_list = _as_list(claims.get("aud"))
        if cfg.jwt.audiences and not set(aud_list) & set(cfg.jwt.audiences):
            logger.debug("JWT rejected: audience {} not accepted", aud_list)
            raise _invalid()

        now = int(time.time())
        iat = claims.get("iat")
        if iat is not None and int(iat) > now + cfg.jwt.clock_skew:
            raise _invalid()

        token_type = claims.get("token_type")
        if token_type not in ("access", "refresh"):
            raise _invalid("Token has no type")
        if expected_type is not None and token_type != expected_type:
            raise _invalid("Token has wrong type")

        return TokenClaims(
            subject=str(claims["sub"]),
            token_type=token_type,
            issuer=claims.get("iss"),
            audience=aud_list,
            issued_at=iat,
            expires_at=claims.get("exp"),
            jti=claims.get("jti"),
            custom_claims={
                k: v
                for k, v in claims.items()
                if k not in RESERVED_CLAIMS and k != "token_type"
            },
        )
