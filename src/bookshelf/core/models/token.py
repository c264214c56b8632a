"""Token models shared by the JWT services and the token router."""

from typing import Any, Literal

from pydantic import BaseModel, Field

TokenType = Literal["access", "refresh"]


class TokenPair(BaseModel):
    """Access and refresh tokens issued together on login."""

    refresh: str = Field(description="Refresh token")
    access: str = Field(description="Access token")


class TokenClaims(BaseModel):
    """Verified claims of a token issued by this service."""

    subject: str
    token_type: TokenType
    issuer: str | None = None
    audience: list[str] = Field(default_factory=list)
    issued_at: int | None = None
    expires_at: int | None = None
    jti: str | None = None
    custom_claims: dict[str, Any] = Field(default_factory=dict)
