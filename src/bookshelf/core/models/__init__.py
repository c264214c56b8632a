from .token import TokenClaims, TokenPair

__all__ = ["TokenClaims", "TokenPair"]
