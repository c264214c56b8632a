from .authentication import AuthenticationService

__all__ = ["AuthenticationService"]
