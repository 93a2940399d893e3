"""Auth middleware - resolves the bearer token to the requesting user."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None


class AuthMiddleware:
    """Sets req.context.user, or None when the request is not authenticated.

    Without a token provider (local development) every request runs as the
    ``anonymous`` user.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        if self._keycloak is None:
            req.context.user = RequestUser(user_id="anonymous")
            return
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            return
        user = self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = RequestUser(user_id=user.user_id, email=user.email)
