"""Keycloak OIDC token introspection."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class TokenUser:
    """Identity behind an active access token."""

    user_id: str
    email: str | None


class KeycloakProvider:
    """Resolves bearer tokens to users through Keycloak introspection."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> TokenUser | None:
        """Return the token's user, or None when the token is inactive or rejected."""
        if not token.strip():
            return None
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as exc:
            logger.warning("Token introspection failed: %s", exc)
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return TokenUser(user_id=token_info["sub"], email=token_info.get("email"))
