"""JWT token domain service."""

from typing import Mapping
from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.config import AuthSettings
from blog.domain.value import Actor, Role, UserId
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, role: Role = Role.USER, name: str | None = None
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            role: User role
            name: Display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, role.value, self.auth_settings, name=name)
            logfire.info("JWT token created", user_id=user_id, role=role.value)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the calling actor from a session token without raising.

        Missing, invalid or expired tokens, and tokens whose claims do not
        name a valid user and role, yield None (anonymous caller).

        Args:
            token: JWT token string (optional)

        Returns:
            Actor if token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(user_id=UserId(UUID(payload.user_id)), role=Role(payload.role))
        except (JWTError, ValueError, PydanticValidationError) as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def get_actor_from_cookies(self, cookies: Mapping[str, str]) -> Actor | None:
        """Resolve the calling actor from request cookies.

        Reads the session cookie named in the auth settings.
        """
        return self.get_actor_from_token(cookies.get(self.auth_settings.cookie_name))
