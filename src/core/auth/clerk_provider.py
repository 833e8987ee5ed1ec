from typing import Any

import jwt
from clerk_backend_api import Clerk, authenticate_request
from clerk_backend_api.security.types import AuthenticateRequestOptions

from core.errors import AuthenticationError, DirectoryError, ErrorCode

from .interface import AuthProvider, AuthUser


class _FakeRequest:
    """Adapts a raw Bearer token to the Requestish protocol expected by Clerk SDK."""

    def __init__(self, token: str):
        self.headers = {"Authorization": f"Bearer {token}"}


def _to_auth_user(user: Any) -> AuthUser:
    return AuthUser(
        user_id=user.id,
        email=user.email_addresses[0].email_address if user.email_addresses else "",
        first_name=user.first_name or None,
        last_name=user.last_name or None,
        name=f"{user.first_name or ''} {user.last_name or ''}".strip() or user.username or "",
        image_url=user.image_url or None,
    )


class ClerkAuthProvider(AuthProvider):
    def __init__(self, secret_key: str):
        self._client = Clerk(bearer_auth=secret_key)
        self._secret_key = secret_key

    async def verify_token(self, token: str) -> AuthUser:
        try:
            request_state = authenticate_request(
                _FakeRequest(token),
                AuthenticateRequestOptions(secret_key=self._secret_key),
            )
            if not request_state.is_signed_in or request_state.payload is None:
                raise AuthenticationError(
                    f"Token verification failed: {request_state.message or 'unknown'}",
                    code=ErrorCode.INVALID_TOKEN,
                )
            user_id = str(request_state.payload["sub"])
            return await self.get_user(user_id)
        except AuthenticationError:
            raise
        except Exception as e:
            raise AuthenticationError(f"Token verification failed: {e}", code=ErrorCode.INVALID_TOKEN) from e

    async def get_user(self, user_id: str) -> AuthUser:
        try:
            return _to_auth_user(self._client.users.get(user_id=user_id))
        except Exception as e:
            raise AuthenticationError(f"Failed to fetch user: {e}", code=ErrorCode.AUTH_FAILED) from e

    async def list_users(self, limit: int = 100) -> list[AuthUser]:
        try:
            users = self._client.users.list(request={"limit": limit}) or []
        except Exception as e:
            raise DirectoryError(f"Failed to list users: {e}", code=ErrorCode.DIRECTORY_FAILED) from e
        return [_to_auth_user(user) for user in users]

    async def decode_claims(self, token: str) -> dict[str, object]:
        """Decode JWT claims WITHOUT signature verification. For logging/routing only."""
        try:
            decoded: dict[str, object] = jwt.decode(
                token, options={"verify_signature": False}
            )
            return decoded
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}", code=ErrorCode.INVALID_TOKEN) from e
