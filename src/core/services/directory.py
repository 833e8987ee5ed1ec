"""User directory: identity-provider listing and the backend client for it."""

import logging
from typing import Any

import pydantic
import requests

from core.auth.interface import AuthProvider
from core.clients import get_http_session
from core.errors import DirectoryError, ErrorCode
from core.models.user import UserProfile

logger = logging.getLogger(__name__)

DIRECTORY_TIMEOUT_SECONDS = 10


async def list_user_profiles(auth_provider: AuthProvider) -> list[UserProfile]:
    users = await auth_provider.list_users()
    return [user.to_profile() for user in users]


def fetch_user_directory(
    backend_url: str,
    token: str | None = None,
    timeout: float = DIRECTORY_TIMEOUT_SECONDS,
    session: requests.Session | None = None,
) -> list[UserProfile]:
    """Fetch ``GET /api/users`` from the backend, aborting after ``timeout`` seconds."""
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    http = session or get_http_session()
    try:
        response = http.get(f"{backend_url.rstrip('/')}/api/users", headers=headers, timeout=timeout)
        response.raise_for_status()
        payload: list[dict[str, Any]] = response.json()
    except requests.Timeout as e:
        raise DirectoryError(f"User directory timed out after {timeout}s", code=ErrorCode.TIMEOUT) from e
    except (requests.RequestException, ValueError) as e:
        raise DirectoryError(f"User directory request failed: {e}", code=ErrorCode.DIRECTORY_FAILED) from e

    try:
        return [UserProfile.model_validate(entry) for entry in payload]
    except (pydantic.ValidationError, TypeError) as e:
        raise DirectoryError(f"Malformed user directory response: {e}", code=ErrorCode.DIRECTORY_FAILED) from e
