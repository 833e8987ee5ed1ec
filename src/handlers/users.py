"""GET /api/users: user directory from the identity provider."""

import asyncio
import logging
from typing import Any

from core.auth import get_auth_provider
from core.errors import USER_MESSAGES, AuthenticationError, DirectoryError, ErrorCode
from core.http import api_handler, bearer_token, json_response
from core.models.user import UserProfile
from core.services.directory import list_user_profiles

logger = logging.getLogger(__name__)


async def _authorized_directory(token: str) -> list[UserProfile]:
    auth_provider = get_auth_provider()
    await auth_provider.verify_token(token)
    return await list_user_profiles(auth_provider)


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    token = bearer_token(event)
    if token is None:
        return json_response(401, {"error": USER_MESSAGES[ErrorCode.AUTH_FAILED]})

    # AuthProvider methods are async; ClerkAuthProvider's SDK calls are synchronous,
    # so asyncio.run() bridges them in this sync Lambda handler.
    try:
        profiles = asyncio.run(_authorized_directory(token))
    except AuthenticationError as e:
        return json_response(401, {"error": e.user_message})
    except DirectoryError as e:
        logger.exception("Error fetching users")
        return json_response(500, {"error": e.user_message})

    return json_response(200, [profile.model_dump() for profile in profiles])
