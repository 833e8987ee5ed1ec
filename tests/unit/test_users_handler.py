import json
from unittest.mock import AsyncMock, MagicMock, patch

from core.auth import AuthUser
from core.errors import AuthenticationError, DirectoryError, ErrorCode

from handlers.users import handler

EVENT = {"httpMethod": "GET", "path": "/api/users", "headers": {"Authorization": "Bearer valid"}}


def _provider(users=None, verify_error=None, list_error=None):
    provider = MagicMock()
    provider.verify_token = AsyncMock(
        side_effect=verify_error,
        return_value=AuthUser(user_id="viewer", email="v@example.com", name="Vic"),
    )
    provider.list_users = AsyncMock(side_effect=list_error, return_value=users or [])
    return provider


def test_lists_users():
    users = [
        AuthUser(
            user_id="u1",
            email="ana@example.com",
            first_name="Ana",
            last_name="Silva",
            name="Ana Silva",
            image_url="https://img/ana.png",
        )
    ]
    with patch("handlers.users.get_auth_provider", return_value=_provider(users)):
        response = handler(EVENT, None)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == [
        {
            "id": "u1",
            "email": "ana@example.com",
            "firstName": "Ana",
            "lastName": "Silva",
            "imageUrl": "https://img/ana.png",
        }
    ]


def test_missing_token():
    response = handler({"httpMethod": "GET", "path": "/api/users", "headers": {}}, None)
    assert response["statusCode"] == 401


def test_invalid_token():
    provider = _provider(verify_error=AuthenticationError("bad", code=ErrorCode.INVALID_TOKEN))
    with patch("handlers.users.get_auth_provider", return_value=provider):
        response = handler(EVENT, None)

    assert response["statusCode"] == 401
    provider.list_users.assert_not_called()


def test_directory_failure():
    provider = _provider(list_error=DirectoryError("rate limited", code=ErrorCode.DIRECTORY_FAILED))
    with patch("handlers.users.get_auth_provider", return_value=provider):
        response = handler(EVENT, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"error": "Failed to fetch users"}


def test_missing_configuration_is_generic_500():
    with patch("handlers.users.get_auth_provider", side_effect=ValueError("CLERK_SECRET_KEY not configured")):
        response = handler(EVENT, None)

    assert response["statusCode"] == 500
    assert json.loads(response["body"]) == {"error": "Something went wrong!"}
