from typing import Any

from core.http import api_handler, text_response


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return text_response(200, "Server is healthy")


@api_handler
def index_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return text_response(200, "Welcome to the Voyago!")
