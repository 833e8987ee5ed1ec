"""API Gateway proxy helpers and the error boundary shared by the HTTP handlers."""

import functools
import json
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong!"

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}

Event = dict[str, Any]
Response = dict[str, Any]
Handler = Callable[[Event, Any], Response]


def header(event: Event, name: str) -> str | None:
    wanted = name.lower()
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == wanted:
            return str(value)
    return None


def query_params(event: Event) -> dict[str, str]:
    return dict(event.get("queryStringParameters") or {})


def bearer_token(event: Event) -> str | None:
    value = header(event, "Authorization") or ""
    scheme, _, token = value.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def request_line(event: Event) -> tuple[str, str]:
    """(method, path) for REST (v1) and HTTP API (v2) proxy events."""
    http = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http.get("method") or "GET"
    path = event.get("path") or event.get("rawPath") or http.get("path") or "/"
    return method.upper(), path


def _cors_headers(event: Event) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": header(event, "Origin") or "*",
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE",
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Vary": "Origin",
    }


def json_response(status: int, body: Any) -> Response:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def text_response(status: int, body: str) -> Response:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "body": body,
    }


def api_handler(fn: Handler) -> Handler:
    """Log each request and turn any uncaught exception into a generic 500."""

    @functools.wraps(fn)
    def wrapper(event: Event, context: Any) -> Response:
        method, path = request_line(event)
        try:
            response = fn(event, context)
        except Exception:
            logger.exception("Unhandled error for %s %s", method, path)
            response = json_response(500, {"error": GENERIC_ERROR})

        response["headers"] = {**_cors_headers(event), **_SECURITY_HEADERS, **response.get("headers", {})}
        logger.info("%s %s %d", method, path, response["statusCode"])
        return response

    return wrapper
