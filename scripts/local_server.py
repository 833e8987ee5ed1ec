#!/usr/bin/env python3
"""Serve the Lambda handlers over plain HTTP for local development.

Each request is translated into an API Gateway proxy event and dispatched to
the matching handler, so the handlers run exactly as they do when deployed.

Usage:
    python scripts/local_server.py
"""

import logging
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

from dotenv import load_dotenv

# Add src to path for handler imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

load_dotenv()

from core.config import get_config  # noqa: E402
from core.http import json_response  # noqa: E402
from handlers import health, places, users  # noqa: E402

ROUTES = {
    ("GET", "/"): health.index_handler,
    ("GET", "/health"): health.handler,
    ("GET", "/api/users"): users.handler,
    ("GET", "/locations/places"): places.handler,
}


class ProxyRequestHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:
        url = urlsplit(self.path)
        event = {
            "httpMethod": "GET",
            "path": url.path,
            "headers": dict(self.headers.items()),
            "queryStringParameters": dict(parse_qsl(url.query)) or None,
            "body": None,
        }
        route = ROUTES.get(("GET", url.path))
        response = route(event, None) if route else json_response(404, {"error": "Not found"})

        body = response.get("body", "").encode()
        self.send_response(response["statusCode"])
        for name, value in response.get("headers", {}).items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        # Handlers already log one line per request
        pass


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    port = get_config().port
    server = ThreadingHTTPServer(("", port), ProxyRequestHandler)
    print(f"Voyago Server is running at http://localhost:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
