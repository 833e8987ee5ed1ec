"""Migration handler: applies Alembic migrations on deploy."""

import json
from typing import Any

from core.services.migration import run_migrations


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    result = run_migrations()
    return {"statusCode": 200, "body": json.dumps(result)}
