"""Shared HTTP session, reused across warm Lambda invocations."""

from functools import lru_cache

import requests


@lru_cache(maxsize=1)
def get_http_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    return session
