"""Shared test fixtures for Voyago."""

import copy
import itertools
import os
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.db.interface import DataStore  # noqa: E402
from core.errors import ErrorCode, PersistenceError  # noqa: E402


class InMemoryStore(DataStore):
    """DataStore over plain lists, with the same defaults and filters as the real tables."""

    _BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __init__(self):
        self.tables = {"trips": [], "expenses": [], "notifications": []}
        self.fail_on: set[tuple[str, str]] = set()
        self._expense_ids = itertools.count(1)
        self._clock = itertools.count()

    def _check(self, action, table):
        if table not in self.tables:
            raise PersistenceError(f"Unknown table: {table}", code=ErrorCode.INVALID_REQUEST)
        if (action, table) in self.fail_on:
            raise PersistenceError(f"{action} on {table} failed", code=ErrorCode.PERSISTENCE_FAILED)

    def _defaults(self, table):
        created_at = self._BASE_TIME + timedelta(seconds=next(self._clock))
        if table == "trips":
            return {"id": str(uuid.uuid4()), "imageurl": None, "locations": [], "sharedusers": [], "created_at": created_at}
        if table == "expenses":
            return {"id": next(self._expense_ids), "percentages": None, "created_at": created_at}
        return {"id": str(uuid.uuid4()), "trip_id": None, "is_read": False, "accept": None, "created_at": created_at}

    @staticmethod
    def _contains(haystack, needles):
        for needle in needles:
            if isinstance(needle, dict):
                if not any(isinstance(el, dict) and needle.items() <= el.items() for el in haystack):
                    return False
            elif needle not in haystack:
                return False
        return True

    def _matches(self, row, filters):
        for column, op, value in filters:
            if op == "eq" and row.get(column) != value:
                return False
            if op == "contains" and not self._contains(row.get(column) or [], value):
                return False
            if op == "in" and str(row.get(column)) not in {str(v) for v in value}:
                return False
        return True

    def insert(self, table, rows):
        self._check("insert", table)
        inserted = []
        for row in rows:
            record = {**self._defaults(table), **copy.deepcopy(row)}
            self.tables[table].append(record)
            inserted.append(copy.deepcopy(record))
        return inserted

    def select(self, table, filters=(), order_by=None, descending=False):
        self._check("select", table)
        rows = [copy.deepcopy(r) for r in self.tables[table] if self._matches(r, filters)]
        if order_by:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        return rows

    def update(self, table, values, filters):
        self._check("update", table)
        updated = []
        for row in self.tables[table]:
            if self._matches(row, filters):
                row.update(copy.deepcopy(values))
                updated.append(copy.deepcopy(row))
        return updated

    def delete(self, table, filters):
        self._check("delete", table)
        doomed = [r for r in self.tables[table] if self._matches(r, filters)]
        self.tables[table] = [r for r in self.tables[table] if r not in doomed]
        if table == "trips":
            ids = {r["id"] for r in doomed}
            for child in ("expenses", "notifications"):
                self.tables[child] = [r for r in self.tables[child] if r.get("trip_id") not in ids]
        return len(doomed)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def trip_row():
    """Raw trips row as the database returns it."""
    return {
        "id": uuid.UUID("6f1c2a52-4c8e-4a8e-9f43-0f3c1b2d7e11"),
        "tripname": "Lisbon Spring",
        "country": "Portugal",
        "daterange": {"from": "2026-04-01T00:00:00.000Z", "to": "2026-04-08T00:00:00.000Z"},
        "ownerid": "user_owner",
        "imageurl": "3",
        "locations": [
            {"lat": 38.7223, "lng": -9.1393, "location": "Lisbon, Portugal", "userId": "user_owner", "color": "#1F5986"}
        ],
        "sharedusers": [{"userId": "user_friend"}],
        "created_at": datetime(2026, 1, 5, tzinfo=timezone.utc),
    }


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from core.config import get_config

    config = get_config()
    conn_str = (
        f"host={config.database_host} port={config.database_port} "
        f"dbname={config.database_name} user={config.database_user} "
        f"password={config.database_password}"
    )

    conn = psycopg.connect(conn_str)
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def pg_store():
    """Connected PostgresStore; removes the trips it created on teardown."""
    from core.config import get_config
    from core.db import PostgresStore, in_

    with PostgresStore(get_config()) as pg:
        created: list[str] = []
        pg.created_trip_ids = created  # type: ignore[attr-defined]
        yield pg
        if created:
            pg.delete("trips", [in_("id", created)])
