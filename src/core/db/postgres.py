"""PostgreSQL data store: connection management and row-level CRUD."""

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Sequence

import boto3
import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from core.config import Config
from core.db.interface import DataStore, Filter, Row
from core.errors import ErrorCode, PersistenceError

# Table name -> columns stored as jsonb
_JSON_COLUMNS: dict[str, frozenset[str]] = {
    "trips": frozenset({"daterange", "locations", "sharedusers"}),
    "expenses": frozenset({"percentages"}),
    "notifications": frozenset(),
}


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any) -> str:
    return json.dumps(value, default=_json_default)


def database_credentials(config: Config) -> dict[str, Any]:
    """Connection parameters from config, overridden by the Secrets Manager
    secret when ``database_secret_arn`` is set."""
    creds: dict[str, Any] = {
        "host": config.database_host,
        "port": config.database_port,
        "dbname": config.database_name,
        "user": config.database_user,
        "password": config.database_password,
    }
    if config.database_secret_arn:
        client = boto3.client("secretsmanager", region_name=config.aws_region)
        secret = json.loads(client.get_secret_value(SecretId=config.database_secret_arn)["SecretString"])
        creds.update(
            host=secret.get("host", creds["host"]),
            port=int(secret.get("port", creds["port"])),
            dbname=secret.get("dbname", creds["dbname"]),
            user=secret.get("username", secret.get("user", creds["user"])),
            password=secret.get("password", creds["password"]),
        )
    return creds


class PostgresStore(DataStore):
    def __init__(self, config: Config) -> None:
        self._config = config
        self._conn: psycopg.Connection | None = None
        self._credentials: dict[str, Any] | None = None

    def connect(self) -> None:
        if self._credentials is None:
            self._credentials = database_credentials(self._config)
        self._conn = psycopg.connect(
            **self._credentials,
            autocommit=True,
            row_factory=dict_row,
        )

    def disconnect(self) -> None:
        if self._conn and not self._conn.closed:
            self._conn.close()
        self._conn = None

    def _require_connection(self) -> psycopg.Connection:
        """Return the active connection or raise if not connected."""
        if self._conn is None or self._conn.closed:
            raise PersistenceError("PostgresStore is not connected. Call connect() first.")
        return self._conn

    def health_check(self) -> bool:
        try:
            conn = self._require_connection()
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
            return True
        except Exception:
            return False

    # ── Query building ───────────────────────────────────────────────────────

    def _json_columns(self, table: str) -> frozenset[str]:
        if table not in _JSON_COLUMNS:
            raise PersistenceError(f"Unknown table: {table}", code=ErrorCode.INVALID_REQUEST)
        return _JSON_COLUMNS[table]

    def _adapt(self, table: str, column: str, value: Any) -> Any:
        if column in self._json_columns(table) and value is not None:
            return Jsonb(value, dumps=_dumps)
        return value

    def _where(self, table: str, filters: Sequence[Filter]) -> tuple[sql.Composable, list[Any]]:
        if not filters:
            return sql.SQL(""), []

        clauses: list[sql.Composable] = []
        params: list[Any] = []
        for column, op, value in filters:
            ident = sql.Identifier(column)
            if op == "eq":
                clauses.append(sql.SQL("{} = %s").format(ident))
                params.append(value)
            elif op == "contains":
                clauses.append(sql.SQL("{} @> %s").format(ident))
                params.append(self._adapt(table, column, value))
            elif op == "in":
                # uuid columns compare against a text[] parameter
                clauses.append(sql.SQL("{}::text = ANY(%s)").format(ident))
                params.append([str(v) for v in value])
            else:
                raise PersistenceError(f"Unsupported filter operator: {op}", code=ErrorCode.INVALID_REQUEST)
        return sql.SQL(" WHERE ") + sql.SQL(" AND ").join(clauses), params

    def _run(self, action: str, table: str, query: sql.Composable, params: Sequence[Any]) -> psycopg.Cursor:
        conn = self._require_connection()
        cur = conn.cursor()
        try:
            cur.execute(query, params)
        except psycopg.Error as e:
            cur.close()
            raise PersistenceError(
                f"{action} on {table} failed: {e}",
                code=ErrorCode.PERSISTENCE_FAILED,
            ) from e
        return cur

    # ── CRUD ─────────────────────────────────────────────────────────────────

    def insert(self, table: str, rows: Sequence[Row]) -> list[Row]:
        if not rows:
            return []

        columns = list(rows[0])
        placeholders = sql.SQL("({})").format(sql.SQL(", ").join([sql.Placeholder()] * len(columns)))
        query = sql.SQL("INSERT INTO {} ({}) VALUES {} RETURNING *").format(
            sql.Identifier(table),
            sql.SQL(", ").join(map(sql.Identifier, columns)),
            sql.SQL(", ").join([placeholders] * len(rows)),
        )
        params = [self._adapt(table, col, row.get(col)) for row in rows for col in columns]

        with self._run("Insert", table, query, params) as cur:
            return list(cur.fetchall())

    def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        self._json_columns(table)
        where, params = self._where(table, filters)
        query = sql.SQL("SELECT * FROM {}").format(sql.Identifier(table)) + where
        if order_by:
            direction = sql.SQL(" DESC") if descending else sql.SQL(" ASC")
            query = query + sql.SQL(" ORDER BY {}").format(sql.Identifier(order_by)) + direction

        with self._run("Select", table, query, params) as cur:
            return list(cur.fetchall())

    def update(self, table: str, values: Row, filters: Sequence[Filter]) -> list[Row]:
        if not filters:
            raise PersistenceError(f"Refusing unfiltered update on {table}", code=ErrorCode.INVALID_REQUEST)

        assignments = sql.SQL(", ").join(
            sql.SQL("{} = %s").format(sql.Identifier(col)) for col in values
        )
        where, where_params = self._where(table, filters)
        query = (
            sql.SQL("UPDATE {} SET {}").format(sql.Identifier(table), assignments)
            + where
            + sql.SQL(" RETURNING *")
        )
        params = [self._adapt(table, col, val) for col, val in values.items()] + where_params

        with self._run("Update", table, query, params) as cur:
            return list(cur.fetchall())

    def delete(self, table: str, filters: Sequence[Filter]) -> int:
        if not filters:
            raise PersistenceError(f"Refusing unfiltered delete on {table}", code=ErrorCode.INVALID_REQUEST)

        where, params = self._where(table, filters)
        query = sql.SQL("DELETE FROM {}").format(sql.Identifier(table)) + where

        with self._run("Delete", table, query, params) as cur:
            return cur.rowcount

    def __enter__(self) -> "PostgresStore":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()
