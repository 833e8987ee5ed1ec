from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_clerk_secret: str | None = None


def _resolve_clerk_secret() -> str:
    """Fetch Clerk secret from Secrets Manager at runtime, with caching."""
    global _cached_clerk_secret
    if _cached_clerk_secret is not None:
        return _cached_clerk_secret

    # Local dev: use env var directly
    direct = environ.get("CLERK_SECRET_KEY", "")
    if direct:
        _cached_clerk_secret = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("CLERK_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_clerk_secret = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_clerk_secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    database_host: str
    database_port: int
    database_name: str
    database_user: str
    database_password: str
    database_secret_arn: str | None = None
    clerk_secret_key: str = ""
    clerk_publishable_key: str = ""
    google_maps_api_key: str = ""
    backend_url: str
    port: int = 3000


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config: for testing only."""
    global _cached_config, _cached_clerk_secret
    _cached_config = None
    _cached_clerk_secret = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    port = environ.get("PORT", "3000")
    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
        database_host=environ.get("DATABASE_HOST", "localhost"),
        database_port=int(environ.get("DATABASE_PORT", "5432")),
        database_name=environ.get("DATABASE_NAME", "voyago"),
        database_user=environ.get("DATABASE_USER", "voyago"),
        database_password=environ.get("DATABASE_PASSWORD", "localdev"),
        database_secret_arn=environ.get("DATABASE_SECRET_ARN"),
        clerk_secret_key=_resolve_clerk_secret(),
        clerk_publishable_key=environ.get("CLERK_PUBLISHABLE_KEY", ""),
        google_maps_api_key=environ.get("GOOGLE_MAPS_API_KEY", ""),
        backend_url=environ.get("BACKEND_URL", f"http://localhost:{port}"),
        port=int(port),
    )
    return _cached_config
