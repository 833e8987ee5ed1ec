from abc import ABC, abstractmethod

from pydantic import BaseModel

from core.models.user import UserProfile


class AuthUser(BaseModel):
    user_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    name: str
    image_url: str | None = None

    def to_profile(self) -> UserProfile:
        return UserProfile(
            id=self.user_id,
            email=self.email,
            firstName=self.first_name,
            lastName=self.last_name,
            imageUrl=self.image_url,
        )


class AuthProvider(ABC):
    @abstractmethod
    async def verify_token(self, token: str) -> AuthUser: ...

    @abstractmethod
    async def get_user(self, user_id: str) -> AuthUser: ...

    @abstractmethod
    async def list_users(self, limit: int = 100) -> list[AuthUser]: ...

    @abstractmethod
    async def decode_claims(self, token: str) -> dict[str, object]: ...


def get_auth_provider() -> AuthProvider:
    from core.config import get_config

    config = get_config()
    clerk_secret = config.clerk_secret_key
    if not clerk_secret:
        raise ValueError("CLERK_SECRET_KEY not configured")

    from core.auth.clerk_provider import ClerkAuthProvider

    return ClerkAuthProvider(secret_key=clerk_secret)
