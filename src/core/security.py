"""Password hashing primitives."""

import asyncio
from typing import Protocol

from werkzeug.security import generate_password_hash

from src.core.config import get_settings


class PasswordHasher(Protocol):
    """One-way transform of a plaintext secret into a storable form."""

    async def hash(self, plaintext: str) -> str: ...


class WerkzeugPasswordHasher:
    """PasswordHasher backed by werkzeug's salted hash helpers.

    Hashing is CPU bound, so it runs in a worker thread to keep the
    event loop free for other requests.
    """

    def __init__(self, method: str | None = None) -> None:
        self.method = method or get_settings().password_hash_method

    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Args:
            plaintext: The secret to hash.

        Returns:
            str: The werkzeug hash string (method, salt and digest).
        """
        return await asyncio.to_thread(generate_password_hash, plaintext, method=self.method)
