"""Database model type definitions."""

from src.models.user import User, UserUpdate

__all__ = [
    "User",
    "UserUpdate",
]
