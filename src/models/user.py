"""User model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict


class User(TypedDict, total=False):
    """User table row representation.

    Rows are created by the registration flow. The password column
    always holds a hash, never the original secret.
    """

    id: str
    name: str
    email: str
    password: str
    phone: str
    address: str
    created_at: datetime
    updated_at: datetime


class UserUpdate(TypedDict):
    """Complete set of profile fields written on every update.

    email is not part of it; profile updates never change it.
    """

    name: str | None
    password: str | None
    phone: str | None
    address: str | None
