"""Profile business logic service."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.config import get_settings
from src.core.security import PasswordHasher, WerkzeugPasswordHasher
from src.models.user import User, UserUpdate
from src.schemas.user import ProfileUpdateRequest
from src.services.user_store import SupabaseUserStore, UserStore

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "password", "phone", "address")

PASSWORD_LENGTH_MESSAGE = "Password is required and {min_length} character long"
PROFILE_UPDATED_MESSAGE = "Profile updated successfully"
PROFILE_UPDATE_FAILED_MESSAGE = "Error while updating profile"


class ProfileUpdateStatus(str, Enum):
    """Outcome kinds of a profile update."""

    UPDATED = "updated"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class ProfileUpdated:
    """The merged record was written."""

    user: User
    message: str = PROFILE_UPDATED_MESSAGE
    status: ProfileUpdateStatus = ProfileUpdateStatus.UPDATED


@dataclass(frozen=True)
class ProfileValidationFailed:
    """The request was rejected before any write."""

    message: str
    status: ProfileUpdateStatus = ProfileUpdateStatus.INVALID


@dataclass(frozen=True)
class ProfileProcessingFailed:
    """Fetching, hashing or writing failed."""

    error: Exception
    message: str = PROFILE_UPDATE_FAILED_MESSAGE
    status: ProfileUpdateStatus = ProfileUpdateStatus.FAILED


ProfileUpdateResult = ProfileUpdated | ProfileValidationFailed | ProfileProcessingFailed


def validate_password(password: str | None, min_length: int = 6) -> str | None:
    """Check a supplied plaintext password.

    An empty or missing password means "not supplied" and passes.

    Args:
        password: The plaintext password from the request.
        min_length: Minimum accepted length.

    Returns:
        str | None: The diagnostic message if the password is rejected.
    """
    if password and len(password) < min_length:
        return PASSWORD_LENGTH_MESSAGE.format(min_length=min_length)
    return None


def merge_fields(existing: Mapping[str, Any], partial: Mapping[str, Any]) -> UserUpdate:
    """Build the full profile field set from a stored record and overrides.

    Every profile field is present in the result. A field takes the
    override when it is truthy, otherwise the stored value.

    Args:
        existing: The stored user record.
        partial: Overrides keyed by profile field (password already hashed).

    Returns:
        UserUpdate: name, password, phone and address.
    """
    return UserUpdate(
        **{field: partial.get(field) or existing.get(field) for field in PROFILE_FIELDS}
    )


class ProfileService:
    """Service for updating user profiles."""

    def __init__(
        self,
        store: UserStore | None = None,
        hasher: PasswordHasher | None = None,
    ) -> None:
        """Initialize profile service.

        Args:
            store: User record store. Defaults to the Supabase users table.
            hasher: Password hasher. Defaults to werkzeug.
        """
        self.store = store or SupabaseUserStore()
        self.hasher = hasher or WerkzeugPasswordHasher()
        self.password_min_length = get_settings().password_min_length

    async def get_profile(self, user_id: str) -> User:
        """Get a user record by id.

        Raises:
            UserNotFoundError: If no row has this id.
        """
        return await self.store.fetch_by_id(user_id)

    async def update_profile(
        self,
        user_id: str,
        data: ProfileUpdateRequest,
    ) -> ProfileUpdateResult:
        """Validate, merge and persist a partial profile update.

        Steps run in order and stop at the first failure: fetch the
        stored record, check the password, hash it, write the merged
        fields. Downstream exceptions are returned as
        ProfileProcessingFailed and never raised.

        Args:
            user_id: The authenticated caller's record id.
            data: The fields to change.

        Returns:
            ProfileUpdateResult: Which outcome occurred, with its payload.
        """
        try:
            existing = await self.store.fetch_by_id(user_id)
        except Exception as e:
            return self._failed(user_id, "fetch", e)

        invalid = validate_password(data.password, self.password_min_length)
        if invalid:
            logger.info("Rejected profile update for user %s: %s", user_id, invalid)
            return ProfileValidationFailed(message=invalid)

        overrides = data.model_dump(include=set(PROFILE_FIELDS))
        if data.password:
            try:
                overrides["password"] = await self.hasher.hash(data.password)
            except Exception as e:
                return self._failed(user_id, "hash", e)

        merged = merge_fields(existing, overrides)

        try:
            updated = await self.store.update_by_id(user_id, merged)
        except Exception as e:
            return self._failed(user_id, "update", e)

        logger.info("Updated profile for user %s", user_id)
        return ProfileUpdated(user=updated)

    @staticmethod
    def _failed(user_id: str, step: str, error: Exception) -> ProfileProcessingFailed:
        logger.error("Profile update %s failed for user %s: %s", step, user_id, str(error))
        return ProfileProcessingFailed(error=error)
