"""User record persistence."""

from typing import Protocol

from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from src.core.config import get_settings
from src.core.supabase import get_supabase_client
from src.models.user import User, UserUpdate


class UserNotFoundError(LookupError):
    """No user row exists for the requested id."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class UserStore(Protocol):
    """Lookup and update of user records by id."""

    async def fetch_by_id(self, user_id: str) -> User: ...

    async def update_by_id(self, user_id: str, fields: UserUpdate) -> User: ...


class SupabaseUserStore:
    """UserStore backed by a Supabase (PostgREST) table."""

    def __init__(self, client: Client | None = None, table: str | None = None) -> None:
        """Initialize the store.

        Args:
            client: Supabase client. Defaults to the shared singleton.
            table: Table name. Defaults to settings.users_table.
        """
        self.client = client or get_supabase_client()
        self.table = table or get_settings().users_table

    async def fetch_by_id(self, user_id: str) -> User:
        """Fetch a user record.

        Args:
            user_id: The user's record id.

        Returns:
            User: The stored row.

        Raises:
            UserNotFoundError: If no row has this id.
        """
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("id", user_id)
                .maybe_single()
                .execute()
            )
        except PostgrestAPIError as e:
            # older postgrest-py reports zero rows from maybe_single() as code 204
            if str(e.code) == "204":
                raise UserNotFoundError(user_id) from e
            raise

        # maybe_single() yields None instead of an empty response on some client versions
        if response is None or not response.data:
            raise UserNotFoundError(user_id)

        return response.data

    async def update_by_id(self, user_id: str, fields: UserUpdate) -> User:
        """Write fields to a user record and return the updated row.

        Args:
            user_id: The user's record id.
            fields: Column values to write.

        Returns:
            User: The row as it reads after the update.

        Raises:
            UserNotFoundError: If no row was updated.
        """
        response = (
            self.client.table(self.table)
            .update(dict(fields))
            .eq("id", user_id)
            .execute()
        )

        if not response.data:
            raise UserNotFoundError(user_id)

        return response.data[0]
