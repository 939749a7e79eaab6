"""User profile Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdateRequest(BaseModel):
    """Schema for updating the caller's profile.

    All fields are optional. A missing, null or empty value leaves the
    stored value unchanged. The password length rule is checked by
    ProfileService, not here, so that it reports its own message.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str | None = Field(default=None, description="New display name")
    password: str | None = Field(default=None, description="New plaintext password")
    phone: str | None = Field(default=None, description="New phone number")
    address: str | None = Field(default=None, description="New postal address")


class UserProfileResponse(BaseModel):
    """The caller's own record, without the password hash."""

    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

    id: str = Field(description="User record identifier")
    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Email address")
    phone: str | None = Field(default=None, description="Phone number")
    address: str | None = Field(default=None, description="Postal address")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class UpdatedUser(UserProfileResponse):
    """A user record exactly as the store returned it after an update.

    Unknown columns pass through untouched.
    """

    model_config = ConfigDict(from_attributes=True, extra="allow", coerce_numbers_to_str=True)

    password: str | None = Field(default=None, description="Password hash")


class ProfileUpdateResponse(BaseModel):
    """Successful profile update.

    Serialize with ``by_alias=True`` and ``exclude_unset=True`` so the
    record reads under ``updatedUser`` with only the stored columns.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True)
    message: str = Field(description="Confirmation message")
    updated_user: UpdatedUser = Field(alias="updatedUser", description="The record after the update")


class ProfileValidationErrorResponse(BaseModel):
    """Rejected profile update input."""

    error: str = Field(description="Which input rule was broken")


class ProfileUpdateErrorResponse(BaseModel):
    """Profile update that failed while reading, hashing or writing."""

    success: bool = Field(default=False)
    message: str = Field(description="Generic failure message")
    error: str = Field(description="Underlying error detail")
