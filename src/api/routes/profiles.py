"""Profile API routes."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.api.deps import CurrentUser, ProfileServiceDep
from src.schemas.user import (
    ProfileUpdateErrorResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    ProfileValidationErrorResponse,
    UpdatedUser,
    UserProfileResponse,
)
from src.services.profile_service import ProfileUpdated, ProfileValidationFailed

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "/me",
    response_model=UserProfileResponse,
    response_model_exclude_unset=True,
    responses={404: {"description": "No record for the caller"}},
    summary="Get current user's profile",
    description="Returns the authenticated user's stored record without the password hash.",
)
async def get_my_profile(user: CurrentUser, service: ProfileServiceDep) -> UserProfileResponse:
    """Get the authenticated user's profile.

    A missing record raises UserNotFoundError, which the error handler
    middleware answers with 404.
    """
    record = await service.get_profile(user.user_id)
    return UserProfileResponse(**record)


@router.put(
    "/me",
    response_model=ProfileUpdateResponse,
    responses={
        400: {
            "description": "Password rule broken, or the update could not be processed",
        },
    },
    summary="Update current user's profile",
    description="Updates name, password, phone and address. Omitted fields keep their stored values.",
)
async def update_my_profile(
    data: ProfileUpdateRequest,
    user: CurrentUser,
    service: ProfileServiceDep,
) -> JSONResponse:
    """Update the authenticated user's profile.

    Both failure kinds answer 400. A rejected password returns only an
    ``error`` message; a failed fetch, hash or write returns
    ``success: false`` with the underlying error text.

    Args:
        data: Fields to update.
        user: The authenticated user context.
        service: Profile service.

    Returns:
        JSONResponse: The outcome body. On success the record sits under
        ``updatedUser`` holding only the columns the store returned.
    """
    result = await service.update_profile(user.user_id, data)

    if isinstance(result, ProfileUpdated):
        updated = ProfileUpdateResponse(
            success=True,
            message=result.message,
            updated_user=UpdatedUser(**result.user),
        )
        return JSONResponse(content=updated.model_dump(mode="json", by_alias=True, exclude_unset=True))

    if isinstance(result, ProfileValidationFailed):
        body = ProfileValidationErrorResponse(error=result.message)
    else:
        body = ProfileUpdateErrorResponse(message=result.message, error=str(result.error))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json"),
    )
