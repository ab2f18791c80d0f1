# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign-in itself happens client-side with Supabase Auth. These routes let
# the admin frontend check the token it holds.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the identity carried by the current token.

    Raises:
        401: If not authenticated
    """
    return UserResponse(id=user.id, email=user.email, role=user.role)


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Verify that the current token is valid.

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": str(user.id),
        "email": user.email
    }
