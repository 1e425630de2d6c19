from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ServerError
from src.app.use_cases.password_reset import (
    PASSWORD_RESET_ERROR_CODES,
    PasswordResetLifecycle,
    PasswordResetOutcome,
)
from src.core.result import Result
from src.depends import get_password_reset_lifecycle

router = APIRouter(prefix="/user", tags=["User"])


def to_outcome(result: Result) -> PasswordResetOutcome:
    """Business failures are normal outcomes, anything else is a server error"""
    if result.is_err() and result.error.code not in PASSWORD_RESET_ERROR_CODES:
        raise ServerError(result.error)
    return PasswordResetOutcome.from_result(result)


@router.get(
    "/request-password-reset/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetOutcome,
    response_model_exclude_none=True,
)
async def request_password_reset(
    user_id: str,
    lifecycle: PasswordResetLifecycle = Depends(get_password_reset_lifecycle),
):
    """
    Request Password Reset

    Mails a confirmation link carrying the user id and a single-use token.

    Returns:
        - {"ok": true}
        - {"ok": false, "error": "Unknown user"}
    """
    result = await lifecycle.request_reset(user_id)
    return to_outcome(result)


class ConfirmPasswordResetRequest(BaseModel):
    """
    Confirm password reset HTTP request payload
    """

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Password reset token from email")
    new_password: str = Field(..., alias="new-password", description="New password")


@router.post(
    "/confirm-password-reset/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetOutcome,
    response_model_exclude_none=True,
)
async def confirm_password_reset(
    user_id: str,
    request: ConfirmPasswordResetRequest,
    lifecycle: PasswordResetLifecycle = Depends(get_password_reset_lifecycle),
):
    """
    Confirm Password Reset

    Returns:
        - {"ok": true}
        - {"ok": false, "error": one of "Unknown user",
          "No password reset request done", "Token has expired",
          "Token is invalid"}
    """
    result = await lifecycle.confirm_reset(user_id, request.token, request.new_password)
    return to_outcome(result)
