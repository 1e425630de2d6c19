"""
Password reset business errors.

The messages are part of the public contract and are returned verbatim
to callers.
"""

from src.core.result import Error


class PasswordResetErrors:
    UNKNOWN_USER = Error("UNKNOWN_USER", "Unknown user")
    NO_REQUEST_PENDING = Error("NO_REQUEST_PENDING", "No password reset request done")
    TOKEN_EXPIRED = Error("TOKEN_EXPIRED", "Token has expired")
    TOKEN_INVALID = Error("TOKEN_INVALID", "Token is invalid")


PASSWORD_RESET_ERROR_CODES = frozenset(
    {
        PasswordResetErrors.UNKNOWN_USER.code,
        PasswordResetErrors.NO_REQUEST_PENDING.code,
        PasswordResetErrors.TOKEN_EXPIRED.code,
        PasswordResetErrors.TOKEN_INVALID.code,
    }
)
