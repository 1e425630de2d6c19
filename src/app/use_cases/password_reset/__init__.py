"""
Password Reset Use Cases

Token issuance and redemption for forgotten passwords.
"""

from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .lifecycle import PasswordResetLifecycle
from .errors import PasswordResetErrors, PASSWORD_RESET_ERROR_CODES
from .dtos import PasswordResetOutcome

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "PasswordResetLifecycle",
    # Errors
    "PasswordResetErrors",
    "PASSWORD_RESET_ERROR_CODES",
    # DTOs
    "PasswordResetOutcome",
]
