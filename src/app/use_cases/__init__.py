"""
Use Cases

- password_reset/: Forgotten password flow
"""

from .password_reset import (
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    PasswordResetLifecycle,
)

__all__ = [
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "PasswordResetLifecycle",
]
