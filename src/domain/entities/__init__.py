"""
Password Reset Service Domain Entities
"""

from .pending_reset import PendingReset
from .user import User

__all__ = [
    "PendingReset",
    "User",
]
