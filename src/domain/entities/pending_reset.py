"""
PendingReset Value Object

Outstanding password reset request attached to a user.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PendingReset(BaseModel):
    """
    PendingReset value object - an issued, not yet redeemed reset token.

    Business Rules:
    - Only the SHA-256 hash of the token is kept, never the plaintext
    - At most one per user; a new request replaces the previous one
    - Cleared only when a confirmation is accepted
    """

    model_config = ConfigDict(frozen=True)

    token_hash: str
    expiry_date: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expiry_date
