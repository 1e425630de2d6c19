"""
User Entity

Represents a person whose password can be reset.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from .pending_reset import PendingReset


class User(SQLModel, table=True):
    """
    User entity - identified by email, owns its password and pending reset.

    Business Rules:
    - id is the user's email address and never changes
    - Password stored as bcrypt hash (cost factor 12) of its SHA-256 digest,
      so any length is accepted
    - Pending reset columns are either both set or both null
    - Created and deleted outside this service
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=255)
    name: str = Field(default="", max_length=255)
    roles: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    profile: dict = Field(default_factory=dict, sa_column=Column(JSON))

    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Pending password reset
    password_reset_token_hash: Optional[str] = Field(default=None, max_length=64)
    password_reset_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    @property
    def email(self) -> str:
        return self.id

    @property
    def pending_reset(self) -> Optional[PendingReset]:
        if self.password_reset_token_hash is None or self.password_reset_expires_at is None:
            return None
        return PendingReset(
            token_hash=self.password_reset_token_hash,
            expiry_date=self.password_reset_expires_at,
        )
