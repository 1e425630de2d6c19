"""
Password Reset DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.core.result import Result


class PasswordResetOutcome(BaseModel):
    """Caller-facing outcome: {"ok": true} or {"ok": false, "error": message}"""

    ok: bool
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: Result) -> "PasswordResetOutcome":
        if result.is_err():
            return cls(ok=False, error=result.error.message)
        return cls(ok=True)
