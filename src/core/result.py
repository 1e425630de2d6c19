"""
Result types for use case outcomes.

Use cases never raise for expected business conditions. They return
either Return.ok(value) or Return.err(Error(code, message)) and callers
branch on is_ok() / is_err().

Usage:
    result = await use_case.execute(user_id)
    if result.is_err():
        print(result.error.code, result.error.message)
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Business error with a stable code and a human readable message"""

    code: str
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: holds either a value or an Error"""

    value: Optional[T] = None
    error: Optional[Error] = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    """Constructors for Result"""

    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
