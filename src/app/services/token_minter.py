from abc import ABC, abstractmethod


class ITokenMinter(ABC):
    """Password reset token generation interface - application layer"""

    @abstractmethod
    def generate(self) -> tuple[str, str]:
        """Return a fresh (plaintext_token, token_hash) pair"""
        pass

    @abstractmethod
    def hash(self, token: str) -> str:
        """One-way hash of a plaintext token, deterministic"""
        pass
