import hashlib
import secrets

from src.app.services.token_minter import ITokenMinter

TOKEN_BYTES = 32


class Sha256TokenMinter(ITokenMinter):
    """
    Password reset tokens from the OS CSPRNG, hashed with SHA-256.

    Tokens are 32 random bytes, URL-safe base64 encoded (43 chars).
    Hashes are 64-char hex digests. Errors from the entropy source are
    not caught: no token is better than a weak one.
    """

    def generate(self) -> tuple[str, str]:
        token = secrets.token_urlsafe(TOKEN_BYTES)
        return token, self.hash(token)

    def hash(self, token: str) -> str:
        return hashlib.sha256(token.encode()).hexdigest()
