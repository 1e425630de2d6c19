"""
Confirm Password Reset Use Case

Redeems a reset token and sets the new password.
"""

import hmac
import logging
from datetime import datetime
from typing import Callable

from src.app.services.token_minter import ITokenMinter
from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Error, Result, Return
from .errors import PasswordResetErrors

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming a password reset.

    Checks run in this exact order:
    1. User exists (UNKNOWN_USER)
    2. A reset is pending (NO_REQUEST_PENDING)
    3. The pending reset has not expired (TOKEN_EXPIRED)
    4. The presented token hashes to the stored hash (TOKEN_INVALID)

    Expiry is decided before the token is looked at, so a stale token never
    reveals whether it was correct. Failures leave the pending reset in
    place; only a successful confirmation clears it.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_minter: ITokenMinter,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.uow = uow
        self.token_minter = token_minter
        self.clock = clock

    async def execute(self, user_id: str, token: str, new_password: str) -> Result[None]:
        """
        Execute confirm password reset use case.

        Args:
            user_id: User's email address
            token: Plaintext token from the reset email
            new_password: Password to set

        Returns:
            Result with None, or Error

        Errors:
            - UNKNOWN_USER
            - NO_REQUEST_PENDING
            - TOKEN_EXPIRED
            - TOKEN_INVALID
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id, for_update=True)
            if user is None:
                return self._reject(user_id, PasswordResetErrors.UNKNOWN_USER)

            pending_reset = user.pending_reset
            if pending_reset is None:
                return self._reject(user_id, PasswordResetErrors.NO_REQUEST_PENDING)

            if pending_reset.is_expired(self.clock()):
                return self._reject(user_id, PasswordResetErrors.TOKEN_EXPIRED)

            presented_hash = self.token_minter.hash(token)
            if not hmac.compare_digest(presented_hash.encode(), pending_reset.token_hash.encode()):
                return self._reject(user_id, PasswordResetErrors.TOKEN_INVALID)

            await self.uow.users.commit_password(user_id, new_password)
            await self.uow.users.clear_pending_reset(user_id)
            await self.uow.commit()

        logger.info("Password reset confirmed for %s", user_id)
        return Return.ok(None)

    def _reject(self, user_id: str, error: Error) -> Result[None]:
        logger.info("Password reset confirmation rejected for %s: %s", user_id, error.code)
        return Return.err(error)
