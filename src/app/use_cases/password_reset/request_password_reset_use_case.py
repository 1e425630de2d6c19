"""
Request Password Reset Use Case

Issues a single-use reset token and mails it to the user.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable
from urllib.parse import urlencode

from src.app.services.notifier import INotifier
from src.app.services.token_minter import ITokenMinter
from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Result, Return
from src.domain.entities import PendingReset, User
from .errors import PasswordResetErrors

logger = logging.getLogger(__name__)

RESET_MAIL_TEXT = """Hello {name},

A password reset was requested for your account.

Follow the link below to choose a new password (valid until {expiry_date} UTC):
{reset_link}

If you didn't request this, you can safely ignore this email.
"""


def build_reset_link(client_url: str, user_id: str, token: str) -> str:
    query = urlencode({"userId": user_id, "token": token}, safe="@")
    return f"{client_url.rstrip('/')}/confirm-password-reset?{query}"


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown users are rejected with UNKNOWN_USER
    - Only the hash of the token is persisted, with an absolute expiry
    - A new request replaces any pending one
    - The pending reset is committed before the mail is sent; a delivery
      failure is logged and the request still succeeds
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_minter: ITokenMinter,
        notifier: INotifier,
        validity: timedelta = timedelta(hours=1),
        client_url: str = "http://localhost:3000",
        mail_subject: str = "Password reset",
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.uow = uow
        self.token_minter = token_minter
        self.notifier = notifier
        self.validity = validity
        self.client_url = client_url
        self.mail_subject = mail_subject
        self.clock = clock

    async def execute(self, user_id: str) -> Result[None]:
        """
        Execute request password reset use case.

        Args:
            user_id: User's email address

        Returns:
            Result with None, or Error UNKNOWN_USER
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id, for_update=True)
            if user is None:
                logger.warning("Password reset requested for unknown user %s", user_id)
                return Return.err(PasswordResetErrors.UNKNOWN_USER)

            token, token_hash = self.token_minter.generate()
            pending_reset = PendingReset(
                token_hash=token_hash,
                expiry_date=self.clock() + self.validity,
            )
            await self.uow.users.set_pending_reset(user.id, pending_reset)

            # Render before the unit of work closes, the user is detached afterwards
            to_address = user.email
            body = self._render_mail(user, token, pending_reset)

            await self.uow.commit()

        logger.info("Password reset requested for %s", user_id)
        try:
            await self.notifier.send(to_address, self.mail_subject, body)
        except Exception:
            # The reset stays redeemable through the link
            logger.exception("Failed to send password reset email to %s", to_address)

        return Return.ok(None)

    def _render_mail(self, user: User, token: str, pending_reset: PendingReset) -> str:
        return RESET_MAIL_TEXT.format(
            name=user.name or user.email,
            expiry_date=pending_reset.expiry_date.strftime("%Y-%m-%d %H:%M"),
            reset_link=build_reset_link(self.client_url, user.id, token),
        )
