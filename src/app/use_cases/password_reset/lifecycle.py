"""
Password Reset Lifecycle

Entry point for the two steps of a password reset. The state lives on the
user record: no pending reset, or a pending reset (token hash + expiry).
request_reset moves a user to the pending state (replacing any previous
request), a successful confirm_reset moves it back. Failed confirmations
change nothing.
"""

from datetime import datetime, timedelta
from typing import Callable

from src.app.services.notifier import INotifier
from src.app.services.token_minter import ITokenMinter
from src.app.services.unit_of_work import UnitOfWork
from src.core.result import Result
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase


class PasswordResetLifecycle:
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
        self._request = RequestPasswordResetUseCase(
            uow,
            token_minter,
            notifier,
            validity=validity,
            client_url=client_url,
            mail_subject=mail_subject,
            clock=clock,
        )
        self._confirm = ConfirmPasswordResetUseCase(uow, token_minter, clock=clock)

    async def request_reset(self, user_id: str) -> Result[None]:
        return await self._request.execute(user_id)

    async def confirm_reset(self, user_id: str, token: str, new_password: str) -> Result[None]:
        return await self._confirm.execute(user_id, token, new_password)
