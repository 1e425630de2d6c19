"""
Unit tests for RequestPasswordResetUseCase

Tests all business logic with mocked dependencies.
"""
import logging
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from src.app.use_cases.password_reset import PasswordResetErrors, RequestPasswordResetUseCase
from src.app.use_cases.password_reset.request_password_reset_use_case import build_reset_link
from src.domain.entities import PendingReset, User

NOW = datetime(2026, 1, 1, 12, 0, 0)
USER_ID = "john.doe@example.com"


def assert_token_not_logged(caplog):
    assert "fake-token" not in caplog.text
    assert all(r.exc_text is None or "fake-token" not in r.exc_text for r in caplog.records)


def make_use_case(mock_uow, mock_token_minter, mock_notifier, **kwargs):
    kwargs.setdefault("clock", lambda: NOW)
    kwargs.setdefault("client_url", "https://app.example.com")
    return RequestPasswordResetUseCase(mock_uow, mock_token_minter, mock_notifier, **kwargs)


@pytest.fixture
def john(mock_uow):
    user = User(id=USER_ID, name="John Doe", password_hash="hashed_password")
    mock_uow.users.get_by_id.return_value = user
    return user


@pytest.mark.asyncio
async def test_successful_password_reset_request(
    mock_uow, mock_token_minter, mock_notifier, john, caplog
):
    """Token hash and expiry are stored, the unit of work is committed"""
    caplog.set_level(logging.DEBUG)
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier)

    result = await use_case.execute(USER_ID)

    assert result.is_ok()
    mock_uow.users.get_by_id.assert_called_once_with(USER_ID, for_update=True)
    mock_uow.users.set_pending_reset.assert_called_once_with(
        USER_ID,
        PendingReset(token_hash="fake-hash", expiry_date=NOW + timedelta(hours=1)),
    )
    mock_uow.commit.assert_called_once()
    assert "Password reset requested for john.doe@example.com" in caplog.text
    assert_token_not_logged(caplog)


@pytest.mark.asyncio
async def test_reset_mail_contains_confirmation_link(mock_uow, mock_token_minter, mock_notifier, john):
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier, mail_subject="Reset it")

    await use_case.execute(USER_ID)

    mock_notifier.send.assert_called_once()
    to_address, subject, body = mock_notifier.send.call_args.args
    assert to_address == USER_ID
    assert subject == "Reset it"
    assert (
        "https://app.example.com/confirm-password-reset?userId=john.doe@example.com&token=fake-token"
        in body
    )
    assert "fake-hash" not in body


@pytest.mark.asyncio
async def test_unknown_user(mock_uow, mock_token_minter, mock_notifier, caplog):
    """Unknown users are rejected without any side effect"""
    caplog.set_level(logging.DEBUG)
    mock_uow.users.get_by_id.return_value = None
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier)

    result = await use_case.execute("jane.smith@example.com")

    assert result.is_err()
    assert result.error == PasswordResetErrors.UNKNOWN_USER
    assert result.error.message == "Unknown user"

    mock_token_minter.generate.assert_not_called()
    mock_uow.users.set_pending_reset.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_notifier.send.assert_not_called()
    assert any(r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.asyncio
async def test_notifier_failure_still_reports_success(
    mock_uow, mock_token_minter, mock_notifier, john, caplog
):
    """The reset is committed before sending, a delivery failure does not undo it"""
    caplog.set_level(logging.DEBUG)
    calls = []
    mock_uow.commit = AsyncMock(side_effect=lambda: calls.append("commit"))

    async def failing_send(*args):
        calls.append("send")
        raise ConnectionError("mail relay unreachable")

    mock_notifier.send.side_effect = failing_send
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier)

    result = await use_case.execute(USER_ID)

    assert result.is_ok()
    assert calls == ["commit", "send"]
    mock_uow.users.set_pending_reset.assert_called_once()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Failed to send password reset email to john.doe@example.com" in errors[0].getMessage()
    assert errors[0].exc_info is not None
    assert errors[0].exc_info[0] is ConnectionError
    assert_token_not_logged(caplog)


@pytest.mark.asyncio
async def test_entropy_failure_is_fatal(mock_uow, mock_token_minter, mock_notifier, john):
    """No pending reset is stored when no token can be generated"""
    mock_token_minter.generate.side_effect = OSError("entropy source unavailable")
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier)

    with pytest.raises(OSError):
        await use_case.execute(USER_ID)

    mock_uow.users.set_pending_reset.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_notifier.send.assert_not_called()


@pytest.mark.asyncio
async def test_configured_validity_window(mock_uow, mock_token_minter, mock_notifier, john):
    use_case = make_use_case(
        mock_uow, mock_token_minter, mock_notifier, validity=timedelta(hours=24)
    )

    await use_case.execute(USER_ID)

    pending_reset = mock_uow.users.set_pending_reset.call_args.args[1]
    assert pending_reset.expiry_date == NOW + timedelta(hours=24)


@pytest.mark.asyncio
async def test_each_request_issues_a_new_pending_reset(mock_uow, mock_token_minter, mock_notifier, john):
    """A second request replaces the first one"""
    mock_token_minter.generate.side_effect = [("token-1", "hash-1"), ("token-2", "hash-2")]
    use_case = make_use_case(mock_uow, mock_token_minter, mock_notifier)

    await use_case.execute(USER_ID)
    await use_case.execute(USER_ID)

    stored = [c.args[1].token_hash for c in mock_uow.users.set_pending_reset.call_args_list]
    assert stored == ["hash-1", "hash-2"]
    assert mock_uow.commit.call_count == 2
    assert "token=token-2" in mock_notifier.send.call_args.args[2]


def test_build_reset_link_strips_trailing_slash():
    link = build_reset_link("http://localhost:3000/", "a.b@example.com", "abc_-123")
    assert link == "http://localhost:3000/confirm-password-reset?userId=a.b@example.com&token=abc_-123"


def test_build_reset_link_escapes_query_characters():
    link = build_reset_link("http://localhost:3000", "a+b@example.com", "x&y")
    assert link == "http://localhost:3000/confirm-password-reset?userId=a%2Bb@example.com&token=x%26y"
