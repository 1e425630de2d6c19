import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the users repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.set_pending_reset = AsyncMock()
    uow.users.clear_pending_reset = AsyncMock()
    uow.users.commit_password = AsyncMock()

    return uow


@pytest.fixture
def mock_token_minter():
    """Token minter issuing "fake-token" / "fake-hash" """
    minter = MagicMock()
    minter.generate.return_value = ("fake-token", "fake-hash")
    minter.hash.side_effect = lambda token: "fake-hash" if token == "fake-token" else "some-other-hash"
    return minter


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.send = AsyncMock()
    return notifier
