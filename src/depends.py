from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.logging_notifier import LoggingNotifier
from src.adapter.services.smtp_notifier import SmtpNotifier
from src.adapter.services.token_minter import Sha256TokenMinter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notifier import INotifier
from src.app.services.token_minter import ITokenMinter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.password_reset import PasswordResetLifecycle

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_minter() -> ITokenMinter:
    return Sha256TokenMinter()


def get_notifier() -> INotifier:
    if not ApplicationConfig.SMTP_ENABLED:
        return LoggingNotifier()
    return SmtpNotifier(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        mail_from=ApplicationConfig.MAIL_FROM,
        from_name=ApplicationConfig.MAIL_FROM_NAME,
        user=ApplicationConfig.SMTP_USER,
        password=ApplicationConfig.SMTP_PASSWORD,
        starttls=ApplicationConfig.SMTP_STARTTLS,
    )


def get_password_reset_lifecycle(
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_minter: ITokenMinter = Depends(get_token_minter),
    notifier: INotifier = Depends(get_notifier),
) -> PasswordResetLifecycle:
    return PasswordResetLifecycle(
        uow,
        token_minter,
        notifier,
        validity=timedelta(hours=ApplicationConfig.PASSWORD_RESET_TOKEN_VALIDITY_HOURS),
        client_url=ApplicationConfig.CLIENT_APPLICATION_URL,
        mail_subject=ApplicationConfig.PASSWORD_RESET_MAIL_SUBJECT,
    )
