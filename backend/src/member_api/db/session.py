from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from member_api.config import Settings, settings

# Predictable constraint names so Alembic autogenerate stays stable.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all ORM models.

    Alembic reads ``Base.metadata`` to discover tables, so every model
    must inherit from it.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _engine_options(config: Settings) -> dict[str, Any]:
    """Pool and driver options for ``create_async_engine``.

    ``command_timeout`` is an asyncpg connect argument; other drivers
    reject it, so it is only passed for asyncpg URLs.
    """
    options: dict[str, Any] = {
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_timeout": config.db_pool_timeout,
        "pool_recycle": config.db_pool_recycle,
        "pool_pre_ping": config.db_pool_pre_ping,
        "echo": config.db_echo,
    }
    if config.uses_asyncpg:
        options["connect_args"] = {"command_timeout": config.db_statement_timeout}
    return options


engine = create_async_engine(settings.database_url, **_engine_options(settings))

# expire_on_commit=False keeps loaded members readable after commit
# without an implicit (sync) refresh.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides one database session per request.

    Commits on success and rolls back on exception. Repositories only
    flush; this is the single place where transactions end.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Dispose of pooled connections. Called from the app lifespan."""
    await engine.dispose()
