"""Database Connection and Session Management"""

import re
import ssl

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from typing import Any, AsyncGenerator, Dict

from app.config import settings

# Convert postgresql:// to postgresql+asyncpg:// for async support
database_url = settings.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")

# asyncpg uses ssl=SSLContext or True, not sslmode; strip sslmode from URL (asyncpg#737, SQLAlchemy#6275)
connect_args = {}
if re.search(r"[?&]sslmode=(require|required|verify-full)", database_url, re.I):
    _ssl_ctx = ssl.create_default_context()
    _ssl_ctx.check_hostname = False
    _ssl_ctx.verify_mode = ssl.CERT_NONE
    connect_args["ssl"] = _ssl_ctx
    database_url = re.sub(r"[?&]sslmode=[^&]+", "", database_url, flags=re.I)
    database_url = re.sub(r"\?&", "?", database_url).rstrip("?")
if "?&" in database_url:
    database_url = database_url.replace("?&", "?")

engine_options: Dict[str, Any] = {
    "connect_args": connect_args,
    "echo": settings.DEBUG,
    "future": True,
}
# Pool sizing only applies to server databases; sqlite (local runs, tests) uses its own pool
if not database_url.startswith("sqlite"):
    engine_options.update(
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )

engine = create_async_engine(database_url, **engine_options)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Base class for declarative models
Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.

    Yields:
        AsyncSession: Database session

    Example:
        ```python
        @router.get("/customers")
        async def list_customers(db: AsyncSession = Depends(get_db)):
            ...
        ```
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database tables (for development only)"""
    import app.models  # noqa: F401  register tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections"""
    await engine.dispose()
