"""데이터베이스 엔진, 세션, 작업 단위(Unit of Work) 설정 모듈.

Database engine, session and unit-of-work configuration module.
Sets up the async SQLAlchemy engine, session factory and ORM base class,
and provides the transaction bracket used by every service write.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """DB URL에 맞는 비동기 엔진을 생성합니다.

    Create an async engine for the given URL.
    Pool sizing and asyncpg options only apply to server databases;
    SQLite (used by tests) gets a plain engine.

    Args:
        url: SQLAlchemy 비동기 연결 URL (Async connection URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (The configured engine)
    """
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo)

    kwargs: dict[str, Any] = {
        "echo": echo,
        # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }
    if url.startswith("postgresql+asyncpg"):
        # 트랜잭션 모드 풀러에서 prepared statement 비활성화
        # Disable prepared statement caches for transaction-mode pooling
        kwargs["connect_args"] = {"statement_cache_size": 0}
    return create_async_engine(url, **kwargs)


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    One session per request; it is closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """하나의 서비스 호출을 하나의 트랜잭션으로 묶습니다.

    Bracket one service operation in a single transaction.
    Commits on normal exit. On any exception the session is rolled back
    and the original exception is re-raised untouched.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Yields:
        AsyncSession: 동일한 세션 (The same session)
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
