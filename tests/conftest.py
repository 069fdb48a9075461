"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트, 시드 픽스처.

Test infrastructure — Temporary database, session, httpx client and seed fixtures.
Defaults to in-memory SQLite (aiosqlite) with foreign keys enforced;
set TEST_DATABASE_URL to run against PostgreSQL instead.
Schema is created before and dropped after each test.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models import Asset, AssetEmployee, Category, Department, Employee

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def enable_sqlite_foreign_keys(eng: AsyncEngine) -> None:
    """SQLite 연결마다 외래키 제약을 활성화합니다."""

    @event.listens_for(eng.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_test_engine(url: str) -> AsyncEngine:
    """테스트용 async 엔진을 생성합니다."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            # 메모리 DB는 단일 연결을 공유해야 함
            kwargs["poolclass"] = StaticPool
        eng = create_async_engine(url, **kwargs)
        enable_sqlite_foreign_keys(eng)
        return eng
    return create_async_engine(url, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    eng = make_test_engine(TEST_DATABASE_URL)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _persist(db: AsyncSession, *objs) -> None:
    db.add_all(objs)
    await db.commit()
    for obj in objs:
        await db.refresh(obj)


@pytest_asyncio.fixture
async def categories(db: AsyncSession) -> list[Category]:
    """분류 2개: Category 1, Category 2."""
    items = [Category(name="Category 1"), Category(name="Category 2")]
    await _persist(db, *items)
    return items


@pytest_asyncio.fixture
async def assets(db: AsyncSession, categories) -> list[Asset]:
    """자산 3개: 1→분류1, 2→분류2, 3→분류1."""
    cat1, cat2 = categories
    items = [
        Asset(name="Asset 1", serial_number="76", category_id=cat1.id),
        Asset(name="Asset 2", serial_number="9", category_id=cat2.id),
        Asset(name="Asset 3", serial_number="3", category_id=cat1.id),
    ]
    await _persist(db, *items)
    return items


@pytest_asyncio.fixture
async def departments(db: AsyncSession) -> list[Department]:
    """부서 2개."""
    items = [Department(name="Department 1"), Department(name="Department 2")]
    await _persist(db, *items)
    return items


@pytest_asyncio.fixture
async def employees(db: AsyncSession, departments) -> list[Employee]:
    """직원 3명: 부서1 2명, 부서2 1명."""
    dep1, dep2 = departments
    items = [
        Employee(name="John", surname="Doe", tel="12345", department_id=dep1.id),
        Employee(name="Jane", surname="Roe", tel="23456", department_id=dep1.id),
        Employee(name="Max", surname="Mustermann", tel="34567", department_id=dep2.id),
    ]
    await _persist(db, *items)
    return items


@pytest_asyncio.fixture
async def asset_employees(db: AsyncSession, assets, employees) -> list[AssetEmployee]:
    """배정 2개: (자산1, 직원1), (자산1, 직원2)."""
    items = [
        AssetEmployee(asset_id=assets[0].id, employee_id=employees[0].id),
        AssetEmployee(asset_id=assets[0].id, employee_id=employees[1].id),
    ]
    await _persist(db, *items)
    return items
