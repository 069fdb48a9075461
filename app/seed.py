"""초기 데이터 시드 스크립트 — 분류, 부서, 자산, 직원, 배정 생성.

Seed script — Creates a small development dataset.
Run this script once to bootstrap an empty database.

Usage:
    python -m app.seed

Creates:
    - 2개 분류: Laptops, Phones (2 categories)
    - 2개 부서: Engineering, Finance (2 departments)
    - 3개 자산, 2명 직원, 2개 배정 (3 assets, 2 employees, 2 assignments)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, async_session, engine, unit_of_work
from app.models import Asset, AssetEmployee, Category, Department, Employee
from app.repositories.asset_employee_repository import asset_employee_repository
from app.repositories.asset_repository import asset_repository
from app.repositories.category_repository import category_repository
from app.repositories.department_repository import department_repository
from app.repositories.employee_repository import employee_repository


async def seed_data(db: AsyncSession) -> bool:
    """빈 데이터베이스에 개발용 데이터를 추가합니다.

    Insert the development dataset into an empty database.

    Idempotent: 분류가 하나라도 있으면 건너뜁니다 (Skips if any category exists).

    Returns:
        bool: 데이터를 추가했으면 True (True when data was inserted)
    """
    if await category_repository.count(db) > 0:
        return False

    async with unit_of_work(db):
        laptops: Category = await category_repository.add(db, Category(name="Laptops"))
        phones: Category = await category_repository.add(db, Category(name="Phones"))

        engineering: Department = await department_repository.add(
            db, Department(name="Engineering")
        )
        finance: Department = await department_repository.add(db, Department(name="Finance"))

        thinkpad: Asset = await asset_repository.add(
            db, Asset(name="ThinkPad X1", serial_number="TP-0001", category_id=laptops.id)
        )
        await asset_repository.add(
            db, Asset(name="MacBook Pro", serial_number="MB-0001", category_id=laptops.id)
        )
        pixel: Asset = await asset_repository.add(
            db, Asset(name="Pixel 8", serial_number="PX-0001", category_id=phones.id)
        )

        alice: Employee = await employee_repository.add(
            db,
            Employee(name="Alice", surname="Kim", tel="010-1234-5678", department_id=engineering.id),
        )
        await employee_repository.add(
            db,
            Employee(name="Brian", surname="Lee", tel="010-8765-4321", department_id=finance.id),
        )

        await asset_employee_repository.add(
            db, AssetEmployee(asset_id=thinkpad.id, employee_id=alice.id)
        )
        await asset_employee_repository.add(
            db, AssetEmployee(asset_id=pixel.id, employee_id=alice.id)
        )
    return True


async def seed() -> None:
    """테이블을 생성하고 개발용 데이터를 시드합니다.

    Create tables if they don't exist, then seed the development dataset.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await seed_data(db):
            print("Seed complete.")
        else:
            print("Already seeded. Skipping.")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
