"""자산-직원 연결 레포지토리 — 복합 키 기반 조회 및 교체.

Asset-Employee Repository — Queries for the asset_employees link table.
Rows are identified by the (asset_id, employee_id) pair. Because the key
itself is what changes on update, update is a delete-then-insert.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.asset_employee import AssetEmployee
from app.repositories.base import BaseRepository


class AssetEmployeeRepository(BaseRepository[AssetEmployee]):
    """자산-직원 연결 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the asset_employees table.
    Loads the linked asset and employee with every read.

    Note:
        ``get_by_id`` is overridden to take the composite key as an
        ``(asset_id, employee_id)`` tuple instead of an int, so the base
        class signature does not apply here. ``get_by_pair`` is the
        public lookup used by the service layer.
    """

    def __init__(self) -> None:
        """AssetEmployeeRepository를 초기화합니다.

        Initialize the AssetEmployeeRepository with the AssetEmployee model.
        """
        super().__init__(AssetEmployee)

    def _base_query(self) -> Select:
        return select(AssetEmployee).options(
            selectinload(AssetEmployee.asset),
            selectinload(AssetEmployee.employee),
        )

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: tuple[int, int],
    ) -> AssetEmployee | None:
        """복합 키 (asset_id, employee_id)로 조회합니다.

        Retrieve a link by its composite key given as ``(asset_id, employee_id)``.
        """
        asset_id, employee_id = record_id
        return await self.get_by_pair(db, asset_id, employee_id)

    async def get_by_pair(
        self,
        db: AsyncSession,
        asset_id: int,
        employee_id: int,
    ) -> AssetEmployee | None:
        """자산 ID와 직원 ID 쌍으로 연결을 조회합니다.

        Retrieve the link identified by the (asset_id, employee_id) pair.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            asset_id: 자산 ID (Asset id)
            employee_id: 직원 ID (Employee id)

        Returns:
            AssetEmployee | None: 연결 또는 None (Link or None)
        """
        query: Select = self._base_query().where(
            AssetEmployee.asset_id == asset_id,
            AssetEmployee.employee_id == employee_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_employee_id(
        self,
        db: AsyncSession,
        employee_id: int,
    ) -> AssetEmployee | None:
        """직원의 첫 번째 자산 연결을 조회합니다.

        Retrieve the first link (lowest asset_id) held by an employee.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            employee_id: 직원 ID (Employee id)

        Returns:
            AssetEmployee | None: 연결 또는 None (Link or None)
        """
        query: Select = (
            self._base_query()
            .where(AssetEmployee.employee_id == employee_id)
            .order_by(AssetEmployee.asset_id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def get_by_asset_id(
        self,
        db: AsyncSession,
        asset_id: int,
    ) -> AssetEmployee | None:
        """자산의 첫 번째 직원 연결을 조회합니다.

        Retrieve the first link (lowest employee_id) for an asset.
        """
        query: Select = (
            self._base_query()
            .where(AssetEmployee.asset_id == asset_id)
            .order_by(AssetEmployee.employee_id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def list_by_employee_id(
        self,
        db: AsyncSession,
        employee_id: int,
    ) -> list[AssetEmployee]:
        """직원이 보유한 모든 자산 연결을 조회합니다.

        Retrieve every link held by an employee, ordered by asset_id.
        """
        query: Select = (
            self._base_query()
            .where(AssetEmployee.employee_id == employee_id)
            .order_by(AssetEmployee.asset_id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def replace(
        self,
        db: AsyncSession,
        existing: AssetEmployee,
        asset_id: int,
        employee_id: int,
    ) -> AssetEmployee:
        """기존 연결을 삭제하고 새 쌍으로 다시 추가합니다.

        Replace a link with a new (asset_id, employee_id) pair.
        The old row is deleted and flushed before the new row is inserted;
        both statements run in the caller's transaction.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            existing: 교체할 기존 연결 (Link being replaced)
            asset_id: 새 자산 ID (New asset id)
            employee_id: 새 직원 ID (New employee id)

        Returns:
            AssetEmployee: 새로 추가된 연결 (The newly inserted link)
        """
        await self.remove(db, existing)
        return await self.add(
            db, AssetEmployee(asset_id=asset_id, employee_id=employee_id)
        )


# 싱글턴 인스턴스 — Singleton instance
asset_employee_repository: AssetEmployeeRepository = AssetEmployeeRepository()
