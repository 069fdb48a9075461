"""자산 배정 서비스 — 자산-직원 연결 비즈니스 로직.

Asset-Employee Service — Business logic for assigning assets to employees.
A link is identified by its (asset_id, employee_id) pair:
    - 생성 시 자산, 직원 순서로 존재 여부를 확인하고 중복 쌍을 거부합니다.
      (Create verifies the asset, then the employee, then rejects a duplicate pair.)
    - 수정은 기존 쌍 삭제 + 새 쌍 추가를 하나의 트랜잭션에서 수행합니다.
      (Update removes the old pair and inserts the new one in one transaction.)
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import unit_of_work
from app.models.asset_employee import AssetEmployee
from app.repositories.asset_employee_repository import asset_employee_repository
from app.repositories.asset_repository import asset_repository
from app.repositories.employee_repository import employee_repository
from app.schemas.asset_employee import AssetEmployeeCreate
from app.utils.exceptions import DuplicateError, InvalidReferenceError, NotFoundError

# 고정 응답 메시지 — Fixed confirmation messages
UPDATED_MESSAGE: str = "Asset updated."
DELETED_MESSAGE: str = "Asset deleted."
INVALID_ASSET_MESSAGE: str = "Invalid asset id"
INVALID_EMPLOYEE_MESSAGE: str = "Invalid employee id"
DUPLICATE_MESSAGE: str = "Asset is already assigned to this employee"


class AssetEmployeeService:
    """자산 배정 관련 비즈니스 로직을 처리하는 서비스.

    Service handling asset-employee link business logic.
    """

    async def _verify_references(
        self,
        db: AsyncSession,
        asset_id: int,
        employee_id: int,
    ) -> None:
        """자산과 직원이 모두 존재하는지 확인합니다.

        Verify that both the asset and the employee exist.
        The asset is checked first, so a payload with two unknown ids
        reports the asset.

        Raises:
            InvalidReferenceError: 자산 또는 직원이 존재하지 않을 때
                                   (Unknown asset or employee)
        """
        if await asset_repository.get_by_id(db, asset_id) is None:
            raise InvalidReferenceError(INVALID_ASSET_MESSAGE)
        if await employee_repository.get_by_id(db, employee_id) is None:
            raise InvalidReferenceError(INVALID_EMPLOYEE_MESSAGE)

    async def get_all_asset_employees(self, db: AsyncSession) -> Sequence[AssetEmployee]:
        """모든 자산 배정을 조회합니다 (List every asset-employee link)."""
        return await asset_employee_repository.get_all(db)

    async def get_by_pair(
        self,
        db: AsyncSession,
        asset_id: int,
        employee_id: int,
    ) -> AssetEmployee | None:
        return await asset_employee_repository.get_by_pair(db, asset_id, employee_id)

    async def get_by_employee_id(
        self,
        db: AsyncSession,
        employee_id: int,
    ) -> AssetEmployee | None:
        """직원의 자산 배정을 조회합니다. 없으면 None.

        Retrieve the first link held by an employee, or None.
        """
        return await asset_employee_repository.get_by_employee_id(db, employee_id)

    async def get_by_asset_id(
        self,
        db: AsyncSession,
        asset_id: int,
    ) -> AssetEmployee | None:
        """자산의 배정을 조회합니다. 없으면 None.

        Retrieve the first link of an asset, or None.
        """
        return await asset_employee_repository.get_by_asset_id(db, asset_id)

    async def list_assets_of_employee(
        self,
        db: AsyncSession,
        employee_id: int,
    ) -> list[AssetEmployee]:
        """직원이 보유한 모든 자산 배정을 조회합니다.

        List every link held by an employee (empty when none).
        """
        return await asset_employee_repository.list_by_employee_id(db, employee_id)

    async def create_asset_employee(
        self,
        db: AsyncSession,
        data: AssetEmployeeCreate,
    ) -> AssetEmployee:
        """자산을 직원에게 배정합니다.

        Assign an asset to an employee.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 배정 데이터 (Link data)

        Returns:
            AssetEmployee: 생성된 배정 (Created link)

        Raises:
            InvalidReferenceError: 자산 또는 직원이 존재하지 않을 때
                                   ("Invalid asset id" / "Invalid employee id")
            DuplicateError: 같은 쌍이 이미 존재할 때 (Pair already exists)
        """
        await self._verify_references(db, data.asset_id, data.employee_id)

        # 복합 키 중복 확인 — Reject an existing pair explicitly
        existing: AssetEmployee | None = await asset_employee_repository.get_by_pair(
            db, data.asset_id, data.employee_id
        )
        if existing is not None:
            raise DuplicateError(DUPLICATE_MESSAGE)

        async with unit_of_work(db):
            return await asset_employee_repository.add(db, data.model_dump())

    async def update_asset_employee(
        self,
        db: AsyncSession,
        asset_id: int,
        employee_id: int,
        data: AssetEmployeeCreate,
    ) -> str:
        """자산 배정을 새 쌍으로 교체합니다.

        Replace the (asset_id, employee_id) link with the pair in ``data``.
        Replacing a pair with itself is a successful no-op.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            asset_id: 기존 자산 ID (Current asset id)
            employee_id: 기존 직원 ID (Current employee id)
            data: 새 쌍 (New pair)

        Returns:
            str: "Asset updated."

        Raises:
            NotFoundError: 기존 배정을 찾을 수 없을 때 (Link not found)
            InvalidReferenceError: 새 자산 또는 직원이 존재하지 않을 때
                                   (Unknown asset or employee)
            DuplicateError: 새 쌍이 이미 존재할 때 (New pair already exists)
        """
        async with unit_of_work(db):
            existing: AssetEmployee | None = await asset_employee_repository.get_by_pair(
                db, asset_id, employee_id
            )
            if existing is None:
                raise NotFoundError("Asset assignment not found")

            if (data.asset_id, data.employee_id) == (asset_id, employee_id):
                return UPDATED_MESSAGE

            await self._verify_references(db, data.asset_id, data.employee_id)

            clash: AssetEmployee | None = await asset_employee_repository.get_by_pair(
                db, data.asset_id, data.employee_id
            )
            if clash is not None:
                raise DuplicateError(DUPLICATE_MESSAGE)

            await asset_employee_repository.replace(
                db, existing, data.asset_id, data.employee_id
            )
        return UPDATED_MESSAGE

    async def delete_asset_employee(
        self,
        db: AsyncSession,
        asset_id: int,
        employee_id: int,
    ) -> str:
        """자산 배정을 해제합니다.

        Remove the (asset_id, employee_id) link.

        Returns:
            str: "Asset deleted."

        Raises:
            NotFoundError: 배정을 찾을 수 없을 때 (Link not found)
        """
        async with unit_of_work(db):
            existing: AssetEmployee | None = await asset_employee_repository.get_by_pair(
                db, asset_id, employee_id
            )
            if existing is None:
                raise NotFoundError("Asset assignment not found")

            await asset_employee_repository.remove(db, existing)
        return DELETED_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
asset_employee_service: AssetEmployeeService = AssetEmployeeService()
