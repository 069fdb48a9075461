"""부서 서비스 — 부서 CRUD 비즈니스 로직.

Department Service — Business logic for department CRUD operations.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import unit_of_work
from app.models.employee import Department
from app.repositories.department_repository import department_repository
from app.schemas.employee import DepartmentCreate, DepartmentUpdate
from app.utils.exceptions import NotFoundError

UPDATED_MESSAGE: str = "Updated"
DELETED_MESSAGE: str = "Deleted"


class DepartmentService:
    """부서 관련 비즈니스 로직을 처리하는 서비스.

    Service handling department business logic.
    """

    async def get_all_departments(self, db: AsyncSession) -> Sequence[Department]:
        return await department_repository.get_all(db)

    async def get_department_by_id(
        self,
        db: AsyncSession,
        department_id: int,
    ) -> Department | None:
        return await department_repository.get_by_id(db, department_id)

    async def create_department(
        self,
        db: AsyncSession,
        data: DepartmentCreate,
    ) -> Department:
        """새 부서를 생성합니다 (Create a new department)."""
        async with unit_of_work(db):
            return await department_repository.add(db, data.model_dump())

    async def update_department(
        self,
        db: AsyncSession,
        department_id: int,
        data: DepartmentUpdate,
    ) -> str:
        """부서 정보를 수정합니다.

        Update an existing department.

        Raises:
            NotFoundError: 부서를 찾을 수 없을 때 (Department not found)
        """
        async with unit_of_work(db):
            existing: Department | None = await department_repository.get_by_id(
                db, department_id
            )
            if existing is None:
                raise NotFoundError("Department not found")

            await department_repository.update(
                db, existing, data.model_dump(exclude_unset=True, exclude_none=True)
            )
        return UPDATED_MESSAGE

    async def delete_department(self, db: AsyncSession, department_id: int) -> str:
        """부서를 삭제합니다.

        Delete a department by its ID. A department still referenced by
        employees is rejected by the store (foreign key RESTRICT).

        Raises:
            NotFoundError: 부서를 찾을 수 없을 때 (Department not found)
        """
        async with unit_of_work(db):
            existing: Department | None = await department_repository.get_by_id(
                db, department_id
            )
            if existing is None:
                raise NotFoundError("Department not found")

            await department_repository.remove(db, existing)
        return DELETED_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
department_service: DepartmentService = DepartmentService()
