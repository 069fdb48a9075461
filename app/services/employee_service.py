"""직원 서비스 — 직원 CRUD 및 부서 참조 검증.

Employee Service — Business logic for employee CRUD operations.
An employee can only point at an existing department.
"""

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import unit_of_work
from app.models.employee import Department, Employee
from app.repositories.department_repository import department_repository
from app.repositories.employee_repository import employee_repository
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.utils.exceptions import InvalidReferenceError, NotFoundError

UPDATED_MESSAGE: str = "Updated"
DELETED_MESSAGE: str = "Deleted"
INVALID_DEPARTMENT_MESSAGE: str = "Invalid department id"
NULLABLE_FIELDS: tuple[str, ...] = ("tel",)


class EmployeeService:
    """직원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling employee business logic.
    """

    async def _verify_department(self, db: AsyncSession, department_id: int) -> Department:
        """부서가 존재하는지 확인합니다.

        Verify that the referenced department exists.

        Raises:
            InvalidReferenceError: 부서가 존재하지 않을 때 (Unknown department)
        """
        department: Department | None = await department_repository.get_by_id(
            db, department_id
        )
        if department is None:
            raise InvalidReferenceError(INVALID_DEPARTMENT_MESSAGE)
        return department

    async def get_all_employees(self, db: AsyncSession) -> Sequence[Employee]:
        return await employee_repository.get_all(db)

    async def get_employee_by_id(self, db: AsyncSession, employee_id: int) -> Employee | None:
        return await employee_repository.get_by_id(db, employee_id)

    async def create_employee(self, db: AsyncSession, data: EmployeeCreate) -> Employee:
        """새 직원을 생성합니다.

        Create a new employee after verifying the department.

        Raises:
            InvalidReferenceError: 부서가 존재하지 않을 때 (Unknown department)
        """
        await self._verify_department(db, data.department_id)

        async with unit_of_work(db):
            return await employee_repository.add(db, data.model_dump())

    async def update_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        data: EmployeeUpdate,
    ) -> str:
        """직원 정보를 수정합니다.

        Update an existing employee.

        Returns:
            str: "Updated"

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
            InvalidReferenceError: 새 부서가 존재하지 않을 때 (Unknown department)
        """
        async with unit_of_work(db):
            existing: Employee | None = await employee_repository.get_by_id(db, employee_id)
            if existing is None:
                raise NotFoundError("Employee not found")

            update_data: dict[str, Any] = {
                field: value
                for field, value in data.model_dump(exclude_unset=True).items()
                if value is not None or field in NULLABLE_FIELDS
            }
            if "department_id" in update_data:
                await self._verify_department(db, update_data["department_id"])

            await employee_repository.update(db, existing, update_data)
        return UPDATED_MESSAGE

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> str:
        """직원을 삭제합니다.

        Delete an employee by its ID.

        Returns:
            str: "Deleted"

        Raises:
            NotFoundError: 직원을 찾을 수 없을 때 (Employee not found)
        """
        async with unit_of_work(db):
            existing: Employee | None = await employee_repository.get_by_id(db, employee_id)
            if existing is None:
                raise NotFoundError("Employee not found")

            await employee_repository.remove(db, existing)
        return DELETED_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
employee_service: EmployeeService = EmployeeService()
