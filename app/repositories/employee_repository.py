"""직원 레포지토리 — 직원 CRUD 및 부서 즉시 로딩.

Employee Repository — CRUD queries for employees.
Every read eagerly loads the parent Department.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from app.models.employee import Employee
from app.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """직원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the employees table.
    """

    updatable_fields = ("name", "surname", "tel", "department_id")

    def __init__(self) -> None:
        super().__init__(Employee)

    def _base_query(self) -> Select:
        return select(Employee).options(selectinload(Employee.department))


# 싱글턴 인스턴스 — Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
