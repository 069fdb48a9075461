"""부서 레포지토리 — 부서 CRUD 쿼리.

Department Repository — CRUD queries for departments.
"""

from app.models.employee import Department
from app.repositories.base import BaseRepository


class DepartmentRepository(BaseRepository[Department]):
    """부서 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the departments table.
    """

    updatable_fields = ("name",)

    def __init__(self) -> None:
        super().__init__(Department)


# 싱글턴 인스턴스 — Singleton instance
department_repository: DepartmentRepository = DepartmentRepository()
