"""분류 레포지토리 — 분류 CRUD 쿼리.

Category Repository — CRUD queries for asset categories.
"""

from app.models.asset import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """분류 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the categories table.
    """

    # 수정 가능 필드 — Fields copied by update()
    updatable_fields = ("name",)

    def __init__(self) -> None:
        super().__init__(Category)


# 싱글턴 인스턴스 — Singleton instance
category_repository: CategoryRepository = CategoryRepository()
