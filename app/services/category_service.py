"""분류 서비스 — 분류 CRUD 비즈니스 로직.

Category Service — Business logic for category CRUD operations.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import unit_of_work
from app.models.asset import Category
from app.repositories.category_repository import category_repository
from app.schemas.asset import CategoryCreate, CategoryUpdate
from app.utils.exceptions import NotFoundError

# 고정 응답 메시지 — Fixed confirmation messages
UPDATED_MESSAGE: str = "Updated"
DELETED_MESSAGE: str = "Deleted"


class CategoryService:
    """분류 관련 비즈니스 로직을 처리하는 서비스.

    Service handling category business logic.
    """

    async def get_all_categories(self, db: AsyncSession) -> Sequence[Category]:
        """모든 분류를 조회합니다 (List every category)."""
        return await category_repository.get_all(db)

    async def get_category_by_id(
        self,
        db: AsyncSession,
        category_id: int,
    ) -> Category | None:
        """ID로 분류를 조회합니다. 없으면 None (Category by id, or None)."""
        return await category_repository.get_by_id(db, category_id)

    async def create_category(
        self,
        db: AsyncSession,
        data: CategoryCreate,
    ) -> Category:
        """새 분류를 생성합니다.

        Create a new category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 분류 생성 데이터 (Category creation data)

        Returns:
            Category: 생성된 분류 (Created category)
        """
        async with unit_of_work(db):
            return await category_repository.add(db, data.model_dump())

    async def update_category(
        self,
        db: AsyncSession,
        category_id: int,
        data: CategoryUpdate,
    ) -> str:
        """분류 정보를 수정합니다.

        Update an existing category.

        Returns:
            str: "Updated"

        Raises:
            NotFoundError: 분류를 찾을 수 없을 때 (Category not found)
        """
        async with unit_of_work(db):
            existing: Category | None = await category_repository.get_by_id(db, category_id)
            if existing is None:
                raise NotFoundError("Category not found")

            await category_repository.update(
                db, existing, data.model_dump(exclude_unset=True, exclude_none=True)
            )
        return UPDATED_MESSAGE

    async def delete_category(self, db: AsyncSession, category_id: int) -> str:
        """분류를 삭제합니다.

        Delete a category by its ID.

        Returns:
            str: "Deleted"

        Raises:
            NotFoundError: 분류를 찾을 수 없을 때 (Category not found)
        """
        async with unit_of_work(db):
            existing: Category | None = await category_repository.get_by_id(db, category_id)
            if existing is None:
                raise NotFoundError("Category not found")

            await category_repository.remove(db, existing)
        return DELETED_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
category_service: CategoryService = CategoryService()
