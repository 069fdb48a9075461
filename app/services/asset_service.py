"""자산 서비스 — 자산 CRUD 및 분류 참조 검증.

Asset Service — Business logic for asset CRUD operations.
Every create/update that sets a category_id first verifies that the
category exists; an unknown category is rejected before anything is written.
"""

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import unit_of_work
from app.models.asset import Asset, Category
from app.repositories.asset_repository import asset_repository
from app.repositories.category_repository import category_repository
from app.schemas.asset import AssetCreate, AssetUpdate
from app.utils.exceptions import InvalidReferenceError, NotFoundError

# 고정 응답 메시지 — Fixed confirmation messages
UPDATED_MESSAGE: str = "Successfully update"
DELETED_MESSAGE: str = "Successfully delete"
INVALID_CATEGORY_MESSAGE: str = "Invalid category id"

# null로 지울 수 있는 필드 — Fields a client may clear with null
NULLABLE_FIELDS: tuple[str, ...] = ("serial_number",)


class AssetService:
    """자산 관련 비즈니스 로직을 처리하는 서비스.

    Service handling asset business logic.
    Validates the category reference before any write.
    """

    async def _verify_category(self, db: AsyncSession, category_id: int) -> Category:
        """분류가 존재하는지 확인합니다.

        Verify that the referenced category exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category_id: 분류 ID (Category id)

        Returns:
            Category: 확인된 분류 (Verified category)

        Raises:
            InvalidReferenceError: 분류가 존재하지 않을 때 (Unknown category)
        """
        category: Category | None = await category_repository.get_by_id(db, category_id)
        if category is None:
            raise InvalidReferenceError(INVALID_CATEGORY_MESSAGE)
        return category

    async def get_all_assets(self, db: AsyncSession) -> Sequence[Asset]:
        """모든 자산을 분류와 함께 조회합니다.

        List every asset with its category loaded.
        """
        return await asset_repository.get_all(db)

    async def get_asset_by_id(self, db: AsyncSession, asset_id: int) -> Asset | None:
        """ID로 자산을 조회합니다. 없으면 None.

        Retrieve an asset by id; absence is returned as None.
        """
        return await asset_repository.get_by_id(db, asset_id)

    async def create_asset(self, db: AsyncSession, data: AssetCreate) -> Asset:
        """새 자산을 생성합니다.

        Create a new asset after verifying its category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 자산 생성 데이터 (Asset creation data)

        Returns:
            Asset: 생성된 자산 (Created asset)

        Raises:
            InvalidReferenceError: 분류가 존재하지 않을 때 (Unknown category)
        """
        # 쓰기 전에 참조 검증 — Validate the reference before any write
        await self._verify_category(db, data.category_id)

        async with unit_of_work(db):
            return await asset_repository.add(db, data.model_dump())

    async def update_asset(
        self,
        db: AsyncSession,
        asset_id: int,
        data: AssetUpdate,
    ) -> str:
        """자산 정보를 수정합니다.

        Update an existing asset. Only fields present in the payload change;
        the id never changes.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            asset_id: 자산 ID (Asset id)
            data: 수정 데이터 (Update data)

        Returns:
            str: "Successfully update"

        Raises:
            NotFoundError: 자산을 찾을 수 없을 때 (Asset not found)
            InvalidReferenceError: 새 분류가 존재하지 않을 때 (Unknown category)
        """
        async with unit_of_work(db):
            existing: Asset | None = await asset_repository.get_by_id(db, asset_id)
            if existing is None:
                raise NotFoundError("Asset not found")

            # null은 nullable 컬럼에만 허용 — Explicit nulls only for nullable columns
            update_data: dict[str, Any] = {
                field: value
                for field, value in data.model_dump(exclude_unset=True).items()
                if value is not None or field in NULLABLE_FIELDS
            }
            # 분류 변경 시 참조 검증 — Verify the category when it changes
            if "category_id" in update_data:
                await self._verify_category(db, update_data["category_id"])

            await asset_repository.update(db, existing, update_data)
        return UPDATED_MESSAGE

    async def delete_asset(self, db: AsyncSession, asset_id: int) -> str:
        """자산을 삭제합니다.

        Delete an asset by its ID.

        Returns:
            str: "Successfully delete"

        Raises:
            NotFoundError: 자산을 찾을 수 없을 때 (Asset not found)
        """
        async with unit_of_work(db):
            existing: Asset | None = await asset_repository.get_by_id(db, asset_id)
            if existing is None:
                raise NotFoundError("Asset not found")

            await asset_repository.remove(db, existing)
        return DELETED_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
asset_service: AssetService = AssetService()
