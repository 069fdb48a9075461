"""자산 레포지토리 — 자산 CRUD 및 분류 즉시 로딩.

Asset Repository — CRUD queries for assets.
Every read eagerly loads the parent Category.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from app.models.asset import Asset
from app.repositories.base import BaseRepository


class AssetRepository(BaseRepository[Asset]):
    """자산 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the assets table.
    """

    # 수정 가능 필드 — id는 절대 복사하지 않음 (id is never copied)
    updatable_fields = ("name", "serial_number", "category_id")

    def __init__(self) -> None:
        """AssetRepository를 초기화합니다.

        Initialize the AssetRepository with the Asset model.
        """
        super().__init__(Asset)

    def _base_query(self) -> Select:
        """분류를 함께 로드하는 기본 쿼리 (Base query loading the category)."""
        return select(Asset).options(selectinload(Asset.category))


# 싱글턴 인스턴스 — Singleton instance
asset_repository: AssetRepository = AssetRepository()
