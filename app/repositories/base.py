"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic get-all, get-by-id, add, update and remove operations.
Repositories never validate foreign keys; that belongs to the service layer.

Usage:
    class CategoryRepository(BaseRepository[Category]):
        updatable_fields = ("name",)

        def __init__(self) -> None:
            super().__init__(Category)
"""

from typing import Any, ClassVar, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Every method takes the session explicitly; the repository itself
    holds no connection state.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
        updatable_fields: update()가 복사할 수 있는 필드 화이트리스트
                          (Whitelist of fields update() may copy)
    """

    updatable_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _base_query(self) -> Select:
        """기본 SELECT 쿼리 — 하위 클래스에서 즉시 로딩 옵션을 추가합니다.

        Base SELECT query. Subclasses override this to add eager-load options.
        """
        return select(self.model)

    async def get_all(self, db: AsyncSession) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve every record. An empty table yields an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = self._base_query().order_by(*self.model.__table__.primary_key.columns)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its integer id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = self._base_query().where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def add(
        self,
        db: AsyncSession,
        obj: ModelType | Mapping[str, Any],
    ) -> ModelType:
        """새 레코드를 추가합니다.

        Add a new record. The store assigns the id unless one is given.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj: 모델 인스턴스 또는 필드 딕셔너리
                 (Model instance or dictionary of field values)

        Returns:
            ModelType: 저장된 레코드 — 저장소가 채운 필드 포함
                       (The stored record with store-assigned fields populated)
        """
        db_obj: ModelType = self.model(**obj) if isinstance(obj, Mapping) else obj
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        existing: ModelType,
        incoming: Mapping[str, Any],
    ) -> ModelType:
        """기존 레코드에 허용된 필드만 복사합니다.

        Copy whitelisted fields from ``incoming`` onto ``existing`` in place.
        Only keys present in ``incoming`` and listed in ``updatable_fields``
        are copied; the primary key and relationship objects are never touched.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            existing: 조회된 기존 레코드 (Record previously loaded by id)
            incoming: 변경할 필드와 값 (Fields and values to apply)

        Returns:
            ModelType: 변경된 레코드 (The updated record)
        """
        for field in self.updatable_fields:
            if field in incoming:
                setattr(existing, field, incoming[field])

        await db.flush()
        await db.refresh(existing)
        return existing

    async def remove(self, db: AsyncSession, existing: ModelType) -> None:
        """레코드를 삭제합니다.

        Delete a previously loaded record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            existing: 삭제할 레코드 (Record to delete)
        """
        await db.delete(existing)
        await db.flush()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다.

        Return the total number of rows in the table.
        """
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0
