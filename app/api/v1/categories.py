"""분류 라우터 — 분류 CRUD 엔드포인트.

Category Router — CRUD endpoints for asset categories.
"""

from typing import Annotated, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import RecordId
from app.database import get_db
from app.models.asset import Category
from app.schemas.asset import CategoryCreate, CategoryResponse, CategoryUpdate
from app.schemas.common import MessageResponse
from app.services.category_service import category_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Sequence[Category]:
    """분류 목록을 조회합니다 (List all categories)."""
    return await category_service.get_all_categories(db)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    """분류를 조회합니다. 없으면 404 (Retrieve a category, 404 when absent)."""
    category: Category | None = await category_service.get_category_by_id(db, category_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


@router.post("/", response_model=CategoryResponse)
async def create_category(
    data: CategoryCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Category:
    """새 분류를 생성합니다 (Create a new category)."""
    return await category_service.create_category(db, data)


@router.put("/{category_id}", response_model=MessageResponse)
async def update_category(
    category_id: RecordId,
    data: CategoryUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """분류 정보를 수정합니다 (Update an existing category)."""
    message: str = await category_service.update_category(db, category_id, data)
    return MessageResponse(message=message)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """분류를 삭제합니다 (Delete a category)."""
    message: str = await category_service.delete_category(db, category_id)
    return MessageResponse(message=message)
