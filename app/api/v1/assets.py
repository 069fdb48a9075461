"""자산 라우터 — 자산 CRUD 엔드포인트.

Asset Router — CRUD endpoints for assets.
An unknown category_id is answered with 400 "Invalid category id".
"""

from typing import Annotated, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import RecordId
from app.database import get_db
from app.models.asset import Asset
from app.schemas.asset import AssetCreate, AssetResponse, AssetUpdate
from app.schemas.common import MessageResponse
from app.services.asset_service import asset_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[AssetResponse])
async def list_assets(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Sequence[Asset]:
    """자산 목록을 분류와 함께 조회합니다.

    List all assets with their categories.
    """
    return await asset_service.get_all_assets(db)


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Asset:
    """자산을 조회합니다.

    Retrieve an asset by id; 404 when it does not exist.
    """
    asset: Asset | None = await asset_service.get_asset_by_id(db, asset_id)
    if asset is None:
        raise NotFoundError("Asset not found")
    return asset


@router.post("/", response_model=AssetResponse)
async def create_asset(
    data: AssetCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Asset:
    """새 자산을 생성합니다.

    Create a new asset in an existing category.
    """
    return await asset_service.create_asset(db, data)


@router.put("/{asset_id}", response_model=MessageResponse)
async def update_asset(
    asset_id: RecordId,
    data: AssetUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """자산 정보를 수정합니다.

    Update an existing asset.
    """
    message: str = await asset_service.update_asset(db, asset_id, data)
    return MessageResponse(message=message)


@router.delete("/{asset_id}", response_model=MessageResponse)
async def delete_asset(
    asset_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """자산을 삭제합니다.

    Delete an asset by its ID.
    """
    message: str = await asset_service.delete_asset(db, asset_id)
    return MessageResponse(message=message)
