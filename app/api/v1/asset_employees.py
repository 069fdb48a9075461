"""자산 배정 라우터 — 자산-직원 연결 엔드포인트.

Asset-Employee Router — Endpoints for assigning assets to employees.
Links are addressed by their (asset_id, employee_id) pair.
"""

from typing import Annotated, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import RecordId
from app.database import get_db
from app.models.asset_employee import AssetEmployee
from app.schemas.asset_employee import AssetEmployeeCreate, AssetEmployeeResponse
from app.schemas.common import MessageResponse
from app.services.asset_employee_service import asset_employee_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[AssetEmployeeResponse])
async def list_asset_employees(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Sequence[AssetEmployee]:
    """모든 자산 배정을 조회합니다.

    List every asset-employee link.
    """
    return await asset_employee_service.get_all_asset_employees(db)


@router.get("/employee/{employee_id}", response_model=AssetEmployeeResponse)
async def get_asset_by_employee_id(
    employee_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssetEmployee:
    """직원의 자산 배정을 조회합니다.

    Retrieve the link held by an employee; 404 when the employee holds nothing.
    """
    link: AssetEmployee | None = await asset_employee_service.get_by_employee_id(
        db, employee_id
    )
    if link is None:
        raise NotFoundError("Asset assignment not found")
    return link


@router.get("/employee/{employee_id}/assets", response_model=list[AssetEmployeeResponse])
async def list_assets_of_employee(
    employee_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[AssetEmployee]:
    """직원이 보유한 모든 자산을 조회합니다.

    List every asset held by an employee.
    """
    return await asset_employee_service.list_assets_of_employee(db, employee_id)


@router.get("/asset/{asset_id}", response_model=AssetEmployeeResponse)
async def get_asset_employee_by_asset_id(
    asset_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssetEmployee:
    """자산의 배정을 조회합니다.

    Retrieve the link of an asset; 404 when the asset is unassigned.
    """
    link: AssetEmployee | None = await asset_employee_service.get_by_asset_id(db, asset_id)
    if link is None:
        raise NotFoundError("Asset assignment not found")
    return link


@router.post("/", response_model=AssetEmployeeResponse)
async def create_asset_employee(
    data: AssetEmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AssetEmployee:
    """자산을 직원에게 배정합니다.

    Assign an asset to an employee. 400 "Invalid asset id" or
    "Invalid employee id" for unknown references, 409 for a duplicate pair.
    """
    return await asset_employee_service.create_asset_employee(db, data)


@router.put("/{asset_id}/{employee_id}", response_model=MessageResponse)
async def update_asset_employee(
    asset_id: RecordId,
    employee_id: RecordId,
    data: AssetEmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """자산 배정을 새 쌍으로 교체합니다.

    Replace a link with a new (asset_id, employee_id) pair.
    """
    message: str = await asset_employee_service.update_asset_employee(
        db, asset_id, employee_id, data
    )
    return MessageResponse(message=message)


@router.delete("/{asset_id}/{employee_id}", response_model=MessageResponse)
async def delete_asset_employee(
    asset_id: RecordId,
    employee_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """자산 배정을 해제합니다.

    Remove an asset-employee link.
    """
    message: str = await asset_employee_service.delete_asset_employee(
        db, asset_id, employee_id
    )
    return MessageResponse(message=message)
