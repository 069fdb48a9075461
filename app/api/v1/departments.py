"""부서 라우터 — 부서 CRUD 엔드포인트.

Department Router — CRUD endpoints for departments.
"""

from typing import Annotated, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import RecordId
from app.database import get_db
from app.models.employee import Department
from app.schemas.common import MessageResponse
from app.schemas.employee import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from app.services.department_service import department_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[DepartmentResponse])
async def list_departments(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Sequence[Department]:
    return await department_service.get_all_departments(db)


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Department:
    department: Department | None = await department_service.get_department_by_id(
        db, department_id
    )
    if department is None:
        raise NotFoundError("Department not found")
    return department


@router.post("/", response_model=DepartmentResponse)
async def create_department(
    data: DepartmentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Department:
    return await department_service.create_department(db, data)


@router.put("/{department_id}", response_model=MessageResponse)
async def update_department(
    department_id: RecordId,
    data: DepartmentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    message: str = await department_service.update_department(db, department_id, data)
    return MessageResponse(message=message)


@router.delete("/{department_id}", response_model=MessageResponse)
async def delete_department(
    department_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    message: str = await department_service.delete_department(db, department_id)
    return MessageResponse(message=message)
