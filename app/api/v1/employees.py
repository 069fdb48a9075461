"""직원 라우터 — 직원 CRUD 엔드포인트.

Employee Router — CRUD endpoints for employees.
An unknown department_id is answered with 400 "Invalid department id".
"""

from typing import Annotated, Sequence

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import RecordId
from app.database import get_db
from app.models.employee import Employee
from app.schemas.common import MessageResponse
from app.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from app.services.employee_service import employee_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("/", response_model=list[EmployeeResponse])
async def list_employees(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Sequence[Employee]:
    """직원 목록을 부서와 함께 조회합니다 (List employees with departments)."""
    return await employee_service.get_all_employees(db)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Employee:
    """직원을 조회합니다. 없으면 404 (Retrieve an employee, 404 when absent)."""
    employee: Employee | None = await employee_service.get_employee_by_id(db, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


@router.post("/", response_model=EmployeeResponse)
async def create_employee(
    data: EmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Employee:
    """새 직원을 생성합니다 (Create a new employee)."""
    return await employee_service.create_employee(db, data)


@router.put("/{employee_id}", response_model=MessageResponse)
async def update_employee(
    employee_id: RecordId,
    data: EmployeeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """직원 정보를 수정합니다 (Update an existing employee)."""
    message: str = await employee_service.update_employee(db, employee_id, data)
    return MessageResponse(message=message)


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: RecordId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """직원을 삭제합니다 (Delete an employee)."""
    message: str = await employee_service.delete_employee(db, employee_id)
    return MessageResponse(message=message)
