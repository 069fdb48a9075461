"""직원 및 부서 관련 Pydantic 요청/응답 스키마 정의.

Employee and Department Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import MAX_RECORD_ID


# === 부서 (Department) 스키마 ===

class DepartmentCreate(BaseModel):
    """부서 생성 요청 스키마 (Department creation request schema)."""

    name: str = Field(..., min_length=1, max_length=255)  # 부서 이름 (Department name)


class DepartmentUpdate(BaseModel):
    """부서 수정 요청 스키마 (Department partial update schema)."""

    name: str | None = Field(None, min_length=1, max_length=255)


class DepartmentResponse(BaseModel):
    """부서 응답 스키마 (Department response schema)."""

    model_config = ConfigDict(from_attributes=True)

    id: int  # 부서 ID (Department identifier)
    name: str  # 부서 이름 (Department name)


# === 직원 (Employee) 스키마 ===

class EmployeeCreate(BaseModel):
    """직원 생성 요청 스키마.

    Employee creation request schema.
    The referenced department must exist; otherwise the service rejects
    the request with "Invalid department id".

    Attributes:
        name: 이름 (First name)
        surname: 성 (Surname)
        tel: 전화번호 (Phone number, optional)
        department_id: 소속 부서 ID (Parent department identifier)
    """

    name: str = Field(..., min_length=1, max_length=255)  # 이름 (First name)
    surname: str = Field(..., min_length=1, max_length=255)  # 성 (Surname)
    tel: str | None = Field(None, max_length=50)  # 전화번호 (Phone number, optional)
    department_id: int = Field(..., gt=0, le=MAX_RECORD_ID)  # 소속 부서 ID (Department identifier)


class EmployeeUpdate(BaseModel):
    """직원 수정 요청 스키마 (부분 업데이트).

    Employee update request schema (partial update).
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    surname: str | None = Field(None, min_length=1, max_length=255)
    tel: str | None = Field(None, max_length=50)
    department_id: int | None = Field(None, gt=0, le=MAX_RECORD_ID)


class EmployeeResponse(BaseModel):
    """직원 응답 스키마 — 부서 포함.

    Employee response schema with the parent department embedded.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int  # 직원 ID (Employee identifier)
    name: str  # 이름 (First name)
    surname: str  # 성 (Surname)
    tel: str | None  # 전화번호 (Phone number, may be null)
    department_id: int  # 부서 ID (Department identifier)
    department: DepartmentResponse | None = None  # 소속 부서 (Parent department, eagerly loaded)
