"""자산-직원 연결 Pydantic 요청/응답 스키마 정의.

Asset-Employee link Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.asset import AssetResponse
from app.schemas.common import MAX_RECORD_ID
from app.schemas.employee import EmployeeResponse


class AssetEmployeeCreate(BaseModel):
    """자산 배정 요청 스키마.

    Asset-Employee link request schema, used for both creation and
    replacement of a link. Both ids must reference existing rows.

    Attributes:
        asset_id: 자산 ID (Asset identifier)
        employee_id: 직원 ID (Employee identifier)
    """

    asset_id: int = Field(..., gt=0, le=MAX_RECORD_ID)  # 자산 ID (Asset identifier)
    employee_id: int = Field(..., gt=0, le=MAX_RECORD_ID)  # 직원 ID (Employee identifier)


class AssetEmployeeResponse(BaseModel):
    """자산 배정 응답 스키마 — 자산/직원 상세 포함.

    Asset-Employee link response schema with the linked asset and
    employee embedded.
    """

    model_config = ConfigDict(from_attributes=True)

    asset_id: int  # 자산 ID (Asset identifier)
    employee_id: int  # 직원 ID (Employee identifier)
    asset: AssetResponse | None = None  # 연결된 자산 (Linked asset)
    employee: EmployeeResponse | None = None  # 연결된 직원 (Linked employee)
