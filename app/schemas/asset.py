"""자산 및 분류 관련 Pydantic 요청/응답 스키마 정의.

Asset and Category Pydantic request/response schema definitions.
Update schemas are partial: only fields sent by the client are applied
(``model_dump(exclude_unset=True)``).
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import MAX_RECORD_ID


# === 분류 (Category) 스키마 ===

class CategoryCreate(BaseModel):
    """분류 생성 요청 스키마.

    Category creation request schema.

    Attributes:
        name: 분류 이름 (Category name)
    """

    name: str = Field(..., min_length=1, max_length=255)  # 분류 이름 (Category name)


class CategoryUpdate(BaseModel):
    """분류 수정 요청 스키마 (부분 업데이트).

    Category update request schema (partial update).
    """

    name: str | None = Field(None, min_length=1, max_length=255)  # 변경할 이름 (New name, optional)


class CategoryResponse(BaseModel):
    """분류 응답 스키마.

    Category response schema.

    Attributes:
        id: 분류 ID (Category identifier)
        name: 분류 이름 (Category name)
    """

    model_config = ConfigDict(from_attributes=True)

    id: int  # 분류 ID (Category identifier)
    name: str  # 분류 이름 (Category name)


# === 자산 (Asset) 스키마 ===

class AssetCreate(BaseModel):
    """자산 생성 요청 스키마.

    Asset creation request schema.
    The referenced category must exist; otherwise the service rejects
    the request with "Invalid category id".

    Attributes:
        name: 자산 이름 (Asset name)
        serial_number: 시리얼 번호 (Serial number, optional)
        category_id: 소속 분류 ID (Parent category identifier)
    """

    name: str = Field(..., min_length=1, max_length=255)  # 자산 이름 (Asset name)
    serial_number: str | None = Field(None, max_length=100)  # 시리얼 번호 (Serial number, optional)
    category_id: int = Field(..., gt=0, le=MAX_RECORD_ID)  # 소속 분류 ID (Category identifier)


class AssetUpdate(BaseModel):
    """자산 수정 요청 스키마 (부분 업데이트).

    Asset update request schema (partial update).

    Attributes:
        name: 자산 이름 (New name, optional)
        serial_number: 시리얼 번호 (New serial number, optional)
        category_id: 소속 분류 ID (New category identifier, optional)
    """

    name: str | None = Field(None, min_length=1, max_length=255)  # 변경할 이름 (New name, optional)
    serial_number: str | None = Field(None, max_length=100)  # 변경할 시리얼 번호 (New serial, optional)
    category_id: int | None = Field(None, gt=0, le=MAX_RECORD_ID)  # 변경할 분류 ID (New category, optional)


class AssetResponse(BaseModel):
    """자산 응답 스키마 — 분류 포함.

    Asset response schema with the parent category embedded.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int  # 자산 ID (Asset identifier)
    name: str  # 자산 이름 (Asset name)
    serial_number: str | None  # 시리얼 번호 (Serial number, may be null)
    category_id: int  # 분류 ID (Category identifier)
    category: CategoryResponse | None = None  # 소속 분류 (Parent category, eagerly loaded)
