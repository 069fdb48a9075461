"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared across API domains.
"""

from pydantic import BaseModel

# INTEGER 컬럼 최대값 — Largest id an INTEGER primary key can hold
MAX_RECORD_ID: int = 2_147_483_647


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations.
    Update and delete operations answer with a fixed confirmation
    message (e.g. "Updated", "Successfully delete", "Asset deleted.").

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)
