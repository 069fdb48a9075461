"""FastAPI 의존성/파라미터 모듈 — 경로 ID 검증.

FastAPI dependency and parameter module — Path id validation.
Ids outside the INTEGER column range are rejected with 422 before they
reach the database driver.

Usage:
    @router.get("/{asset_id}")
    async def get_asset(asset_id: RecordId, ...):
"""

from typing import Annotated

from fastapi import Path

from app.schemas.common import MAX_RECORD_ID

# 경로 ID — 1 이상, INTEGER 최대값 이하 (Positive id within INTEGER range)
RecordId = Annotated[int, Path(gt=0, le=MAX_RECORD_ID)]
