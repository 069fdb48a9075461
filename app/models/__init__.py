"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    asset: 자산 분류 및 자산 (Category and Asset)
    employee: 부서 및 직원 (Department and Employee)
    asset_employee: 자산-직원 연결 (Asset-Employee link, composite key)
"""

from app.models.asset import Category, Asset
from app.models.employee import Department, Employee
from app.models.asset_employee import AssetEmployee

__all__ = [
    "Category", "Asset",
    "Department", "Employee",
    "AssetEmployee",
]
