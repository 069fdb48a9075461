"""v1 API 라우터 패키지 — 모든 엔드포인트 통합.

v1 API Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - categories: 자산 분류 관리 (Category management)
    - departments: 부서 관리 (Department management)
    - assets: 자산 관리 (Asset management)
    - employees: 직원 관리 (Employee management)
    - asset_employees: 자산 배정 관리 (Asset-employee assignments)
"""

from fastapi import APIRouter

from app.api.v1.categories import router as categories_router
from app.api.v1.departments import router as departments_router
from app.api.v1.assets import router as assets_router
from app.api.v1.employees import router as employees_router
from app.api.v1.asset_employees import router as asset_employees_router

# v1 통합 라우터 — Aggregated v1 router
api_router: APIRouter = APIRouter()

api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(departments_router, prefix="/departments", tags=["Departments"])
api_router.include_router(assets_router, prefix="/assets", tags=["Assets"])
api_router.include_router(employees_router, prefix="/employees", tags=["Employees"])
api_router.include_router(asset_employees_router, prefix="/asset-employees", tags=["Asset Employees"])
