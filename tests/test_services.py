"""서비스 계층 통합 테스트.

Service layer tests against a real database — reference verification,
transaction outcome (commit on success, nothing persisted on failure),
not-found handling and asset-employee pair semantics.

Note: a failed service call rolls back the shared session, which expires
every loaded fixture object; ids are read into locals up front.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base
from app.repositories.asset_employee_repository import asset_employee_repository
from app.repositories.asset_repository import asset_repository
from app.repositories.category_repository import category_repository
from app.repositories.employee_repository import employee_repository
from app.schemas.asset import AssetCreate, AssetUpdate, CategoryCreate, CategoryUpdate
from app.schemas.asset_employee import AssetEmployeeCreate
from app.schemas.employee import DepartmentCreate, DepartmentUpdate, EmployeeCreate, EmployeeUpdate
from app.services.asset_employee_service import asset_employee_service
from app.services.asset_service import asset_service
from app.services.category_service import category_service
from app.services.department_service import department_service
from app.services.employee_service import employee_service
from app.utils.exceptions import DuplicateError, InvalidReferenceError, NotFoundError


# ---------------------------------------------------------------------------
# 1. 분류 / 부서
# ---------------------------------------------------------------------------

class TestCategoryService:
    """분류 서비스 테스트."""

    async def test_create_and_get(self, db: AsyncSession):
        """생성 후 조회."""
        created = await category_service.create_category(db, CategoryCreate(name="Monitors"))
        fetched = await category_service.get_category_by_id(db, created.id)
        assert fetched is not None
        assert fetched.name == "Monitors"

    async def test_update_message(self, db: AsyncSession, categories):
        """수정 성공 시 'Updated'."""
        category_id = categories[0].id
        message = await category_service.update_category(
            db, category_id, CategoryUpdate(name="Renamed")
        )
        assert message == "Updated"
        assert (await category_service.get_category_by_id(db, category_id)).name == "Renamed"

    async def test_update_missing(self, db: AsyncSession, categories):
        """존재하지 않는 분류 수정 → 404."""
        with pytest.raises(NotFoundError):
            await category_service.update_category(db, 99, CategoryUpdate(name="X"))

    async def test_delete_message(self, db: AsyncSession, categories):
        """삭제 성공 시 'Deleted'."""
        category_id = categories[1].id
        assert await category_service.delete_category(db, category_id) == "Deleted"
        assert await category_service.get_category_by_id(db, category_id) is None

    async def test_delete_missing(self, db: AsyncSession):
        """존재하지 않는 분류 삭제 → 404."""
        with pytest.raises(NotFoundError):
            await category_service.delete_category(db, 99)

    async def test_delete_referenced_category_rejected(self, db: AsyncSession, assets):
        """자산이 참조하는 분류 삭제는 무결성 오류, 데이터 유지."""
        category_id = assets[0].category_id
        with pytest.raises(IntegrityError):
            await category_service.delete_category(db, category_id)

        assert await category_repository.get_by_id(db, category_id) is not None
        assert await asset_repository.count(db) == 3


class TestDepartmentService:
    """부서 서비스 테스트."""

    async def test_create_update_delete(self, db: AsyncSession):
        """생성, 수정, 삭제."""
        created = await department_service.create_department(db, DepartmentCreate(name="Ops"))
        department_id = created.id
        assert await department_service.update_department(
            db, department_id, DepartmentUpdate(name="Operations")
        ) == "Updated"
        assert (await department_service.get_department_by_id(db, department_id)).name == "Operations"
        assert await department_service.delete_department(db, department_id) == "Deleted"
        assert await department_service.get_department_by_id(db, department_id) is None

    async def test_delete_missing(self, db: AsyncSession):
        """존재하지 않는 부서 삭제 → 404."""
        with pytest.raises(NotFoundError):
            await department_service.delete_department(db, 99)


# ---------------------------------------------------------------------------
# 2. 자산
# ---------------------------------------------------------------------------

class TestAssetService:
    """자산 서비스 테스트."""

    async def test_create_valid(self, db: AsyncSession, categories):
        """유효한 분류로 생성."""
        category_id = categories[0].id
        created = await asset_service.create_asset(
            db, AssetCreate(name="Test Asset", serial_number="test serial", category_id=category_id)
        )
        assert created.id is not None
        assert created.category.id == category_id
        assert await asset_repository.count(db) == 1

    async def test_create_invalid_category(self, db: AsyncSession, assets):
        """존재하지 않는 분류 → 'Invalid category id', 자산 수 불변."""
        with pytest.raises(InvalidReferenceError) as exc_info:
            await asset_service.create_asset(db, AssetCreate(name="Bad", category_id=99))
        assert exc_info.value.detail == "Invalid category id"
        assert await asset_repository.count(db) == 3

    async def test_update_changes_only_sent_fields(self, db: AsyncSession, assets, categories):
        """보낸 필드만 변경."""
        asset_id = assets[0].id
        new_category_id = categories[1].id
        message = await asset_service.update_asset(
            db, asset_id, AssetUpdate(name="Updated Asset", category_id=new_category_id)
        )
        assert message == "Successfully update"

        asset = await asset_service.get_asset_by_id(db, asset_id)
        assert asset.name == "Updated Asset"
        assert asset.category_id == new_category_id
        assert asset.serial_number == "76"

    async def test_update_clears_serial_number(self, db: AsyncSession, assets):
        """시리얼 번호는 null로 지울 수 있음."""
        asset_id = assets[1].id
        await asset_service.update_asset(db, asset_id, AssetUpdate(serial_number=None))
        assert (await asset_service.get_asset_by_id(db, asset_id)).serial_number is None

    async def test_update_invalid_category_keeps_record(self, db: AsyncSession, assets):
        """잘못된 분류로 수정 시 400, 기존 값 유지."""
        asset_id = assets[0].id
        with pytest.raises(InvalidReferenceError):
            await asset_service.update_asset(
                db, asset_id, AssetUpdate(name="Changed", category_id=99)
            )
        asset = await asset_service.get_asset_by_id(db, asset_id)
        assert asset.name == "Asset 1"

    async def test_update_missing(self, db: AsyncSession, assets):
        """존재하지 않는 자산 수정 → 404."""
        with pytest.raises(NotFoundError):
            await asset_service.update_asset(db, 99, AssetUpdate(name="Nope"))

    async def test_delete(self, db: AsyncSession, assets):
        """삭제 성공 시 'Successfully delete'."""
        asset_id = assets[2].id
        assert await asset_service.delete_asset(db, asset_id) == "Successfully delete"
        assert await asset_service.get_asset_by_id(db, asset_id) is None
        assert await asset_repository.count(db) == 2

    async def test_delete_assigned_asset_rejected(self, db: AsyncSession, asset_employees):
        """배정된 자산 삭제는 무결성 오류."""
        asset_id = asset_employees[0].asset_id
        with pytest.raises(IntegrityError):
            await asset_service.delete_asset(db, asset_id)
        assert await asset_repository.get_by_id(db, asset_id) is not None


# ---------------------------------------------------------------------------
# 3. 직원
# ---------------------------------------------------------------------------

class TestEmployeeService:
    """직원 서비스 테스트."""

    async def test_create_valid(self, db: AsyncSession, departments):
        """유효한 부서로 생성."""
        department_id = departments[0].id
        created = await employee_service.create_employee(
            db,
            EmployeeCreate(name="Test", surname="Employee", tel="1111", department_id=department_id),
        )
        assert created.department.id == department_id

    async def test_create_invalid_department(self, db: AsyncSession, employees):
        """존재하지 않는 부서 → 'Invalid department id', 직원 수 불변."""
        with pytest.raises(InvalidReferenceError) as exc_info:
            await employee_service.create_employee(
                db, EmployeeCreate(name="A", surname="B", department_id=99)
            )
        assert exc_info.value.detail == "Invalid department id"
        assert await employee_repository.count(db) == 3

    async def test_update(self, db: AsyncSession, employees, departments):
        """수정 성공 시 'Updated'."""
        employee_id = employees[0].id
        department_id = departments[1].id
        message = await employee_service.update_employee(
            db,
            employee_id,
            EmployeeUpdate(name="Updated", tel="76538", department_id=department_id),
        )
        assert message == "Updated"
        employee = await employee_service.get_employee_by_id(db, employee_id)
        assert (employee.name, employee.surname, employee.tel) == ("Updated", "Doe", "76538")
        assert employee.department.name == "Department 2"

    async def test_update_invalid_department_keeps_record(self, db: AsyncSession, employees):
        """잘못된 부서로 수정 시 400, 기존 값 유지."""
        employee_id = employees[0].id
        department_id = employees[0].department_id
        with pytest.raises(InvalidReferenceError) as exc_info:
            await employee_service.update_employee(
                db, employee_id, EmployeeUpdate(name="Changed", department_id=99)
            )
        assert exc_info.value.detail == "Invalid department id"

        employee = await employee_service.get_employee_by_id(db, employee_id)
        assert employee.name == "John"
        assert employee.department_id == department_id

    async def test_update_missing(self, db: AsyncSession, employees):
        """존재하지 않는 직원 수정 → 404."""
        with pytest.raises(NotFoundError):
            await employee_service.update_employee(db, 99, EmployeeUpdate(name="X"))

    async def test_delete(self, db: AsyncSession, employees):
        """삭제 성공 시 'Deleted'."""
        employee_id = employees[2].id
        assert await employee_service.delete_employee(db, employee_id) == "Deleted"
        assert await employee_service.get_employee_by_id(db, employee_id) is None


# ---------------------------------------------------------------------------
# 4. 자산 배정
# ---------------------------------------------------------------------------

class TestAssetEmployeeService:
    """자산 배정 서비스 테스트."""

    async def test_create(self, db: AsyncSession, assets, employees):
        """유효한 쌍 배정."""
        asset_id, employee_id = assets[1].id, employees[2].id
        link = await asset_employee_service.create_asset_employee(
            db, AssetEmployeeCreate(asset_id=asset_id, employee_id=employee_id)
        )
        assert (link.asset_id, link.employee_id) == (asset_id, employee_id)
        assert link.asset.name == "Asset 2"
        assert link.employee.surname == "Mustermann"

    async def test_create_invalid_asset(self, db: AsyncSession, asset_employees, employees):
        """존재하지 않는 자산 → 'Invalid asset id', 배정 추가 없음."""
        employee_id = employees[0].id
        with pytest.raises(InvalidReferenceError) as exc_info:
            await asset_employee_service.create_asset_employee(
                db, AssetEmployeeCreate(asset_id=99, employee_id=employee_id)
            )
        assert exc_info.value.detail == "Invalid asset id"
        assert await asset_employee_repository.count(db) == 2

    async def test_create_invalid_employee(self, db: AsyncSession, asset_employees, assets):
        """존재하지 않는 직원 → 'Invalid employee id'."""
        asset_id = assets[0].id
        with pytest.raises(InvalidReferenceError) as exc_info:
            await asset_employee_service.create_asset_employee(
                db, AssetEmployeeCreate(asset_id=asset_id, employee_id=99)
            )
        assert exc_info.value.detail == "Invalid employee id"
        assert await asset_employee_repository.count(db) == 2

    async def test_both_invalid_reports_asset(self, db: AsyncSession, asset_employees):
        """둘 다 없으면 자산 오류가 먼저."""
        with pytest.raises(InvalidReferenceError) as exc_info:
            await asset_employee_service.create_asset_employee(
                db, AssetEmployeeCreate(asset_id=98, employee_id=99)
            )
        assert exc_info.value.detail == "Invalid asset id"

    async def test_create_duplicate(self, db: AsyncSession, asset_employees):
        """이미 있는 쌍 → 409."""
        pair = AssetEmployeeCreate(
            asset_id=asset_employees[0].asset_id, employee_id=asset_employees[0].employee_id
        )
        with pytest.raises(DuplicateError) as exc_info:
            await asset_employee_service.create_asset_employee(db, pair)
        assert exc_info.value.status_code == 409
        assert await asset_employee_repository.count(db) == 2

    async def test_update_replaces_pair(self, db: AsyncSession, asset_employees, assets):
        """쌍 교체 시 'Asset updated.', 기존 쌍 제거."""
        old_asset_id = asset_employees[0].asset_id
        employee_id = asset_employees[0].employee_id
        new_asset_id = assets[1].id

        message = await asset_employee_service.update_asset_employee(
            db,
            old_asset_id,
            employee_id,
            AssetEmployeeCreate(asset_id=new_asset_id, employee_id=employee_id),
        )
        assert message == "Asset updated."
        assert await asset_employee_service.get_by_pair(db, old_asset_id, employee_id) is None
        assert await asset_employee_service.get_by_pair(db, new_asset_id, employee_id) is not None
        assert await asset_employee_repository.count(db) == 2

    async def test_update_same_pair_is_noop(self, db: AsyncSession, asset_employees):
        """같은 쌍으로 교체는 성공, 변화 없음."""
        asset_id = asset_employees[0].asset_id
        employee_id = asset_employees[0].employee_id
        message = await asset_employee_service.update_asset_employee(
            db, asset_id, employee_id,
            AssetEmployeeCreate(asset_id=asset_id, employee_id=employee_id),
        )
        assert message == "Asset updated."
        assert await asset_employee_service.get_by_pair(db, asset_id, employee_id) is not None

    async def test_update_missing_pair(self, db: AsyncSession, asset_employees, assets, employees):
        """없는 쌍 수정 → 404."""
        asset_id, employee_id = assets[2].id, employees[2].id
        with pytest.raises(NotFoundError):
            await asset_employee_service.update_asset_employee(
                db, asset_id, employee_id,
                AssetEmployeeCreate(asset_id=asset_id, employee_id=employee_id),
            )

    async def test_update_to_existing_pair(self, db: AsyncSession, asset_employees):
        """다른 기존 쌍으로 교체 → 409, 기존 배정 유지."""
        first, second = asset_employees
        first_pair = (first.asset_id, first.employee_id)
        second_pair = (second.asset_id, second.employee_id)
        with pytest.raises(DuplicateError):
            await asset_employee_service.update_asset_employee(
                db, *first_pair,
                AssetEmployeeCreate(asset_id=second_pair[0], employee_id=second_pair[1]),
            )
        assert await asset_employee_service.get_by_pair(db, *first_pair) is not None
        assert await asset_employee_repository.count(db) == 2

    async def test_update_invalid_employee_keeps_pair(self, db: AsyncSession, asset_employees):
        """새 직원이 없으면 400, 기존 쌍 유지."""
        asset_id = asset_employees[0].asset_id
        employee_id = asset_employees[0].employee_id
        with pytest.raises(InvalidReferenceError):
            await asset_employee_service.update_asset_employee(
                db, asset_id, employee_id,
                AssetEmployeeCreate(asset_id=asset_id, employee_id=99),
            )
        assert await asset_employee_service.get_by_pair(db, asset_id, employee_id) is not None

    async def test_delete(self, db: AsyncSession, asset_employees):
        """해제 성공 시 'Asset deleted.'."""
        asset_id = asset_employees[1].asset_id
        employee_id = asset_employees[1].employee_id
        message = await asset_employee_service.delete_asset_employee(db, asset_id, employee_id)
        assert message == "Asset deleted."
        assert await asset_employee_service.get_by_pair(db, asset_id, employee_id) is None

    async def test_delete_missing(self, db: AsyncSession, asset_employees):
        """없는 쌍 해제 → 404."""
        with pytest.raises(NotFoundError):
            await asset_employee_service.delete_asset_employee(db, 99, 99)

    async def test_lookup_by_employee_and_asset(self, db: AsyncSession, asset_employees, employees):
        """직원/자산 기준 조회."""
        employee_id = employees[1].id
        asset_id = asset_employees[0].asset_id
        by_employee = await asset_employee_service.get_by_employee_id(db, employee_id)
        assert by_employee.employee_id == employee_id
        by_asset = await asset_employee_service.get_by_asset_id(db, asset_id)
        assert by_asset.asset_id == asset_id
        assert await asset_employee_service.get_by_employee_id(db, 99) is None
        assert await asset_employee_service.list_assets_of_employee(db, 99) == []


# ---------------------------------------------------------------------------
# 5. 동시 수정: 마지막 커밋이 우선
# ---------------------------------------------------------------------------

class TestConcurrentUpdates:
    """두 세션이 같은 자산을 수정하는 경우."""

    async def test_last_writer_wins(self, tmp_path):
        """먼저 읽고 나중에 커밋한 세션의 값이 남음."""
        eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}")
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(eng, class_=AsyncSession, expire_on_commit=False)

        try:
            async with factory() as setup:
                category = await category_repository.add(setup, {"name": "Laptops"})
                asset = await asset_repository.add(
                    setup, {"name": "Original", "category_id": category.id}
                )
                asset_id = asset.id
                await setup.commit()

            async with factory() as first, factory() as second:
                first_copy = await asset_repository.get_by_id(first, asset_id)
                second_copy = await asset_repository.get_by_id(second, asset_id)

                await asset_repository.update(first, first_copy, {"name": "First"})
                await first.commit()
                await asset_repository.update(second, second_copy, {"name": "Second"})
                await second.commit()

            async with factory() as check:
                assert (await asset_repository.get_by_id(check, asset_id)).name == "Second"
        finally:
            await eng.dispose()
