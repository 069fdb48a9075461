"""create_asset_tables

Revision ID: 3f9c1e7a2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

자산 추적 테이블 생성: categories, departments, assets, employees, asset_employees.
Create asset tracking tables: categories, departments, assets, employees, asset_employees.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1e7a2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # categories — 자산 분류 (Asset categories)
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # departments — 부서 (Departments)
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # assets — 자산 (RESTRICT: 참조 중인 분류는 삭제 불가)
    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('serial_number', sa.String(100), nullable=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False),
    )
    op.create_index('ix_assets_category', 'assets', ['category_id'])

    # employees — 직원 (RESTRICT: 참조 중인 부서는 삭제 불가)
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('surname', sa.String(255), nullable=False),
        sa.Column('tel', sa.String(50), nullable=True),
        sa.Column('department_id', sa.Integer(), sa.ForeignKey('departments.id', ondelete='RESTRICT'), nullable=False),
    )
    op.create_index('ix_employees_department', 'employees', ['department_id'])

    # asset_employees — 자산 배정, 복합 기본키 (Composite primary key, no surrogate id)
    op.create_table(
        'asset_employees',
        sa.Column('asset_id', sa.Integer(), sa.ForeignKey('assets.id', ondelete='RESTRICT'), primary_key=True, autoincrement=False),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id', ondelete='RESTRICT'), primary_key=True, autoincrement=False),
    )
    # 직원별 조회 인덱스 — Lookup by employee
    op.create_index('ix_asset_employees_employee', 'asset_employees', ['employee_id'])


def downgrade() -> None:
    op.drop_index('ix_asset_employees_employee', table_name='asset_employees')
    op.drop_table('asset_employees')
    op.drop_index('ix_employees_department', table_name='employees')
    op.drop_table('employees')
    op.drop_index('ix_assets_category', table_name='assets')
    op.drop_table('assets')
    op.drop_table('departments')
    op.drop_table('categories')
