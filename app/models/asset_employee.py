"""자산-직원 연결 SQLAlchemy ORM 모델.

Asset-Employee association model.
Many-to-many link between assets and the employees holding them.
The (asset_id, employee_id) pair is the primary key; there is no surrogate id.

Tables:
    - asset_employees: 자산 보유 연결 (Asset holding links)
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class AssetEmployee(Base):
    """자산-직원 연결 모델 (복합 키).

    Asset-Employee link keyed by the (asset_id, employee_id) pair.
    Changing either side changes the identity of the row, so the
    repository replaces the row instead of mutating it.

    Attributes:
        asset_id: 자산 FK, 복합 키 일부 (Asset foreign key, part of the key)
        employee_id: 직원 FK, 복합 키 일부 (Employee foreign key, part of the key)

    Relationships:
        asset: 연결된 자산 (Linked asset, eagerly loaded)
        employee: 연결된 직원 (Linked employee, eagerly loaded)
    """

    __tablename__ = "asset_employees"

    asset_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("assets.id", ondelete="RESTRICT"),
        primary_key=True,
        autoincrement=False,
    )
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="RESTRICT"),
        primary_key=True,
        autoincrement=False,
    )

    asset = relationship("Asset", lazy="selectin")
    employee = relationship("Employee", lazy="selectin")
