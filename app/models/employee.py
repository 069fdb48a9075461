"""직원 관련 SQLAlchemy ORM 모델 정의.

Employee-related SQLAlchemy ORM model definitions.
Includes Department and Employee.

Tables:
    - departments: 부서 (Departments)
    - employees: 직원 (Employees, FK to departments)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Department(Base):
    """부서 모델.

    Department model — organizational unit employees belong to.

    Attributes:
        id: 고유 식별자 (Unique integer identifier, store-assigned)
        name: 부서 이름 (Department name)
    """

    __tablename__ = "departments"

    # 부서 고유 식별자 — Department unique identifier (autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 부서 이름 — Department display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class Employee(Base):
    """직원 모델 — 부서에 소속된 자산 보유자.

    Employee model — An asset holder belonging to exactly one Department.

    Attributes:
        id: 고유 식별자 (Unique integer identifier, store-assigned)
        name: 이름 (First name)
        surname: 성 (Surname)
        tel: 전화번호 (Phone number, optional)
        department_id: 소속 부서 FK (Parent department foreign key)

    Relationships:
        department: 소속 부서 (Parent department, eagerly loaded)
    """

    __tablename__ = "employees"

    # 직원 고유 식별자 — Employee unique identifier (autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 이름 — First name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 성 — Surname
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    # 전화번호 — Contact phone number (optional)
    tel: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # 소속 부서 FK — Parent department (RESTRICT: 직원이 남아있으면 부서 삭제 불가)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False
    )

    department = relationship("Department", lazy="selectin")
