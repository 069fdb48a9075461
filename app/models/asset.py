"""자산 관련 SQLAlchemy ORM 모델 정의.

Asset-related SQLAlchemy ORM model definitions.
Includes Category (asset classification) and Asset (tracked item).

Tables:
    - categories: 자산 분류 (Asset categories)
    - assets: 추적 대상 자산 (Tracked assets, FK to categories)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Category(Base):
    """자산 분류 모델.

    Category model — classification that every asset belongs to.

    Attributes:
        id: 고유 식별자 (Unique integer identifier, store-assigned)
        name: 분류 이름 (Category name, required)
    """

    __tablename__ = "categories"

    # 분류 고유 식별자 — Category unique identifier (autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 분류 이름 — Category display name (required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class Asset(Base):
    """자산 모델 — 분류에 속한 추적 대상 물품.

    Asset model — A tracked item belonging to exactly one Category.
    The parent category is loaded together with the asset whenever
    the asset is read.

    Attributes:
        id: 고유 식별자 (Unique integer identifier, store-assigned)
        name: 자산 이름 (Asset name)
        serial_number: 시리얼 번호 (Serial number, optional)
        category_id: 소속 분류 FK (Parent category foreign key)

    Relationships:
        category: 소속 분류 (Parent category, eagerly loaded)
    """

    __tablename__ = "assets"

    # 자산 고유 식별자 — Asset unique identifier (autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 자산 이름 — Asset display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 시리얼 번호 — Manufacturer serial number (optional)
    serial_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # 소속 분류 FK — Parent category (RESTRICT: 자산이 남아있으면 분류 삭제 불가)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False
    )

    # 관계 — Relationships (selectin: 비동기 세션에서 지연 로딩 방지)
    category = relationship("Category", lazy="selectin")
