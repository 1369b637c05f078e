from __future__ import annotations

from datetime import datetime
from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db import Base


class FoodRecord(Base):
    __tablename__ = "food_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    meal_record_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("meal_records.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    food_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("foods.id"),
        index=True,
        nullable=False,
    )

    # copied from the food at the last write
    food_name: Mapped[str] = mapped_column(String(100), nullable=False)

    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False)  # g/ml/piece...

    # derived: (quantity / 100) * food value, not recomputed on read
    calories: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    protein: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    carbohydrates: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    fat: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
