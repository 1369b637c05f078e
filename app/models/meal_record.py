from __future__ import annotations

import enum
import datetime as dt
from sqlalchemy import Date, DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db import Base


class MealType(enum.IntEnum):
    BREAKFAST = 1
    LUNCH = 2
    DINNER = 3
    SNACK = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value) -> "MealType":
        """Accept a name ("lunch") or an integer code (2)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError("meal_type must be a name or an integer code")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"unknown meal_type code {value}")
        if isinstance(value, str):
            text = value.strip().lower()
            if text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"unknown meal_type {value!r}")
        raise ValueError("meal_type must be a name or an integer code")


class MealRecord(Base):
    __tablename__ = "meal_records"
    __table_args__ = (
        UniqueConstraint("user_id", "date", "meal_type", name="uq_meal_records_user_date_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    date: Mapped[dt.date] = mapped_column(Date, index=True, nullable=False)
    meal_type: Mapped[int] = mapped_column(Integer, nullable=False)  # MealType code

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
