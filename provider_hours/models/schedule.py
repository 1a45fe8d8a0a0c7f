from datetime import time
from sqlalchemy import Integer, Boolean, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from ..core.db import Base


class ProviderSchedule(Base):
    """Weekly opening hours of a provider branch, written by the profile service."""

    __tablename__ = "provider_schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    branch_id: Mapped[str] = mapped_column(String(64), index=True)
    day_of_week: Mapped[int] = mapped_column(Integer, index=True)  # 0 = Sunday, 6 = Saturday
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
