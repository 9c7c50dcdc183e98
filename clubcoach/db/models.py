from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class ClassPlanRecord(Base):
    """Periodization plan rows, one per class and cycle week.

    Stores:
    - identity: id, class_id, week_number (unique per class)
    - cycle context: start_date, phase
    - descriptive content: theme, focus fields, constraints, formats
    - targets: jump_target, rpe_target
    - provenance: source ("AUTO" or "MANUAL")
    """

    __tablename__ = "class_plans"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    class_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    week_number: Mapped[int] = mapped_column(Integer, nullable=False)

    phase: Mapped[str] = mapped_column(String, nullable=False)
    theme: Mapped[str] = mapped_column(Text, nullable=False, default="")
    technical_focus: Mapped[str] = mapped_column(Text, nullable=False, default="")
    physical_focus: Mapped[str] = mapped_column(Text, nullable=False, default="")
    constraints: Mapped[str] = mapped_column(Text, nullable=False, default="")
    mv_format: Mapped[str] = mapped_column(String, nullable=False, default="")
    warmup_profile: Mapped[str] = mapped_column(Text, nullable=False, default="")
    jump_target: Mapped[str] = mapped_column(String, nullable=False, default="")
    rpe_target: Mapped[str] = mapped_column(String, nullable=False, default="")

    source: Mapped[str] = mapped_column(String, nullable=False, default="AUTO")  # AUTO, MANUAL

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("class_id", "week_number", name="uq_class_plans_class_week"),
    )


class SessionLogRecord(Base):
    """Logged class sessions with perceived effort and optional pain score."""

    __tablename__ = "session_logs"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    class_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    pse: Mapped[float] = mapped_column(Float, nullable=False)
    pain_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    technique: Mapped[str | None] = mapped_column(String, nullable=True)  # boa, ok, ruim
    attendance: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        Index("idx_session_logs_created_at", "created_at"),
    )
