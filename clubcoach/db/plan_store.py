"""Plan store: the persistence boundary of the planning core.

PlanStore is the interface the services depend on. SqlPlanStore
implements it on top of a SQLAlchemy session; callers own the session
and its transaction (see clubcoach.db.session.get_session).

Store failures are never retried or swallowed here.
"""

from datetime import datetime
from typing import Protocol

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from clubcoach.db.models import ClassPlanRecord, SessionLogRecord
from clubcoach.planning.errors import PlanNotFoundError
from clubcoach.planning.types import ClassPlan, SessionLog, as_utc


class PlanStore(Protocol):
    """Persistence operations consumed by the planning services."""

    def list_plans(self, class_id: str) -> list[ClassPlan]: ...

    def create_plan(self, plan: ClassPlan) -> None: ...

    def create_plans(self, plans: list[ClassPlan]) -> None: ...

    def update_plan(self, plan: ClassPlan) -> None: ...

    def delete_plans_by_class(self, class_id: str) -> int: ...

    def list_session_logs(self, start: datetime, end: datetime) -> list[SessionLog]: ...


def _record_to_plan(record: ClassPlanRecord) -> ClassPlan:
    return ClassPlan(
        id=record.id,
        class_id=record.class_id,
        start_date=record.start_date,
        week_number=record.week_number,
        phase=record.phase,
        theme=record.theme,
        technical_focus=record.technical_focus,
        physical_focus=record.physical_focus,
        constraints=record.constraints,
        mv_format=record.mv_format,
        warmup_profile=record.warmup_profile,
        jump_target=record.jump_target,
        rpe_target=record.rpe_target,
        source=record.source,
        created_at=as_utc(record.created_at),
        updated_at=as_utc(record.updated_at),
    )


def _plan_to_record(plan: ClassPlan) -> ClassPlanRecord:
    return ClassPlanRecord(**plan.model_dump())


def _record_to_log(record: SessionLogRecord) -> SessionLog:
    return SessionLog(
        class_id=record.class_id,
        created_at=as_utc(record.created_at),
        pse=record.pse,
        pain_score=record.pain_score,
        technique=record.technique,
        attendance=record.attendance,
    )


class SqlPlanStore:
    """PlanStore backed by the class_plans and session_logs tables."""

    def __init__(self, session: Session):
        self.session = session

    def list_plans(self, class_id: str) -> list[ClassPlan]:
        query = (
            select(ClassPlanRecord)
            .where(ClassPlanRecord.class_id == class_id)
            .order_by(ClassPlanRecord.week_number)
        )
        records = self.session.execute(query).scalars().all()
        return [_record_to_plan(record) for record in records]

    def create_plan(self, plan: ClassPlan) -> None:
        self.session.add(_plan_to_record(plan))
        self.session.flush()
        logger.debug("Created class plan", plan_id=plan.id, class_id=plan.class_id, week_number=plan.week_number)

    def create_plans(self, plans: list[ClassPlan]) -> None:
        if not plans:
            return
        self.session.add_all([_plan_to_record(plan) for plan in plans])
        self.session.flush()
        logger.debug("Created class plans", class_id=plans[0].class_id, count=len(plans))

    def update_plan(self, plan: ClassPlan) -> None:
        record = self.session.get(ClassPlanRecord, plan.id)
        if record is None:
            raise PlanNotFoundError(f"Class plan not found: {plan.id}")
        for field, value in plan.model_dump(exclude={"id"}).items():
            setattr(record, field, value)
        self.session.flush()
        logger.debug("Updated class plan", plan_id=plan.id, week_number=plan.week_number, source=plan.source)

    def delete_plans_by_class(self, class_id: str) -> int:
        result = self.session.execute(delete(ClassPlanRecord).where(ClassPlanRecord.class_id == class_id))
        self.session.flush()
        deleted = result.rowcount or 0
        logger.debug("Deleted class plans", class_id=class_id, count=deleted)
        return deleted

    def list_session_logs(self, start: datetime, end: datetime) -> list[SessionLog]:
        query = (
            select(SessionLogRecord)
            .where(SessionLogRecord.created_at >= as_utc(start), SessionLogRecord.created_at <= as_utc(end))
            .order_by(SessionLogRecord.created_at)
        )
        records = self.session.execute(query).scalars().all()
        return [_record_to_log(record) for record in records]

    def add_session_log(self, log: SessionLog) -> None:
        record = SessionLogRecord(**log.model_dump())
        record.created_at = as_utc(log.created_at)
        self.session.add(record)
        self.session.flush()
        logger.debug("Logged session", class_id=log.class_id, pse=log.pse)
