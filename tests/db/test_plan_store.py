"""Tests for the SQLAlchemy plan store."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from clubcoach.db.plan_store import SqlPlanStore
from clubcoach.planning.errors import PlanNotFoundError
from clubcoach.planning.generator import build_auto_plan_for_week, build_class_cycle
from clubcoach.planning.types import SessionLog


def test_create_and_list_orders_by_week(store, descriptor):
    plans = build_class_cycle(descriptor)
    store.create_plans(list(reversed(plans)))

    stored = store.list_plans(descriptor.id)

    assert [plan.week_number for plan in stored] == [1, 2, 3, 4, 5, 6]
    assert stored[0].model_dump(exclude={"created_at", "updated_at"}) == plans[0].model_dump(
        exclude={"created_at", "updated_at"}
    )
    assert stored[0].created_at.tzinfo is not None


def test_list_is_scoped_to_class(store, descriptor, long_descriptor):
    store.create_plans(build_class_cycle(descriptor))
    assert store.list_plans(long_descriptor.id) == []


def test_one_plan_per_class_week(store, descriptor):
    store.create_plan(build_auto_plan_for_week(descriptor, 1))
    with pytest.raises(IntegrityError):
        store.create_plan(build_auto_plan_for_week(descriptor, 1))


def test_update_plan(store, descriptor):
    plan = build_auto_plan_for_week(descriptor, 2)
    store.create_plan(plan)

    store.update_plan(plan.model_copy(update={"theme": "Saque", "source": "MANUAL"}))

    stored = store.list_plans(descriptor.id)[0]
    assert stored.id == plan.id
    assert stored.theme == "Saque"
    assert stored.source == "MANUAL"


def test_update_unknown_plan_raises(store, descriptor):
    with pytest.raises(PlanNotFoundError):
        store.update_plan(build_auto_plan_for_week(descriptor, 1))


def test_delete_plans_by_class(store, descriptor, long_descriptor):
    store.create_plans(build_class_cycle(descriptor))
    store.create_plans(build_class_cycle(long_descriptor))

    assert store.delete_plans_by_class(descriptor.id) == 6
    assert store.list_plans(descriptor.id) == []
    assert len(store.list_plans(long_descriptor.id)) == 12
    assert store.delete_plans_by_class(descriptor.id) == 0


def test_create_plans_with_empty_list(store, descriptor):
    store.create_plans([])
    assert store.list_plans(descriptor.id) == []


def test_session_logs_in_window(db_session):
    store = SqlPlanStore(db_session)
    now = datetime(2026, 3, 30, 12, 0, tzinfo=timezone.utc)
    for days, pain in ((1, 2.0), (10, None), (40, None)):
        store.add_session_log(
            SessionLog(class_id="c1", created_at=now - timedelta(days=days), pse=5, pain_score=pain, technique="ok")
        )

    logs = store.list_session_logs(now - timedelta(days=28), now)

    assert [log.created_at for log in logs] == [now - timedelta(days=10), now - timedelta(days=1)]
    assert logs[1].pain_score == 2.0
    assert logs[0].technique == "ok"
