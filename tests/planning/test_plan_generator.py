"""Tests for AUTO plan generation."""

from datetime import date

import pytest

from clubcoach.planning.errors import PlanGenerationError
from clubcoach.planning.generator import (
    build_auto_plan_for_week,
    build_class_cycle,
    build_class_plan,
    to_class_plans,
)
from clubcoach.planning.templates import BASE_TEMPLATES, get_template_for_week

START = date(2026, 3, 2)
CONTENT = ("phase", "theme", "technical_focus", "physical_focus", "jump_target", "rpe_target")


def _content(plan):
    return {field: getattr(plan, field) for field in CONTENT}


class TestBuildClassPlan:
    def test_assembles_week_from_band_template_and_phase(self):
        plan = build_class_plan(class_id="c1", age_band="9-11", start_date=START, week_number=3, cycle_length=12)

        assert plan.class_id == "c1"
        assert plan.week_number == 3
        assert plan.start_date == START
        assert plan.phase == "Base"
        assert plan.theme == "Velocidade e saltos com controle"
        assert plan.technical_focus == "Velocidade e saltos com controle"
        assert plan.physical_focus == "Forca leve e agilidade"
        assert plan.constraints == "Monitorar saltos"
        assert plan.warmup_profile == "Pausas ativas"
        assert plan.mv_format == "2x2/3x3"
        assert plan.jump_target == "20-40"
        assert plan.rpe_target == "4-5"
        assert plan.source == "AUTO"
        assert plan.created_at == plan.updated_at

    def test_is_deterministic_except_identity_and_timestamps(self):
        kwargs = dict(class_id="c1", age_band="12-14", start_date=START, week_number=6, cycle_length=12)
        first = build_class_plan(**kwargs)
        second = build_class_plan(**kwargs)

        assert _content(first) == _content(second)
        assert first.id != second.id

    def test_templates_repeat_every_four_weeks(self):
        week_5 = build_class_plan(class_id="c1", age_band="6-8", start_date=START, week_number=5, cycle_length=12)
        assert week_5.theme == BASE_TEMPLATES["06-08"][0].focus
        assert get_template_for_week("06-08", 8) == BASE_TEMPLATES["06-08"][3]

    @pytest.mark.parametrize(
        ("age_band", "mv_level", "expected"),
        [
            ("6-8", None, "10-20"),
            ("9-11", None, "20-40"),
            ("12-14", None, "30-60"),
            ("12-14", "MV1", "10-20"),
            ("6-8", " MV3 ", "30-60"),
            ("9-11", "MV9", "30-60"),
            ("9-11", "   ", "20-40"),
        ],
    )
    def test_jump_target_follows_skill_level(self, age_band, mv_level, expected):
        plan = build_class_plan(
            class_id="c1", age_band=age_band, start_date=START, week_number=1, mv_level=mv_level, cycle_length=4
        )
        assert plan.jump_target == expected

    def test_id_embeds_class_and_week(self):
        plan = build_class_plan(class_id="abc", age_band="9-11", start_date=START, week_number=2, cycle_length=4)
        assert plan.id.startswith("cp_abc_")
        assert plan.id.endswith("_2")

    def test_defaults_cycle_length_from_settings(self):
        plan = build_class_plan(class_id="c1", age_band="9-11", start_date=START, week_number=4)
        # 12-week default keeps week 4 in the fixed Base block
        assert plan.phase == "Base"

    @pytest.mark.parametrize(("week_number", "cycle_length"), [(0, 4), (-1, 4), (1, 0)])
    def test_rejects_non_positive_inputs(self, week_number, cycle_length):
        with pytest.raises(PlanGenerationError):
            build_class_plan(
                class_id="c1", age_band="9-11", start_date=START, week_number=week_number, cycle_length=cycle_length
            )


class TestToClassPlans:
    def test_six_week_cycle_covers_each_week_once(self):
        plans = to_class_plans(class_id="c1", age_band="9-11", cycle_length=6, start_date=START)

        assert len(plans) == 6
        assert sorted(plan.week_number for plan in plans) == [1, 2, 3, 4, 5, 6]
        assert all(plan.source == "AUTO" for plan in plans)
        assert all(plan.start_date == START for plan in plans)
        assert len({plan.id for plan in plans}) == 6


class TestDescriptorGeneration:
    def test_cycle_uses_descriptor_settings(self, descriptor):
        plans = build_class_cycle(descriptor)
        assert [plan.week_number for plan in plans] == list(range(1, 7))
        assert [plan.phase for plan in plans] == [
            "Base",
            "Base",
            "Desenvolvimento",
            "Desenvolvimento",
            "Consolidacao",
            "Consolidacao",
        ]

    def test_missing_cycle_start_falls_back_to_today(self, descriptor):
        floating = descriptor.model_copy(update={"cycle_start_date": None})
        plan = build_auto_plan_for_week(floating, 1, today=date(2026, 5, 4))
        assert plan.start_date == date(2026, 5, 4)

    def test_existing_row_identity_is_kept(self, descriptor):
        first = build_auto_plan_for_week(descriptor, 2)
        rebuilt = build_auto_plan_for_week(descriptor, 2, existing=first)
        assert rebuilt.id == first.id
        assert rebuilt.created_at == first.created_at
