"""Planning module - deterministic class periodization.

This module provides:
- Age-band normalization and template band bucketing
- Phase classification and effort targets per cycle week
- AUTO plan generation for single weeks and whole cycles
- AUTO/MANUAL provenance rules for coach edits
"""

from clubcoach.planning.age_band import normalize_age_band, parse_age_band_range, resolve_plan_band
from clubcoach.planning.generator import build_class_plan, to_class_plans
from clubcoach.planning.phase import get_phase_for_week, get_rpe_target
from clubcoach.planning.provenance import PLAN_CONTENT_FIELDS, has_plan_changes, resolve_source
from clubcoach.planning.types import ClassDescriptor, ClassPlan, PlanDraft, SessionLog

__all__ = [
    "PLAN_CONTENT_FIELDS",
    "ClassDescriptor",
    "ClassPlan",
    "PlanDraft",
    "SessionLog",
    "build_class_plan",
    "get_phase_for_week",
    "get_rpe_target",
    "has_plan_changes",
    "normalize_age_band",
    "parse_age_band_range",
    "resolve_plan_band",
    "resolve_source",
    "to_class_plans",
]
