"""REGENERATE -> class cycle module.

Rebuilds AUTO plan content for a class in "fill", "auto" or "all" mode.
"""

from clubcoach.plans.regenerate.regeneration_service import regenerate_class_plans, regenerate_plan
from clubcoach.plans.regenerate.types import RegenerationMode, RegenerationRequest, RegenerationResult

__all__ = [
    "RegenerationMode",
    "RegenerationRequest",
    "RegenerationResult",
    "regenerate_class_plans",
    "regenerate_plan",
]
