"""MODIFY -> week module.

Coach edits of single cycle weeks with AUTO/MANUAL provenance tracking.
"""

from clubcoach.plans.modify.week_editor import apply_draft_to_weeks, open_week_draft, reset_week_to_auto, save_week

__all__ = [
    "apply_draft_to_weeks",
    "open_week_draft",
    "reset_week_to_auto",
    "save_week",
]
