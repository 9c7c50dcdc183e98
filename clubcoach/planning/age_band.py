"""Age-band normalization and bucketing.

Age bands arrive as free text ("9-11", "09-11 anos", "Sub 12"). Parsing
never raises: text without a recognizable "N-N" range is returned trimmed
and sorts after every parseable band.
"""

import math
import re
from dataclasses import dataclass

from clubcoach.planning.types import PlanBand

_RANGE_PATTERN = re.compile(r"(\d{1,2})\s*-\s*(\d{1,2})")


@dataclass(frozen=True)
class AgeBandRange:
    """Parsed age band.

    Attributes:
        start: Lower age bound (math.inf when unparseable)
        end: Upper age bound (math.inf when unparseable)
        label: Normalized label ("NN-NN", or the trimmed input text)
    """

    start: float
    end: float
    label: str


def normalize_age_band(value: str | None) -> str:
    """Normalize an age band to zero-padded "NN-NN" form.

    Args:
        value: Free-text age band

    Returns:
        "NN-NN" when a range is found, otherwise the trimmed input ("" for None)
    """
    if not value:
        return ""
    match = _RANGE_PATTERN.search(value)
    if not match:
        return value.strip()
    return f"{int(match.group(1)):02d}-{int(match.group(2)):02d}"


def parse_age_band_range(value: str | None) -> AgeBandRange:
    """Parse an age band into numeric bounds for sorting and bucketing."""
    raw = value or ""
    match = _RANGE_PATTERN.search(raw)
    if not match:
        return AgeBandRange(start=math.inf, end=math.inf, label=normalize_age_band(raw) or raw.strip())
    return AgeBandRange(
        start=int(match.group(1)),
        end=int(match.group(2)),
        label=normalize_age_band(raw),
    )


def sort_age_bands(bands: list[str]) -> list[str]:
    """Sort age bands by start age, then end age, then label."""

    def _key(band: str) -> tuple[float, float, str]:
        parsed = parse_age_band_range(band)
        return (parsed.start, parsed.end, parsed.label)

    return sorted(bands, key=_key)


def resolve_plan_band(age_band: str | None) -> PlanBand:
    """Bucket an age band into one of the three template bands.

    Rules:
    - end <= 8: "06-08"
    - end <= 11: "09-11"
    - otherwise (including unparseable text): "12-14"
    """
    band_range = parse_age_band_range(age_band)
    if band_range.end <= 8:
        return "06-08"
    if band_range.end <= 11:
        return "09-11"
    return "12-14"
