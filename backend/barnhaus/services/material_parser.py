"""Heuristic parser for free-text material classifications.

The vision model answers in loose prose, usually a numbered list with one
section per material group. There is no grammar to enforce, so parsing is
best-effort and never fails: any field that cannot be found keeps the
standard-grade default.
"""

from __future__ import annotations

import logging
import re

from barnhaus.models.enums import MaterialCategory
from barnhaus.models.materials import (
    DEFAULT_DESCRIPTIONS,
    DEFAULT_QUALITY_MULTIPLIER,
    CostImpact,
    MaterialAnalysis,
    clamp_quality,
)

logger = logging.getLogger(__name__)

_SECTION_SPLIT_RE = re.compile(r"\d\.\s+")
_MATERIAL_TYPE_RE = re.compile(r"type:?\s*([^.]+)", re.IGNORECASE)
_QUALITY_LEVEL_RE = re.compile(r"Quality level.*?(\d+\.?\d*)", re.IGNORECASE)

# Checked in order; the first keyword found claims the section.
_SECTION_KEYWORDS: list[tuple[str, MaterialCategory]] = [
    ("roofing", MaterialCategory.ROOFING),
    ("siding", MaterialCategory.SIDING),
    ("window", MaterialCategory.WINDOWS),
    ("door", MaterialCategory.DOORS),
]


def parse_material_analysis(raw_text: str | None) -> MaterialAnalysis:
    """Extract four material descriptions and quality multipliers from text.

    Sections are found by splitting on numbered-list markers ("1. ", "2. ").
    A later section for the same material overwrites an earlier one.
    Categories that never match keep their defaults.
    """
    descriptions: dict[MaterialCategory, str] = dict(DEFAULT_DESCRIPTIONS)
    multipliers: dict[MaterialCategory, float] = {
        category: DEFAULT_QUALITY_MULTIPLIER for category in MaterialCategory
    }

    if not raw_text:
        return MaterialAnalysis()

    # Text before the first marker is preamble, not a section.
    for section in _SECTION_SPLIT_RE.split(raw_text)[1:]:
        category = _classify_section(section)
        if category is None:
            continue
        descriptions[category] = extract_description(section)
        multipliers[category] = extract_quality_multiplier(section)

    return MaterialAnalysis(
        roofing=descriptions[MaterialCategory.ROOFING],
        siding=descriptions[MaterialCategory.SIDING],
        windows=descriptions[MaterialCategory.WINDOWS],
        doors=descriptions[MaterialCategory.DOORS],
        cost_impact=CostImpact(
            roofing=multipliers[MaterialCategory.ROOFING],
            siding=multipliers[MaterialCategory.SIDING],
            windows=multipliers[MaterialCategory.WINDOWS],
            doors=multipliers[MaterialCategory.DOORS],
        ),
    )


def _classify_section(section: str) -> MaterialCategory | None:
    lowered = section.lower()
    for keyword, category in _SECTION_KEYWORDS:
        if keyword in lowered:
            return category
    return None


def extract_description(section: str) -> str:
    """Pull the material description out of one section.

    Prefers the text after "type:" up to the next period. Otherwise takes
    the first non-empty line, keeps what follows its last colon, and cuts
    it at the first period.
    """
    match = _MATERIAL_TYPE_RE.search(section)
    if match and match.group(1).strip():
        return match.group(1).strip()

    lines = [line for line in section.split("\n") if line.strip()]
    if not lines:
        return ""

    description = lines[0].rsplit(":", 1)[-1].strip() or lines[0].strip()
    return description.split(".", 1)[0].strip()


def extract_quality_multiplier(section: str) -> float:
    """Find "Quality level ... <number>" and clamp it to [0.9, 1.2].

    Returns 1.0 when no quality level is stated.
    """
    match = _QUALITY_LEVEL_RE.search(section)
    if match is None:
        logger.debug("No quality level found in section; using default")
        return DEFAULT_QUALITY_MULTIPLIER
    try:
        value = float(match.group(1))
    except ValueError:
        return DEFAULT_QUALITY_MULTIPLIER
    return clamp_quality(value)
