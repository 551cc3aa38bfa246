"""Job Match Score and ATS Compatibility Score.

The formulas are a policy, not a reverse-engineered fact; callers can swap in
any object satisfying ScoringPolicy.
"""

from __future__ import annotations

import math
from typing import Protocol

from matchcraft.config import ScoringConfig
from matchcraft.models.analysis import MatchSignals
from matchcraft.models.document import ResumeDocument

NEUTRAL_COVERAGE = 0.5
REQUIRED_WEIGHT = 2
PREFERRED_WEIGHT = 1


class ScoringPolicy(Protocol):
    def match_score(self, signals: MatchSignals) -> int: ...

    def ats_score(self, signals: MatchSignals, resume: ResumeDocument) -> int: ...


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def keyword_coverage(signals: MatchSignals) -> float:
    """Count-weighted share of job-posting terms written verbatim in the resume."""
    total = sum(signals.keyword_density.values())
    if total == 0:
        return NEUTRAL_COVERAGE
    covered = sum(n for term, n in signals.keyword_density.items() if term in signals.resume_terms)
    return covered / total


def has_table_layout(text: str) -> bool:
    """Pipe-delimited rows or tab-aligned columns, which ATS parsers often scramble."""
    for line in text.splitlines():
        if line.count("|") >= 2 or "\t" in line.strip():
            return True
    return False


class DefaultScoringPolicy:
    """Weighted requirement coverage plus keyword coverage minus layout penalties."""

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    def match_score(self, signals: MatchSignals) -> int:
        denominator = REQUIRED_WEIGHT * len(signals.required) + PREFERRED_WEIGHT * len(signals.preferred)
        if denominator == 0:
            return self.config.neutral_match_score
        numerator = (
            REQUIRED_WEIGHT * len(signals.matched_required)
            + PREFERRED_WEIGHT * len(signals.matched_preferred)
        )
        return clamp(round_half_up(100 * numerator / denominator))

    def ats_penalties(self, resume: ResumeDocument) -> dict[str, int]:
        cfg = self.config
        penalties: dict[str, int] = {}
        if len(resume.raw_text.strip()) < cfg.min_resume_chars:
            penalties["short_resume"] = cfg.short_resume_penalty
        if not resume.headings:
            penalties["no_headings"] = cfg.no_headings_penalty
        if has_table_layout(resume.raw_text):
            penalties["table_layout"] = cfg.table_layout_penalty
        return penalties

    def ats_score(self, signals: MatchSignals, resume: ResumeDocument) -> int:
        coverage = keyword_coverage(signals)
        penalty = sum(self.ats_penalties(resume).values())
        return clamp(round_half_up(100 * coverage) - penalty)
