"""Pydantic models for match signals and analysis output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

GENERAL_INDUSTRY = "General"


class MatchSignals(BaseModel):
    """Pairing of one resume with one job posting. Never shared across requests."""

    model_config = ConfigDict(frozen=True)

    resume_skills: frozenset[str]
    required: frozenset[str]
    preferred: frozenset[str]
    keyword_density: dict[str, int] = Field(default_factory=dict)  # surface term -> count
    skill_frequency: dict[str, int] = Field(default_factory=dict)  # canonical skill -> count
    resume_terms: frozenset[str] = frozenset()  # dictionary terms written verbatim in the resume

    @property
    def matched(self) -> frozenset[str]:
        return self.resume_skills & (self.required | self.preferred)

    @property
    def matched_required(self) -> frozenset[str]:
        return self.resume_skills & self.required

    @property
    def matched_preferred(self) -> frozenset[str]:
        return self.resume_skills & self.preferred

    @property
    def missing_required(self) -> frozenset[str]:
        return self.required - self.resume_skills

    @property
    def missing_preferred(self) -> frozenset[str]:
        return self.preferred - self.resume_skills


class AnalysisResult(BaseModel):
    match_score: int = Field(ge=0, le=100)
    ats_score: int = Field(ge=0, le=100)
    key_strengths: list[str]
    skill_gaps: list[str]
    recommendations: list[str]
    industry_fit: str = GENERAL_INDUSTRY
    degraded_reasons: list[str] = []

    @field_validator("key_strengths", "skill_gaps", "recommendations")
    @classmethod
    def _no_duplicates(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("entries must be unique")
        return value
