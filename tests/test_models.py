"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from matchcraft.models import (
    AnalysisResult,
    ExperienceLevel,
    Industry,
    MatchSignals,
    Section,
    TailoringRequest,
    TailoringResult,
    TemplateId,
)


class TestTailoringRequest:
    def test_defaults(self):
        request = TailoringRequest(resume_text="r", job_description="j")
        assert request.template is TemplateId.EXECUTIVE
        assert request.target_industry is None
        assert request.experience_level is None

    def test_coerces_enum_values(self):
        request = TailoringRequest(
            resume_text="r",
            job_description="j",
            template="academic",
            target_industry="Healthcare",
            experience_level="senior",
        )
        assert request.template is TemplateId.ACADEMIC
        assert request.target_industry is Industry.HEALTHCARE
        assert request.experience_level is ExperienceLevel.SENIOR

    def test_rejects_unknown_template(self):
        with pytest.raises(PydanticValidationError):
            TailoringRequest(resume_text="r", job_description="j", template="modern")

    def test_frozen(self):
        request = TailoringRequest(resume_text="r", job_description="j")
        with pytest.raises(PydanticValidationError):
            request.resume_text = "changed"


class TestEnumerations:
    def test_twelve_industries(self):
        assert len(Industry) == 12
        assert Industry("Technology") is Industry.TECHNOLOGY

    @pytest.mark.parametrize(
        "level, label",
        [
            (ExperienceLevel.ENTRY, "Entry (0-2 years)"),
            (ExperienceLevel.MID, "Mid (3-7 years)"),
            (ExperienceLevel.SENIOR, "Senior (8-15 years)"),
            (ExperienceLevel.EXECUTIVE, "Executive (15+ years)"),
        ],
    )
    def test_level_labels(self, level, label):
        assert level.label == label

    @pytest.mark.parametrize(
        "years, level",
        [
            (0, ExperienceLevel.ENTRY),
            (2, ExperienceLevel.ENTRY),
            (3, ExperienceLevel.MID),
            (7, ExperienceLevel.MID),
            (8, ExperienceLevel.SENIOR),
            (15, ExperienceLevel.EXECUTIVE),
            (30, ExperienceLevel.EXECUTIVE),
        ],
    )
    def test_level_from_years(self, years, level):
        assert ExperienceLevel.from_years(years) is level


class TestMatchSignals:
    def test_set_views(self):
        signals = MatchSignals(
            resume_skills=frozenset({"Python", "SQL", "Excel"}),
            required=frozenset({"Python", "Java"}),
            preferred=frozenset({"SQL", "Go"}),
        )
        assert signals.matched == {"Python", "SQL"}
        assert signals.matched_required == {"Python"}
        assert signals.matched_preferred == {"SQL"}
        assert signals.missing_required == {"Java"}
        assert signals.missing_preferred == {"Go"}


class TestAnalysisResult:
    def test_create(self, sample_analysis):
        assert sample_analysis.match_score == 72
        assert sample_analysis.degraded_reasons == []

    @pytest.mark.parametrize("score", [-1, 101])
    def test_scores_bounded(self, score):
        with pytest.raises(PydanticValidationError):
            AnalysisResult(
                match_score=score, ats_score=50,
                key_strengths=[], skill_gaps=[], recommendations=[],
            )

    def test_rejects_duplicates(self):
        with pytest.raises(PydanticValidationError, match="unique"):
            AnalysisResult(
                match_score=50, ats_score=50,
                key_strengths=["a", "a"], skill_gaps=[], recommendations=[],
            )

    def test_default_industry_fit(self):
        result = AnalysisResult(
            match_score=50, ats_score=50, key_strengths=[], skill_gaps=[], recommendations=[],
        )
        assert result.industry_fit == "General"


class TestTailoringResult:
    def test_serialization(self, sample_analysis):
        result = TailoringResult(
            resume="## Summary", cover_letter="Dear", analysis=sample_analysis,
            metadata={"elapsed_seconds": 1.2},
        )
        restored = TailoringResult(**result.model_dump())
        assert restored == result


class TestSection:
    def test_tokens_lowercase(self):
        section = Section(heading="Skills", bullets=("Python", "SQL Server"))
        assert section.tokens == ("python", "sql server")
