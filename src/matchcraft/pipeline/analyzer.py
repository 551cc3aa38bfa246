"""Gap/Strength Analyzer - turns match signals into strengths, gaps and advice."""

from __future__ import annotations

import logging

from matchcraft.config import AnalysisConfig, ScoringConfig
from matchcraft.models.analysis import GENERAL_INDUSTRY, AnalysisResult, MatchSignals
from matchcraft.models.document import JobPosting, ResumeDocument
from matchcraft.models.request import Industry, TailoringRequest
from matchcraft.templates.loader import load_template, templates_for_industry

logger = logging.getLogger(__name__)

MAX_KEYWORDS_IN_ADVICE = 3


class GapAnalyzer:
    """Classifies matched vs missing skills and derives ranked recommendations.

    Recommendations follow a fixed rule priority, so the same inputs always
    produce the same list in the same order.
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        scoring: ScoringConfig | None = None,
    ):
        self.config = config or AnalysisConfig()
        self.scoring = scoring or ScoringConfig()

    def analyze(
        self,
        signals: MatchSignals,
        resume: ResumeDocument,
        job: JobPosting,
        request: TailoringRequest,
        *,
        match_score: int,
        ats_score: int,
    ) -> AnalysisResult:
        degraded = self._degraded_reasons(signals)
        for reason in degraded:
            logger.warning("Extraction degraded: %s", reason)

        return AnalysisResult(
            match_score=match_score,
            ats_score=ats_score,
            key_strengths=self.key_strengths(signals),
            skill_gaps=self.skill_gaps(signals),
            recommendations=self.recommendations(signals, resume, job, request, ats_score=ats_score),
            industry_fit=industry_fit(job, request),
            degraded_reasons=degraded,
        )

    def key_strengths(self, signals: MatchSignals) -> list[str]:
        ranked = _rank(signals.matched, signals.skill_frequency)
        return [f"Strong background in {skill}" for skill in ranked[: self.config.strength_cap]]

    def skill_gaps(self, signals: MatchSignals) -> list[str]:
        gaps = [
            f"Build or highlight experience with {skill} (required)"
            for skill in _rank(signals.missing_required, signals.skill_frequency)
        ]
        gaps += [
            f"Consider gaining exposure to {skill} (preferred)"
            for skill in _rank(signals.missing_preferred, signals.skill_frequency)
        ]
        return gaps[: self.config.gap_cap]

    def recommendations(
        self,
        signals: MatchSignals,
        resume: ResumeDocument,
        job: JobPosting,
        request: TailoringRequest,
        *,
        ats_score: int,
    ) -> list[str]:
        recs: list[str] = []

        # 1. ATS keyword coverage
        if ats_score < self.scoring.ats_threshold:
            missing_terms = _missing_keywords(signals)[:MAX_KEYWORDS_IN_ADVICE]
            if missing_terms:
                recs.append(
                    "Add measurable achievements and mirror key job-posting terms such as "
                    + ", ".join(missing_terms)
                )
            else:
                recs.append(
                    "Add measurable achievements (numbers, percentages, scale) "
                    "and clear section headings for ATS parsing"
                )

        # 2. Required skills
        missing_required = _rank(signals.missing_required, signals.skill_frequency)
        if missing_required:
            recs.append(
                "Address required qualifications explicitly: "
                + ", ".join(missing_required[:MAX_KEYWORDS_IN_ADVICE])
            )

        # 3-4. Experience scope
        implied = implied_years(job, request)
        if resume.experience_years is None:
            recs.append("State your total years of relevant experience in the summary")
        elif implied is not None and resume.experience_years < implied:
            recs.append(
                f"Reframe the scope of your responsibilities (team size, budget, ownership) "
                f"to match the {implied}+ years this level implies"
            )

        # 5. Industry alignment
        if request.target_industry is not None and request.target_industry != job.industry:
            recs.append(
                f"Use {request.target_industry.value}-specific terminology to align your "
                f"experience with the target industry"
            )

        # 6. Template affinity
        industry = request.target_industry or job.industry
        template = load_template(request.template)
        if industry is not None and not template.fits(industry):
            fitting = templates_for_industry(industry)
            if fitting:
                recs.append(
                    f"Consider the {fitting[0].name} template, designed for {industry.value} roles"
                )

        # 7. Preferred skills
        missing_preferred = _rank(signals.missing_preferred, signals.skill_frequency)
        if missing_preferred:
            recs.append(
                "Highlight any adjacent exposure to preferred skills: "
                + ", ".join(missing_preferred[:MAX_KEYWORDS_IN_ADVICE])
            )

        return list(dict.fromkeys(recs))

    @staticmethod
    def _degraded_reasons(signals: MatchSignals) -> list[str]:
        reasons = []
        if not signals.resume_skills:
            reasons.append("no recognizable skills found in resume")
        if not signals.required and not signals.preferred:
            reasons.append("no skill requirements found in job description")
        return reasons


def industry_fit(job: JobPosting, request: TailoringRequest) -> str:
    industry: Industry | None = job.industry or request.target_industry
    return industry.value if industry is not None else GENERAL_INDUSTRY


def implied_years(job: JobPosting, request: TailoringRequest) -> int | None:
    """Years of experience the chosen level (or else the posting) calls for."""
    if request.experience_level is not None:
        return request.experience_level.min_years
    if job.required_years is not None:
        return job.required_years
    if job.seniority is not None:
        return job.seniority.min_years
    return None


def _rank(skills: frozenset[str], frequency: dict[str, int]) -> list[str]:
    """Most frequent in the job posting first, then alphabetical."""
    return sorted(skills, key=lambda s: (-frequency.get(s, 0), s.lower()))


def _missing_keywords(signals: MatchSignals) -> list[str]:
    """Job-posting terms the resume never writes verbatim, by frequency."""
    missing = [
        (count, term) for term, count in signals.keyword_density.items()
        if term not in signals.resume_terms
    ]
    return [term for _, term in sorted(missing, key=lambda x: (-x[0], x[1]))]
