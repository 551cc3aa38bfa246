"""Data models for the tailoring pipeline."""

from matchcraft.models.analysis import GENERAL_INDUSTRY, AnalysisResult, MatchSignals
from matchcraft.models.brief import DocumentBrief, LengthBand
from matchcraft.models.document import JobPosting, NormalizedText, ResumeDocument, Section
from matchcraft.models.request import (
    ExperienceLevel,
    Industry,
    TailoringRequest,
    TemplateId,
)
from matchcraft.models.result import TailoringResult

__all__ = [
    "GENERAL_INDUSTRY",
    "AnalysisResult",
    "DocumentBrief",
    "ExperienceLevel",
    "Industry",
    "JobPosting",
    "LengthBand",
    "MatchSignals",
    "NormalizedText",
    "ResumeDocument",
    "Section",
    "TailoringRequest",
    "TailoringResult",
    "TemplateId",
]
