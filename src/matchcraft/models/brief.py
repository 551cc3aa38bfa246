"""Pydantic models for the structured brief handed to the text generator."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from matchcraft.models.request import ExperienceLevel, Industry, TemplateId

DocumentKind = Literal["resume", "cover_letter"]


class LengthBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_words: int
    max_words: int


class DocumentBrief(BaseModel):
    model_config = ConfigDict(frozen=True)

    document: DocumentKind
    template: TemplateId
    tone: str
    section_order: tuple[str, ...]
    talking_points: tuple[str, ...]
    strengths: tuple[str, ...]  # foreground
    gaps: tuple[str, ...]  # de-emphasize or reframe
    length: LengthBand
    source_text: str  # applicant's resume, trimmed to budget
    job_text: str  # job description, trimmed to budget
    target_industry: Industry | None = None
    experience_level: ExperienceLevel | None = None
