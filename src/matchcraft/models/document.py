"""Pydantic models for normalized and extracted resume / job-posting text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from matchcraft.models.request import ExperienceLevel, Industry


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str  # "" for the unnamed leading section
    bullets: tuple[str, ...] = ()

    @property
    def tokens(self) -> tuple[str, ...]:
        """Lower-cased bullets, used only for matching."""
        return tuple(b.lower() for b in self.bullets)


class NormalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    sections: tuple[Section, ...]

    @property
    def headings(self) -> list[str]:
        return [s.heading for s in self.sections if s.heading]

    @property
    def match_text(self) -> str:
        """Lower-cased view of headings and bullets, one per line."""
        lines: list[str] = []
        for s in self.sections:
            if s.heading:
                lines.append(s.heading.lower())
            lines.extend(s.tokens)
        return "\n".join(lines)


class ResumeDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    sections: tuple[Section, ...]
    skills: frozenset[str]
    experience_years: int | None = None

    @property
    def headings(self) -> list[str]:
        return [s.heading for s in self.sections if s.heading]


class JobPosting(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    sections: tuple[Section, ...]
    required: frozenset[str]
    preferred: frozenset[str]
    seniority: ExperienceLevel | None = None
    industry: Industry | None = None
    required_years: int | None = None
    title: str | None = None
