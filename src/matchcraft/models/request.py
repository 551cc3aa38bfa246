"""Pydantic models for the tailoring request and its closed enumerations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TemplateId(str, Enum):
    EXECUTIVE = "executive"
    TECH = "tech"
    CREATIVE = "creative"
    ACADEMIC = "academic"


class Industry(str, Enum):
    TECHNOLOGY = "Technology"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    MARKETING = "Marketing"
    SALES = "Sales"
    ENGINEERING = "Engineering"
    DESIGN = "Design"
    CONSULTING = "Consulting"
    LEGAL = "Legal"
    MANUFACTURING = "Manufacturing"
    RETAIL = "Retail"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"

    @property
    def min_years(self) -> int:
        return _LEVEL_YEARS[self][0]

    @property
    def label(self) -> str:
        low, high = _LEVEL_YEARS[self]
        band = f"{low}+ years" if high is None else f"{low}-{high} years"
        return f"{self.value.title()} ({band})"

    @classmethod
    def from_years(cls, years: int) -> ExperienceLevel:
        for level in reversed(list(cls)):
            if years >= level.min_years:
                return level
        return cls.ENTRY


_LEVEL_YEARS: dict[ExperienceLevel, tuple[int, int | None]] = {
    ExperienceLevel.ENTRY: (0, 2),
    ExperienceLevel.MID: (3, 7),
    ExperienceLevel.SENIOR: (8, 15),
    ExperienceLevel.EXECUTIVE: (15, None),
}


class TailoringRequest(BaseModel):
    """One user action: the texts to tailor plus the chosen configuration."""

    model_config = ConfigDict(frozen=True)

    resume_text: str
    job_description: str
    template: TemplateId = TemplateId.EXECUTIVE
    target_industry: Industry | None = None
    experience_level: ExperienceLevel | None = None
