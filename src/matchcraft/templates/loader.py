"""Template catalogue: one structural contract per TemplateId."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict

from matchcraft.models.request import Industry, TemplateId

Layout = Literal["chronological", "skills_forward", "portfolio_forward"]


class TemplateSection(BaseModel):
    id: str
    label: str
    required: bool = True


class TemplateContract(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: TemplateId
    name: str
    description: str
    preview: str
    industries: list[Industry]
    layout: Layout
    tone: str
    sections: list[TemplateSection]

    @property
    def section_order(self) -> tuple[str, ...]:
        return tuple(s.label for s in self.sections)

    @property
    def required_headings(self) -> tuple[str, ...]:
        return tuple(s.label for s in self.sections if s.required)

    def fits(self, industry: Industry | None) -> bool:
        return industry is None or industry in self.industries


TEMPLATES_DIR = Path(__file__).parent


def load_template(template_id: TemplateId | str) -> TemplateContract:
    """Load the contract for a template id from the packaged YAML files."""
    try:
        tid = TemplateId(template_id)
    except ValueError:
        raise FileNotFoundError(f"Template not found: {template_id}") from None
    return _load(tid)


@lru_cache(maxsize=None)
def _load(tid: TemplateId) -> TemplateContract:
    path = TEMPLATES_DIR / f"{tid.value}.yaml"
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return TemplateContract(**data)


def list_templates() -> list[TemplateContract]:
    """Return every template contract in enumeration order."""
    return [load_template(tid) for tid in TemplateId]


def templates_for_industry(industry: Industry) -> list[TemplateContract]:
    return [t for t in list_templates() if industry in t.industries]
