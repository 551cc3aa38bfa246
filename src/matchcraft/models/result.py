"""Pydantic model for the terminal output of a tailoring run."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from matchcraft.models.analysis import AnalysisResult


class TailoringResult(BaseModel):
    resume: str
    cover_letter: str
    analysis: AnalysisResult
    metadata: dict[str, Any] = Field(default_factory=dict)  # template, elapsed seconds, states
