"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UsageLog(BaseModel):
    """One tailoring or analysis run. Never holds resume or job-posting text."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    command: str  # "tailor" | "analyze"
    template: str
    target_industry: str | None = None
    experience_level: str | None = None
    industry_fit: str | None = None
    match_score: int | None = None
    ats_score: int | None = None
    elapsed_seconds: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    estimated_cost_usd: float = 0.0
    success: bool = True
    error_kind: str | None = None
