"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-sonnet-4-5-20250929"
    max_retries: int = 3
    timeout: int = 60
    max_tokens: int = 4096
    temperature: float = 0.3

    def __post_init__(self) -> None:
        _check_range("max_retries", self.max_retries, 1, 10)
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("temperature", self.temperature, 0.0, 1.0)


@dataclass(frozen=True)
class ScoringConfig:
    neutral_match_score: int = 50
    min_resume_chars: int = 200
    short_resume_penalty: int = 15
    no_headings_penalty: int = 10
    table_layout_penalty: int = 5
    ats_threshold: int = 70

    def __post_init__(self) -> None:
        _check_range("neutral_match_score", self.neutral_match_score, 0, 100)
        _check_range("ats_threshold", self.ats_threshold, 0, 100)
        for name in ("short_resume_penalty", "no_headings_penalty", "table_layout_penalty"):
            _check_range(name, getattr(self, name), 0, 100)


@dataclass(frozen=True)
class AnalysisConfig:
    strength_cap: int = 6
    gap_cap: int = 6

    def __post_init__(self) -> None:
        _check_range("strength_cap", self.strength_cap, 1, 20)
        _check_range("gap_cap", self.gap_cap, 1, 20)


@dataclass(frozen=True)
class SynthesisConfig:
    timeout: float = 60.0
    resume_text_budget: int = 12000
    job_text_budget: int = 8000
    min_cover_letter_words: int = 30

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)


@dataclass(frozen=True)
class UsageConfig:
    enabled: bool = True
    db_path: str = "~/.matchcraft/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    synthesis: SynthesisConfig = field(default_factory=SynthesisConfig)
    usage: UsageConfig = field(default_factory=UsageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        scoring=ScoringConfig(**raw.get("scoring", {})),
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        synthesis=SynthesisConfig(**raw.get("synthesis", {})),
        usage=UsageConfig(**raw.get("usage", {})),
    )
