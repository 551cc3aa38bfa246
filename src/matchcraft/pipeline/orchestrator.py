"""Main pipeline orchestrator - validation, analysis and synthesis in order."""

from __future__ import annotations

import asyncio
import logging
import time
from enum import Enum
from typing import Callable

from matchcraft.config import AppConfig
from matchcraft.exceptions import AnalysisFailure, TailoringError, ValidationError
from matchcraft.extraction.signals import build_signals, extract_job, extract_resume
from matchcraft.extraction.skill_dictionary import DEFAULT_DICTIONARY, SkillDictionary
from matchcraft.models.analysis import AnalysisResult
from matchcraft.models.request import TailoringRequest
from matchcraft.models.result import TailoringResult
from matchcraft.pipeline.analyzer import GapAnalyzer
from matchcraft.pipeline.synthesizer import DocumentSynthesizer, TextGenerator
from matchcraft.scoring.scorer import DefaultScoringPolicy, ScoringPolicy

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ANALYZING = "analyzing"
    SYNTHESIZING = "synthesizing"
    DONE = "done"
    FAILED = "failed"


StateCallback = Callable[[PipelineState, str], None]


def validate_request(request: TailoringRequest) -> None:
    """Reject blank inputs before any stage runs."""
    if not request.resume_text or not request.resume_text.strip():
        raise ValidationError("Resume text is required", field="resume_text")
    if not request.job_description or not request.job_description.strip():
        raise ValidationError("Job description is required", field="job_description")


class TailoringOrchestrator:
    """Runs one tailoring request end to end.

    Each call to ``run`` is independent: nothing computed for one request is
    kept for the next. Either both documents come back or a TailoringError is
    raised.
    """

    def __init__(
        self,
        generator: TextGenerator | None = None,
        *,
        config: AppConfig | None = None,
        policy: ScoringPolicy | None = None,
        dictionary: SkillDictionary = DEFAULT_DICTIONARY,
    ):
        self.config = config or AppConfig()
        self.policy = policy or DefaultScoringPolicy(self.config.scoring)
        self.dictionary = dictionary
        self.analyzer = GapAnalyzer(self.config.analysis, self.config.scoring)
        self.synthesizer = (
            DocumentSynthesizer(generator, self.config.synthesis) if generator is not None else None
        )

    def analyze(self, request: TailoringRequest) -> AnalysisResult:
        """Run the non-generative stages only."""
        validate_request(request)
        return self._analyze(request)

    def _analyze(self, request: TailoringRequest) -> AnalysisResult:
        try:
            resume = extract_resume(request.resume_text, self.dictionary)
            job = extract_job(request.job_description, self.dictionary)
            signals = build_signals(resume, job, self.dictionary)
            match_score = self.policy.match_score(signals)
            ats_score = self.policy.ats_score(signals, resume)
            return self.analyzer.analyze(
                signals, resume, job, request,
                match_score=match_score,
                ats_score=ats_score,
            )
        except TailoringError:
            raise
        except Exception as exc:
            logger.error("Analysis stage failed", exc_info=True)
            raise AnalysisFailure(f"Analysis failed: {exc}") from exc

    async def run(
        self,
        request: TailoringRequest,
        *,
        on_state: StateCallback | None = None,
    ) -> TailoringResult:
        """Run the full pipeline.

        Args:
            request: The resume, job description and presentation choices.
            on_state: Optional callback(state, detail) invoked on every
                state transition.
        """
        if self.synthesizer is None:
            raise TypeError("TailoringOrchestrator.run requires a text generator")

        start = time.monotonic()
        states: list[str] = []

        def _notify(state: PipelineState, detail: str = ""):
            states.append(state.value)
            logger.debug("State %s %s", state.value, detail)
            if on_state:
                on_state(state, detail)

        _notify(PipelineState.IDLE)
        try:
            _notify(PipelineState.VALIDATING, "Checking inputs")
            validate_request(request)

            _notify(PipelineState.ANALYZING, "Scoring resume against job description")
            analysis = self._analyze(request)

            _notify(
                PipelineState.SYNTHESIZING,
                f"Writing documents (match {analysis.match_score}, ATS {analysis.ats_score})",
            )
            resume, cover_letter = await self.synthesizer.synthesize(request, analysis)
        except TailoringError as exc:
            _notify(PipelineState.FAILED, exc.message)
            raise
        except asyncio.CancelledError:
            _notify(PipelineState.FAILED, "cancelled")
            raise

        elapsed = time.monotonic() - start
        _notify(PipelineState.DONE, f"Done in {elapsed:.1f}s")

        return TailoringResult(
            resume=resume,
            cover_letter=cover_letter,
            analysis=analysis,
            metadata={
                "template": request.template.value,
                "elapsed_seconds": round(elapsed, 3),
                "states": states,
            },
        )


def tailor(
    request: TailoringRequest,
    generator: TextGenerator,
    *,
    config: AppConfig | None = None,
    on_state: StateCallback | None = None,
) -> TailoringResult:
    """Synchronous entry point: run one request to completion."""
    orchestrator = TailoringOrchestrator(generator, config=config)
    return asyncio.run(orchestrator.run(request, on_state=on_state))
