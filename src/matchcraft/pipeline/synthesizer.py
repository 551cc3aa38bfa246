"""Document Synthesizer - builds briefs and validates generated documents."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from matchcraft.config import SynthesisConfig
from matchcraft.exceptions import ProviderError, SynthesisFailure
from matchcraft.models.analysis import GENERAL_INDUSTRY, AnalysisResult
from matchcraft.models.brief import DocumentBrief, DocumentKind, LengthBand
from matchcraft.models.request import ExperienceLevel, TailoringRequest
from matchcraft.parsers.normalizer import heading_text, split_inline_label
from matchcraft.templates.loader import TemplateContract, load_template

logger = logging.getLogger(__name__)

RESUME_LENGTH: dict[ExperienceLevel, LengthBand] = {
    ExperienceLevel.ENTRY: LengthBand(min_words=300, max_words=450),
    ExperienceLevel.MID: LengthBand(min_words=450, max_words=650),
    ExperienceLevel.SENIOR: LengthBand(min_words=600, max_words=850),
    ExperienceLevel.EXECUTIVE: LengthBand(min_words=700, max_words=1000),
}
COVER_LETTER_LENGTH: dict[ExperienceLevel, LengthBand] = {
    ExperienceLevel.ENTRY: LengthBand(min_words=200, max_words=300),
    ExperienceLevel.MID: LengthBand(min_words=250, max_words=350),
    ExperienceLevel.SENIOR: LengthBand(min_words=300, max_words=400),
    ExperienceLevel.EXECUTIVE: LengthBand(min_words=300, max_words=400),
}
DEFAULT_LEVEL = ExperienceLevel.MID

LAYOUT_GUIDANCE = {
    "chronological": "Order experience reverse-chronologically and lead each role with its largest outcome",
    "skills_forward": "Lead with a grouped skills block, then show those skills applied in experience and projects",
    "portfolio_forward": "Lead with portfolio highlights and link each to the problem solved and the result",
}

MAX_BRIEF_STRENGTHS = 3
MAX_BRIEF_RECOMMENDATIONS = 3


class TextGenerator(Protocol):
    """Outbound text-generation capability: one document per call."""

    async def generate(self, brief: DocumentBrief) -> str: ...


class DocumentSynthesizer:
    """Hands structured briefs to a TextGenerator and accepts only usable output."""

    def __init__(self, generator: TextGenerator, config: SynthesisConfig | None = None):
        self.generator = generator
        self.config = config or SynthesisConfig()

    def build_brief(
        self,
        document: DocumentKind,
        request: TailoringRequest,
        analysis: AnalysisResult,
    ) -> DocumentBrief:
        template = load_template(request.template)
        level = request.experience_level or DEFAULT_LEVEL
        skills = [s.removeprefix("Strong background in ") for s in analysis.key_strengths]

        points: list[str] = []
        if document == "resume":
            points.append(LAYOUT_GUIDANCE[template.layout])
            if analysis.industry_fit and analysis.industry_fit != GENERAL_INDUSTRY:
                points.append(f"Position the summary for {analysis.industry_fit} roles")
        else:
            points.append("Name the role and lead with the strongest match to its requirements")
        points.extend(f"Show concrete results using {s}" for s in skills[:MAX_BRIEF_STRENGTHS])
        points.extend(analysis.recommendations[:MAX_BRIEF_RECOMMENDATIONS])

        return DocumentBrief(
            document=document,
            template=template.id,
            tone=template.tone,
            section_order=template.section_order if document == "resume" else (),
            talking_points=tuple(dict.fromkeys(points)),
            strengths=tuple(analysis.key_strengths),
            gaps=tuple(analysis.skill_gaps),
            length=(RESUME_LENGTH if document == "resume" else COVER_LETTER_LENGTH)[level],
            source_text=request.resume_text[: self.config.resume_text_budget],
            job_text=request.job_description[: self.config.job_text_budget],
            target_industry=request.target_industry,
            experience_level=request.experience_level,
        )

    async def synthesize(
        self,
        request: TailoringRequest,
        analysis: AnalysisResult,
    ) -> tuple[str, str]:
        """Generate (resume, cover letter). Both succeed or SynthesisFailure is raised."""
        template = load_template(request.template)
        resume = await self._generate(self.build_brief("resume", request, analysis))
        self.validate_resume(resume, template)
        cover_letter = await self._generate(self.build_brief("cover_letter", request, analysis))
        self.validate_cover_letter(cover_letter)
        return resume.strip(), cover_letter.strip()

    async def _generate(self, brief: DocumentBrief) -> str:
        label = brief.document.replace("_", " ")
        logger.info("Generating %s (template=%s)", label, brief.template.value)
        try:
            text = await asyncio.wait_for(
                self.generator.generate(brief), timeout=self.config.timeout
            )
        except asyncio.TimeoutError as exc:
            raise SynthesisFailure(
                f"{label} generation timed out after {self.config.timeout:g}s",
                document=brief.document,
                retryable=True,
            ) from exc
        except ProviderError as exc:
            raise SynthesisFailure(
                f"{label} generation failed: {exc.message}",
                document=brief.document,
                retryable=exc.retryable,
            ) from exc
        except Exception as exc:
            logger.error("Text generator raised unexpectedly", exc_info=True)
            raise SynthesisFailure(
                f"{label} generation failed: {exc}",
                document=brief.document,
                retryable=False,
            ) from exc

        if not isinstance(text, str) or not text.strip():
            raise SynthesisFailure(
                f"{label} generation returned empty output", document=brief.document
            )
        return text

    def validate_resume(self, text: str, template: TemplateContract) -> None:
        """Require a heading line for every required template section.

        A heading is a line whose text, once markdown markers and a trailing
        colon are removed, is exactly the section label ("## Experience",
        "**EXPERIENCE:**"), or a known label written inline ("Skills: Python").
        """
        found: set[str] = set()
        for line in text.splitlines():
            found.add(heading_text(line).rstrip(":").strip().lower())
            inline = split_inline_label(heading_text(line))
            if inline is not None:
                found.add(inline[0].lower())
        missing = [h for h in template.required_headings if h.lower() not in found]
        if missing:
            raise SynthesisFailure(
                f"resume is missing required sections: {', '.join(missing)}",
                document="resume",
            )

    def validate_cover_letter(self, text: str) -> None:
        words = len(text.split())
        if words < self.config.min_cover_letter_words:
            raise SynthesisFailure(
                f"cover letter too short ({words} words, "
                f"minimum {self.config.min_cover_letter_words})",
                document="cover_letter",
            )
