"""Document Writer - LLM-backed text generator that turns a brief into prose."""

from __future__ import annotations

from matchcraft.clients.llm_client import DEFAULT_MODEL, LLMClient
from matchcraft.models.brief import DocumentBrief

RESUME_SYSTEM_PROMPT = """\
You are a professional resume writer. You rewrite an applicant's resume so it targets one job posting.

Rules:
1. Use only facts present in the applicant's original resume. Never invent employers, titles, dates, degrees or numbers.
2. Follow the section order you are given exactly, and write each section heading on its own line as a Markdown "## " heading.
3. Foreground the listed strengths; reframe or de-emphasize the listed gaps rather than claiming them.
4. Prefer measurable outcomes ("cut latency 40%") over duties ("responsible for latency").
5. Mirror the job posting's terminology where the applicant's experience supports it.
6. Respond with the resume in Markdown only, no commentary."""

COVER_LETTER_SYSTEM_PROMPT = """\
You are a professional cover letter writer. You write a one-page cover letter for one job posting.

Rules:
1. Use only facts present in the applicant's resume. Never invent experience.
2. Open with the role and a one-sentence value proposition, give two or three evidence paragraphs built on the talking points, and close with a call to action.
3. Address gaps honestly as areas of active growth, never as claimed expertise.
4. Respond with the letter text only, no commentary."""


class DocumentWriter:
    """TextGenerator implementation on top of LLMClient."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        *,
        temperature: float = 0.3,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, brief: DocumentBrief) -> str:
        """Generate one document for the brief and return its raw text."""
        system = RESUME_SYSTEM_PROMPT if brief.document == "resume" else COVER_LETTER_SYSTEM_PROMPT
        response = await self.llm.generate(
            prompt=format_brief(brief),
            system=system,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return response.text


def format_brief(brief: DocumentBrief) -> str:
    """Render a brief as the user prompt."""
    kind = "resume" if brief.document == "resume" else "cover letter"
    parts = [f"Write a tailored {kind}."]
    parts.append(f"\nTemplate: {brief.template.value}")
    parts.append(f"Tone: {brief.tone}")
    parts.append(f"Length: {brief.length.min_words}-{brief.length.max_words} words")
    if brief.experience_level is not None:
        parts.append(f"Experience level: {brief.experience_level.label}")
    if brief.target_industry is not None:
        parts.append(f"Target industry: {brief.target_industry.value}")

    if brief.section_order:
        parts.append("\n## Section order (use these exact headings)")
        for i, heading in enumerate(brief.section_order, 1):
            parts.append(f"{i}. {heading}")

    parts.append("\n## Talking points (in priority order)")
    for point in brief.talking_points:
        parts.append(f"- {point}")

    if brief.strengths:
        parts.append("\n## Strengths to foreground")
        for s in brief.strengths:
            parts.append(f"- {s}")

    if brief.gaps:
        parts.append("\n## Gaps to reframe or de-emphasize")
        for g in brief.gaps:
            parts.append(f"- {g}")

    parts.append(f"\n## Job posting\n{brief.job_text}")
    parts.append(f"\n## Applicant's original resume\n{brief.source_text}")
    return "\n".join(parts)
