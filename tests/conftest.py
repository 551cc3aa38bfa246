"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from matchcraft.clients.llm_client import LLMClient, LLMResponse
from matchcraft.models.analysis import AnalysisResult
from matchcraft.models.brief import DocumentBrief
from matchcraft.models.request import TailoringRequest, TemplateId
from matchcraft.templates.loader import load_template


def render_resume(template_id: TemplateId | str = TemplateId.TECH) -> str:
    """A generated resume that carries every heading the template requires."""
    template = load_template(template_id)
    parts = []
    for label in template.section_order:
        parts.append(f"## {label}\n- Built Python services handling 2M requests a day")
    return "\n\n".join(parts)


COVER_LETTER = (
    "Dear Hiring Manager,\n\n"
    "I am applying for the Backend Engineer role. Over five years I have built Python "
    "and SQL services that handle millions of requests a day, and I would bring the same "
    "focus on reliability and measurable results to your team.\n\n"
    "Sincerely,\nJane Doe"
)


class FakeTextGenerator:
    """Scripted TextGenerator: returns canned documents and records every brief."""

    def __init__(self, resume: str | None = None, cover_letter: str = COVER_LETTER):
        self.resume = resume
        self.cover_letter = cover_letter
        self.briefs: list[DocumentBrief] = []

    async def generate(self, brief: DocumentBrief) -> str:
        self.briefs.append(brief)
        if brief.document == "resume":
            return self.resume if self.resume is not None else render_resume(brief.template)
        return self.cover_letter


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com | (555) 010-2000

SUMMARY
Backend engineer with 6 years of experience building APIs and data pipelines.

EXPERIENCE
- Acme Cloud (2021 - present), Senior Software Engineer
  - Built Python and Django REST APIs serving 2M requests a day
  - Cut PostgreSQL query latency 40% through indexing and caching with Redis
- Widget Labs (2018 - 2021), Software Engineer
  - Migrated services to Docker and AWS

SKILLS
- Python, Django, PostgreSQL, Redis, Docker, AWS, Git

EDUCATION
- B.S. Computer Science, State University
"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

About us
We are a cloud software platform for shipping teams.

Requirements
- 5+ years of backend development experience
- Strong Python and SQL skills
- Experience with Kubernetes and AWS

Nice to have
- Experience with Kafka
- Familiarity with Terraform

Benefits
- Remote-friendly, Python conference budget
"""


@pytest.fixture
def sample_request(sample_resume_text, sample_jd_text) -> TailoringRequest:
    return TailoringRequest(
        resume_text=sample_resume_text,
        job_description=sample_jd_text,
        template=TemplateId.TECH,
    )


@pytest.fixture
def sample_analysis() -> AnalysisResult:
    return AnalysisResult(
        match_score=72,
        ats_score=65,
        key_strengths=["Strong background in Python", "Strong background in AWS"],
        skill_gaps=["Build or highlight experience with Kubernetes (required)"],
        recommendations=["Address required qualifications explicitly: Kubernetes"],
        industry_fit="Technology",
    )


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="## Summary\nGenerated", input_tokens=100, output_tokens=50)
    )
    return client


@pytest.fixture
def make_generator():
    """Factory for scripted generators with custom output."""
    return FakeTextGenerator


@pytest.fixture
def tech_resume_markdown() -> str:
    return render_resume(TemplateId.TECH)
