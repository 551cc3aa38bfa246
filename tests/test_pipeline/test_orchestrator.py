"""Tests for pipeline orchestrator."""

import asyncio

import pytest

from matchcraft.exceptions import AnalysisFailure, SynthesisFailure, ValidationError
from matchcraft.models.request import Industry, TailoringRequest
from matchcraft.models.result import TailoringResult
from matchcraft.pipeline.orchestrator import PipelineState, TailoringOrchestrator, tailor


class _ExplodingPolicy:
    def match_score(self, signals):
        raise ZeroDivisionError("bad policy")

    def ats_score(self, signals, resume):
        return 0


class _BlockingGenerator:
    def __init__(self):
        self.started = asyncio.Event()

    async def generate(self, brief):
        self.started.set()
        await asyncio.sleep(30)
        return ""


class TestValidation:
    @pytest.mark.parametrize(
        "resume, jd, field",
        [
            ("", "Python developer", "resume_text"),
            ("   \n\t", "Python developer", "resume_text"),
            ("Skills: Python", "", "job_description"),
            ("Skills: Python", "  ", "job_description"),
        ],
    )
    async def test_blank_inputs_rejected_before_generation(self, fake_generator, resume, jd, field):
        request = TailoringRequest(resume_text=resume, job_description=jd)
        with pytest.raises(ValidationError) as exc_info:
            await TailoringOrchestrator(fake_generator).run(request)
        assert exc_info.value.field == field
        assert exc_info.value.user_action == "fix_input"
        assert fake_generator.briefs == []

    def test_analyze_validates(self):
        request = TailoringRequest(resume_text="", job_description="Python")
        with pytest.raises(ValidationError):
            TailoringOrchestrator().analyze(request)


class TestOrchestrator:
    async def test_full_pipeline(self, fake_generator, sample_request):
        result = await TailoringOrchestrator(fake_generator).run(sample_request)

        assert isinstance(result, TailoringResult)
        assert "## Technical Skills" in result.resume
        assert result.cover_letter.startswith("Dear Hiring Manager")
        assert result.analysis.match_score == 40
        assert result.analysis.industry_fit == "Technology"
        assert result.metadata["template"] == "tech"
        assert result.metadata["elapsed_seconds"] >= 0
        assert len(fake_generator.briefs) == 2

    async def test_state_transitions(self, fake_generator, sample_request):
        seen = []
        await TailoringOrchestrator(fake_generator).run(
            sample_request, on_state=lambda state, detail: seen.append(state)
        )
        assert seen == [
            PipelineState.IDLE,
            PipelineState.VALIDATING,
            PipelineState.ANALYZING,
            PipelineState.SYNTHESIZING,
            PipelineState.DONE,
        ]

    async def test_failed_state_on_validation_error(self, fake_generator):
        seen = []
        request = TailoringRequest(resume_text="", job_description="x")
        with pytest.raises(ValidationError):
            await TailoringOrchestrator(fake_generator).run(
                request, on_state=lambda state, detail: seen.append(state)
            )
        assert seen[-1] is PipelineState.FAILED
        assert PipelineState.ANALYZING not in seen

    async def test_empty_resume_output_yields_no_result(self, make_generator, sample_request):
        generator = make_generator(resume="")
        seen = []
        with pytest.raises(SynthesisFailure):
            await TailoringOrchestrator(generator).run(
                sample_request, on_state=lambda state, detail: seen.append(state)
            )
        assert seen[-1] is PipelineState.FAILED
        assert PipelineState.DONE not in seen

    async def test_analysis_errors_are_wrapped(self, fake_generator, sample_request):
        orchestrator = TailoringOrchestrator(fake_generator, policy=_ExplodingPolicy())
        with pytest.raises(AnalysisFailure) as exc_info:
            await orchestrator.run(sample_request)
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
        assert exc_info.value.user_action == "alert"
        assert fake_generator.briefs == []

    async def test_deterministic_analysis(self, make_generator, sample_request):
        first = await TailoringOrchestrator(make_generator()).run(sample_request)
        second = await TailoringOrchestrator(make_generator()).run(sample_request)
        assert first.analysis == second.analysis

    async def test_runs_are_independent(self, fake_generator, sample_request, sample_jd_text):
        orchestrator = TailoringOrchestrator(fake_generator)
        first = await orchestrator.run(sample_request)
        other = TailoringRequest(resume_text="SKILLS\n- Kafka, Terraform", job_description=sample_jd_text)
        await orchestrator.run(other)
        again = await orchestrator.run(sample_request)
        assert again.analysis == first.analysis

    async def test_industry_alignment(self, fake_generator, sample_request):
        request = sample_request.model_copy(update={"target_industry": Industry.FINANCE})
        result = await TailoringOrchestrator(fake_generator).run(request)
        assert any("Finance-specific terminology" in r for r in result.analysis.recommendations)
        assert fake_generator.briefs[0].target_industry is Industry.FINANCE

    async def test_cancellation_reports_failed(self, sample_request):
        generator = _BlockingGenerator()
        seen = []
        task = asyncio.create_task(
            TailoringOrchestrator(generator).run(
                sample_request, on_state=lambda state, detail: seen.append(state)
            )
        )
        await generator.started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert seen[-1] is PipelineState.FAILED

    async def test_run_requires_generator(self, sample_request):
        with pytest.raises(TypeError):
            await TailoringOrchestrator().run(sample_request)


class TestAnalyzeOnly:
    def test_analyze(self, sample_request):
        analysis = TailoringOrchestrator().analyze(sample_request)
        assert analysis.match_score == 40
        assert analysis.ats_score == 43


class TestTailorEntryPoint:
    def test_sync_tailor(self, fake_generator, sample_request):
        result = tailor(sample_request, fake_generator)
        assert isinstance(result, TailoringResult)
        assert result.resume
        assert result.cover_letter
