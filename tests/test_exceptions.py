"""Tests for the error hierarchy and user actions."""

import pytest

from matchcraft.exceptions import (
    ALERT,
    FIX_INPUT,
    RETRY,
    AnalysisFailure,
    PermanentProviderError,
    ProviderError,
    SynthesisFailure,
    TailoringError,
    TransientProviderError,
    ValidationError,
)


class TestUserActions:
    @pytest.mark.parametrize(
        "error, action",
        [
            (ValidationError("blank", field="resume_text"), FIX_INPUT),
            (AnalysisFailure("boom"), ALERT),
            (TransientProviderError("429"), RETRY),
            (PermanentProviderError("401"), ALERT),
            (SynthesisFailure("timeout"), RETRY),
            (SynthesisFailure("bad key", retryable=False), ALERT),
        ],
    )
    def test_action(self, error, action):
        assert isinstance(error, TailoringError)
        assert error.user_action == action

    def test_provider_hierarchy(self):
        assert issubclass(TransientProviderError, ProviderError)
        assert TransientProviderError("x").retryable is True
        assert PermanentProviderError("x").retryable is False

    def test_to_dict(self):
        error = ValidationError("Resume text is required", field="resume_text")
        assert error.to_dict() == {
            "kind": "validation_error",
            "message": "Resume text is required",
            "user_action": FIX_INPUT,
        }
        assert str(error) == "Resume text is required"
