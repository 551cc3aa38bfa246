"""Tests for config loading."""

import pytest

from matchcraft.config import AppConfig, LLMConfig, UsageConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-sonnet-4-5-20250929"
        assert config.scoring.neutral_match_score == 50
        assert config.analysis.strength_cap == 6
        assert config.synthesis.timeout == 60.0

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config == AppConfig()

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  model: test-model\nscoring:\n  ats_threshold: 80\n"
        )
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.scoring.ats_threshold == 80
        # Defaults for unspecified
        assert config.scoring.neutral_match_score == 50
        assert config.synthesis.min_cover_letter_words == 30

    def test_empty_yaml_gives_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_usage_resolved_path(self):
        usage = UsageConfig(db_path="~/test.db")
        assert "~" not in str(usage.resolved_db_path)
        assert usage.resolved_db_path.name == "test.db"

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"
