"""Tests for text cleanup and section segmentation."""

import pytest

from matchcraft.parsers.normalizer import (
    clean_text,
    is_heading,
    normalize,
    split_inline_label,
)


class TestCleanText:
    def test_strips_bom_and_zero_width(self):
        assert clean_text("\ufeffPy\u200bthon") == "Python"

    def test_normalizes_line_endings(self):
        assert clean_text("a\r\nb\rc") == "a\nb\nc"

    def test_normalizes_bullets(self):
        assert clean_text("\u2022 Python\n\u25aa SQL") == "- Python\n- SQL"

    def test_removes_emoji_icons(self):
        assert clean_text("\U0001f4e7 jane@example.com") == "jane@example.com"

    def test_collapses_spaces_and_blank_lines(self):
        assert clean_text("a    b\n\n\n\n\nc") == "a b\n\nc"


class TestIsHeading:
    @pytest.mark.parametrize(
        "line",
        ["SKILLS", "Experience", "Work Experience:", "## Education", "**Core Competencies**",
         "Nice to have", "Head of Product and Design"],
    )
    def test_headings(self, line):
        assert is_heading(line)

    @pytest.mark.parametrize(
        "line",
        ["- Python", "Built APIs serving 2M requests.", "", "worked on things",
         "A very long line that clearly is a sentence and not a heading at all"],
    )
    def test_not_headings(self, line):
        assert not is_heading(line)

    @pytest.mark.parametrize("line", ["Python, Java, Docker", "Kubernetes", "AWS", "Python and SQL"])
    def test_plain_skill_lines_are_not_headings(self, line):
        assert not is_heading(line)

    def test_skill_named_section_label_is_still_a_heading(self):
        assert is_heading("Publications")

    def test_skill_lines_stay_in_their_section(self):
        result = normalize("Requirements\nPython\nAWS\n\nNice to have\nKafka, Terraform")
        assert result.headings == ["Requirements", "Nice to have"]
        assert result.sections[0].bullets == ("Python", "AWS")
        assert result.sections[1].bullets == ("Kafka, Terraform",)


class TestSplitInlineLabel:
    def test_known_label(self):
        assert split_inline_label("Skills: Python, SQL") == ("Skills", "Python, SQL")

    def test_unknown_label(self):
        assert split_inline_label("Note: call me") is None

    def test_bullet_is_not_label(self):
        assert split_inline_label("- Skills: Python") is None


class TestNormalize:
    def test_sections_in_order(self):
        result = normalize("SUMMARY\nBackend engineer\n\nSKILLS\n- Python\n- SQL")
        assert result.headings == ["SUMMARY", "SKILLS"]
        assert result.sections[1].bullets == ("Python", "SQL")

    def test_leading_lines_go_to_unnamed_section(self):
        result = normalize("jane@example.com\nSkills\n- Python")
        assert result.sections[0].heading == ""
        assert result.sections[0].bullets == ("jane@example.com",)

    def test_inline_label(self):
        result = normalize("Skills: Python, SQL. 5 years experience.")
        assert len(result.sections) == 1
        assert result.sections[0].heading == "Skills"
        assert result.sections[0].bullets == ("Python, SQL. 5 years experience.",)

    def test_unstructured_text_is_one_section(self):
        text = "just some words without any structure at all"
        result = normalize(text)
        assert len(result.sections) == 1
        assert result.sections[0].heading == ""
        assert result.sections[0].bullets == (text,)

    @pytest.mark.parametrize("text", ["", "   \n\t  ", None])
    def test_never_raises_on_blank(self, text):
        result = normalize(text)
        assert result.headings == []

    def test_match_text_lowercase(self):
        result = normalize("SKILLS\n- Python")
        assert result.match_text == "skills\npython"

    def test_keeps_raw_text(self):
        text = "SKILLS\n- Python"
        assert normalize(text).raw_text == text
