"""
Tests for skill normalization, fuzzy matching and extraction.
"""

import pytest

from talentmatch.matching.skills import (
    DEFAULT_VOCABULARY,
    SkillVocabulary,
    extract_skills,
    normalize_skill,
    skills_match,
)

from .factories import make_candidate


class TestNormalizeSkill:
    """Test skill normalization."""

    @pytest.mark.parametrize("raw, expected", [
        ("  Node.js ", "nodejs"),
        ("Machine   Learning", "machine learning"),
        ("CI-CD_pipelines", "cicdpipelines"),
        ("TypeScript", "typescript"),
        ("", ""),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_skill(raw) == expected


class TestSkillsMatch:
    """Test fuzzy skill comparison."""

    def test_exact_after_normalization(self):
        assert skills_match("node.js", "NodeJS")

    def test_substring_either_direction(self):
        assert skills_match("React", "React.js")
        assert skills_match("React.js", "React")

    def test_substring_favours_recall(self):
        """Short terms match inside longer ones."""
        assert skills_match("Java", "JavaScript")

    def test_unrelated_skills(self):
        assert not skills_match("Python", "Rust")


class TestSkillVocabulary:
    """Test vocabulary extraction."""

    def test_extracts_in_vocabulary_order(self):
        skills = DEFAULT_VOCABULARY.extract("React and TypeScript engineer")
        assert skills == ["TypeScript", "React"]

    def test_case_insensitive(self):
        assert DEFAULT_VOCABULARY.extract("PYTHON and DOCKER") == ["Python", "Docker"]

    def test_empty_text(self):
        assert DEFAULT_VOCABULARY.extract("") == []

    def test_from_terms_drops_blanks_and_repeats(self):
        vocabulary = SkillVocabulary.from_terms(["Rust", " ", "rust", "Elixir "])
        assert vocabulary.terms == ("Rust", "Elixir")

    def test_custom_vocabulary(self):
        vocabulary = SkillVocabulary.from_terms(["Elixir", "Phoenix"])
        assert vocabulary.extract("Phoenix LiveView and Elixir") == ["Elixir", "Phoenix"]


class TestExtractSkills:
    """Test candidate skill extraction."""

    def test_uses_headline_and_summary(self):
        candidate = make_candidate(headline="Python developer", summary="Ships on AWS")
        assert extract_skills(candidate) == ["Python", "AWS"]

    def test_missing_text(self):
        assert extract_skills(make_candidate()) == []

    def test_injected_vocabulary(self):
        candidate = make_candidate(headline="Elixir developer")
        vocabulary = SkillVocabulary.from_terms(["Elixir"])
        assert extract_skills(candidate, vocabulary) == ["Elixir"]
        assert extract_skills(candidate) == []
