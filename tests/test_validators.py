"""Tests for the general text validators."""

import pytest

from oulipo_engine.errors import InvalidConfigError
from oulipo_engine.schemas.results import ValidationConfig
from oulipo_engine.validators import (
    CharacterFrequencyConstraint,
    TextLengthConstraint,
    WordCountConstraint,
    check_character_frequency,
    validate_text_length,
    validate_with_config,
    validate_word_count,
)


class TestTextLength:
    """Tests for validate_text_length."""

    def test_within_bounds(self):
        result = validate_text_length("hello", 1, 10)
        assert result.success is True
        assert result.result == "Text length: 5 characters"

    def test_bounds_are_inclusive(self):
        assert validate_text_length("hello", 5, 5).success is True

    def test_too_short(self):
        result = validate_text_length("hi", 5)
        assert result.success is False
        violation = result.violations[0]
        assert (violation.position, violation.length) == (0, 2)
        assert "Text too short" in violation.issue

    def test_too_long_points_at_overflow(self):
        result = validate_text_length("hello world", 0, 5)
        violation = result.violations[0]
        assert (violation.position, violation.length) == (5, 6)
        assert violation.suggestion == "Remove 6 characters"

    def test_no_maximum(self):
        assert validate_text_length("x" * 10_000, 1).success is True

    def test_counts_code_points(self):
        result = validate_text_length("né", 0, 2)
        assert result.success is True
        assert result.metadata["current_length"] == 2


class TestWordCount:
    """Tests for validate_word_count."""

    def test_within_bounds(self):
        result = validate_word_count("one two three", 1, 3)
        assert result.success is True
        assert result.metadata["current_words"] == 3

    def test_too_many(self):
        result = validate_word_count("one two three", 1, 2)
        assert result.success is False
        assert "Too many words: 3" in result.violations[0].issue

    def test_too_few(self):
        result = validate_word_count("one", 2)
        assert result.violations[0].suggestion == "Add 1 more words"

    def test_empty_text_has_zero_words(self):
        assert validate_word_count("   ", 0, 0).success is True


class TestCharacterFrequency:
    """Tests for check_character_frequency."""

    def test_within_limit(self):
        result = check_character_frequency("Eerie", "e", 3)
        assert result.success is True
        assert result.metadata["frequency"] == 3

    def test_over_limit(self):
        result = check_character_frequency("Eerie", "e", 2)
        assert result.success is False
        assert "appears 3 times (maximum 2)" in result.violations[0].issue


class TestValidateWithConfig:
    """Tests for bound-driven validation."""

    def test_no_bounds_no_results(self):
        assert validate_with_config("anything", ValidationConfig()) == []

    def test_only_word_bounds(self):
        results = validate_with_config("one two three", ValidationConfig(max_words=2))
        assert len(results) == 1
        assert results[0].metadata["constraint_type"] == "word_count_validation"
        assert results[0].success is False

    def test_length_runs_before_words(self):
        config = ValidationConfig(min_length=1, max_length=100, min_words=1, max_words=10)
        results = validate_with_config("one two", config)
        assert [r.metadata["constraint_type"] for r in results] == [
            "length_validation",
            "word_count_validation",
        ]
        assert all(r.success for r in results)

    def test_missing_minimum_defaults_to_zero(self):
        results = validate_with_config("", ValidationConfig(max_length=5))
        assert results[0].success is True
        assert results[0].metadata["min_length"] == 0


class TestValidatorConstraints:
    """Tests for the registry-facing validator constraints."""

    def test_text_length_constraint(self):
        constraint = TextLengthConstraint(1, 3)
        assert constraint.check("abcd").success is False
        assert constraint.get_config() == {"min_length": 1, "max_length": 3}

    def test_word_count_constraint(self):
        assert WordCountConstraint(max_words=1).check("one two").success is False

    def test_character_frequency_constraint(self):
        assert CharacterFrequencyConstraint("a", 0).check("banana").success is False

    @pytest.mark.parametrize(
        "build",
        [
            lambda: TextLengthConstraint(5, 2),
            lambda: TextLengthConstraint(-1),
            lambda: WordCountConstraint(3, 1),
            lambda: CharacterFrequencyConstraint("ab", 1),
            lambda: CharacterFrequencyConstraint("a", -1),
        ],
    )
    def test_bad_config_rejected(self, build):
        with pytest.raises(InvalidConfigError):
            build()
