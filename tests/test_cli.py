"""Tests for the command line interface."""

from typer.testing import CliRunner

from oulipo_engine.cli import app

runner = CliRunner()


class TestCheckCommand:
    """Tests for `oulipo check`."""

    def test_passing_check_exits_zero(self):
        result = runner.invoke(app, ["check", "lipogram", "A cat sat", "--letter", "e"])
        assert result.exit_code == 0
        assert "Passed" in result.output

    def test_failing_check_exits_one(self):
        result = runner.invoke(app, ["check", "lipogram", "The end"])
        assert result.exit_code == 1
        assert "Violations" in result.output

    def test_univocalic_requires_vowel(self):
        result = runner.invoke(app, ["check", "univocalic", "A cat"])
        assert result.exit_code == 2
        assert "INVALID_CONFIG" in result.output

    def test_univocalic(self):
        result = runner.invoke(app, ["check", "univocalic", "A cat sat", "--vowel", "a"])
        assert result.exit_code == 0

    def test_sestina_end_words(self, sestina_text, end_words):
        args = ["check", "sestina", sestina_text]
        for word in end_words:
            args += ["--end-word", word]
        result = runner.invoke(app, args)
        assert result.exit_code == 0

    def test_text_from_stdin(self):
        result = runner.invoke(app, ["check", "palindrome", "-"], input="racecar\n")
        assert result.exit_code == 0

    def test_registry_constraint_with_config(self):
        result = runner.invoke(
            app, ["check", "text_length", "hello", "--config", '{"max_length": 3}']
        )
        assert result.exit_code == 1

    def test_bad_json_config(self):
        result = runner.invoke(app, ["check", "text_length", "hello", "--config", "{oops"])
        assert result.exit_code == 2

    def test_unknown_rule(self):
        result = runner.invoke(app, ["check", "nonexistent", "hello"])
        assert result.exit_code == 2
        assert "Unknown constraint" in result.output


class TestOtherCommands:
    """Tests for transform, constraints, preset, haiku and version."""

    def test_transform(self):
        result = runner.invoke(app, ["transform", "the fox"])
        assert result.exit_code == 0
        assert "dog through" in result.output
        assert "N+7" in result.output

    def test_transform_offset(self):
        result = runner.invoke(app, ["transform", "the", "--offset", "1"])
        assert "quick" in result.output

    def test_constraints(self):
        result = runner.invoke(app, ["constraints"])
        assert result.exit_code == 0
        assert "univocalic" in result.output
        assert "sestina" in result.output

    def test_preset_pass(self):
        result = runner.invoke(app, ["preset", "minimal", "A short text with words"])
        assert result.exit_code == 0
        assert "All 2 constraints satisfied" in result.output

    def test_preset_fail(self):
        result = runner.invoke(app, ["preset", "strict", "Too short"])
        assert result.exit_code == 1

    def test_unknown_preset(self):
        result = runner.invoke(app, ["preset", "baroque", "text"])
        assert result.exit_code == 2
        assert "UNKNOWN_PRESET" in result.output

    def test_haiku(self):
        result = runner.invoke(app, ["haiku", "--theme", "love"])
        assert result.exit_code == 0
        assert "Two hearts" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Oulipo Engine v" in result.output
