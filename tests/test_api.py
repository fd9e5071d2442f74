"""Tests for the HTTP API."""

from __future__ import annotations

from fastapi.testclient import TestClient

from oulipo_engine.config import get_settings, reset_settings
from oulipo_engine.main import app

client = TestClient(app)


def test_healthz():
    """Test the /healthz endpoint."""
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_version():
    """Test the /version endpoint."""
    response = client.get("/version")
    assert response.status_code == 200
    assert isinstance(response.json()["version"], str)


def test_title_comes_from_settings():
    """Test the OpenAPI title uses the configured app name."""
    response = client.get("/openapi.json")
    assert response.json()["info"]["title"] == get_settings().app_name


class TestConstraintRoutes:
    """Tests for the single-rule endpoints."""

    def test_lipogram_pass(self):
        response = client.post("/oulipo/lipogram", json={"text": "A cat sat", "forbidden_letter": "e"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["violations"] == []

    def test_lipogram_fail_is_still_200(self):
        response = client.post("/oulipo/lipogram", json={"text": "The end"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert [v["position"] for v in data["violations"]] == [2, 4]

    def test_lipogram_letter_must_be_single_char(self):
        response = client.post("/oulipo/lipogram", json={"text": "x", "forbidden_letter": "ab"})
        assert response.status_code == 422

    def test_palindrome(self):
        response = client.post("/oulipo/palindrome", json={"text": "Never odd or even"})
        assert response.json()["success"] is True

    def test_snowball(self):
        response = client.post("/oulipo/snowball", json={"text": "I am the best"})
        assert response.json()["metadata"]["actual_lengths"] == [1, 2, 3, 4]

    def test_prisoners(self):
        response = client.post("/oulipo/prisoners", json={"text": "cab"})
        assert response.json()["success"] is False

    def test_univocalic(self):
        response = client.post("/oulipo/univocalic", json={"text": "A cat sat", "vowel": "a"})
        assert response.json()["success"] is True

    def test_univocalic_empty_vowel(self):
        response = client.post("/oulipo/univocalic", json={"text": "A cat", "vowel": ""})
        assert response.status_code == 200
        assert response.json()["violations"][0]["issue"] == "Invalid vowel parameter"

    def test_univocalic_invalid_vowel_is_400(self):
        response = client.post("/oulipo/univocalic", json={"text": "A cat", "vowel": "x"})
        assert response.status_code == 400
        error = response.json()["detail"]["error"]
        assert error["code"] == "INVALID_CONFIG"
        assert "not a valid vowel" in error["message"]

    def test_sestina(self, sestina_text, end_words):
        response = client.post(
            "/oulipo/sestina", json={"text": sestina_text, "end_words": end_words}
        )
        assert response.json()["success"] is True

    def test_sestina_wrong_word_count(self, sestina_text, end_words):
        response = client.post(
            "/oulipo/sestina", json={"text": sestina_text, "end_words": end_words[:5]}
        )
        assert response.status_code == 200
        assert response.json()["metadata"]["provided_end_words"] == 5

    def test_n_plus_7_default_offset(self):
        response = client.post("/oulipo/n-plus-7", json={"text": "the fox"})
        data = response.json()
        assert data["result"] == "dog through"
        assert data["metadata"]["offset"] == 7

    def test_n_plus_7_custom_offset(self):
        response = client.post("/oulipo/n-plus-7", json={"text": "the", "offset": 1})
        assert response.json()["result"] == "quick"


class TestValidatorRoutes:
    """Tests for the validator endpoints."""

    def test_length(self):
        response = client.post(
            "/oulipo/validate/length", json={"text": "hello", "min_length": 10}
        )
        assert response.json()["success"] is False

    def test_words(self):
        response = client.post(
            "/oulipo/validate/words", json={"text": "one two", "max_words": 5}
        )
        assert response.json()["success"] is True

    def test_character_frequency(self):
        response = client.post(
            "/oulipo/validate/character-frequency",
            json={"text": "banana", "target_char": "a", "max_frequency": 3},
        )
        assert response.json()["metadata"]["frequency"] == 3


class TestTextLimit:
    """Tests for the configured text size limit."""

    def test_oversized_text_is_413(self, fresh_settings):
        fresh_settings.setenv("OULIPO_MAX_TEXT_LENGTH", "10")
        reset_settings()

        response = client.post("/oulipo/palindrome", json={"text": "x" * 11})

        assert response.status_code == 413
        assert response.json()["detail"]["error"]["code"] == "TEXT_TOO_LARGE"

    def test_text_at_limit_is_accepted(self, fresh_settings):
        fresh_settings.setenv("OULIPO_MAX_TEXT_LENGTH", "10")
        reset_settings()

        response = client.post("/oulipo/palindrome", json={"text": "x" * 10})

        assert response.status_code == 200


class TestSuggestionAndGeneratorRoutes:
    """Tests for suggestion and generator endpoints."""

    def test_lipogram_suggestions(self):
        response = client.post(
            "/oulipo/suggestions/lipogram", json={"text": "the cat", "forbidden_letter": "e"}
        )
        assert response.json() == {
            "suggestions": ["Replace 'the' with a word that doesn't contain 'e'"]
        }

    def test_palindrome_suggestions(self):
        response = client.post("/oulipo/suggestions/palindrome", json={"text": "abc"})
        assert len(response.json()["suggestions"]) == 4

    def test_haiku(self):
        response = client.post("/oulipo/generate/haiku", json={"theme": "love"})
        data = response.json()
        assert data["theme"] == "love"
        assert data["haiku"].startswith("Two hearts")

    def test_haiku_default_theme(self):
        response = client.post("/oulipo/generate/haiku", json={})
        assert response.json()["theme"] == "nature"

    def test_anagrams(self):
        response = client.post("/oulipo/generate/anagrams", json={"word": "stop", "max_results": 2})
        assert response.json()["anagrams"] == ["tops", "opst"]

    def test_anagrams_without_letters_is_400(self):
        response = client.post("/oulipo/generate/anagrams", json={"word": "123"})
        assert response.status_code == 400
        assert response.json()["detail"]["error"]["code"] == "GENERATION_FAILED"

    def test_combinatorial(self):
        response = client.post(
            "/oulipo/generate/combinatorial",
            json={"word_sets": [["a", "b"], ["c", "d"]], "pattern": "chiasmus"},
        )
        assert response.json()["poem"] == "a b\nd c"

    def test_anagram_check(self):
        response = client.post(
            "/oulipo/anagram-check", json={"word1": "listen", "word2": "silent"}
        )
        assert response.json() == {"is_anagram": True}


class TestRegistryRoutes:
    """Tests for constraint introspection."""

    def test_list_constraints(self):
        response = client.get("/oulipo/constraints")
        assert response.status_code == 200
        names = [item["name"] for item in response.json()]
        assert names[0] == "univocalic"
        assert len(names) == 9

    def test_get_constraint(self):
        response = client.get("/oulipo/constraints/sestina")
        data = response.json()
        assert data["name"] == "sestina"
        assert data["schema"]["required"] == ["end_words"]

    def test_unknown_constraint_is_404(self):
        response = client.get("/oulipo/constraints/nonexistent")
        assert response.status_code == 404
        assert response.json()["detail"]["error"]["code"] == "UNKNOWN_CONSTRAINT"


class TestWorkflowRoutes:
    """Tests for workflow and preset endpoints."""

    def test_build_workflow(self):
        response = client.post(
            "/oulipo/workflows",
            json={"constraints": [{"type": "univocalic", "vowel": "a"}, {"type": "words", "max": 20}]},
        )
        data = response.json()
        assert data["constraints"] == [{"name": "univocalic", "config": {"allowed_vowel": "a"}}]
        assert data["validation_config"]["max_words"] == 20

    def test_build_workflow_missing_type_is_400(self):
        response = client.post("/oulipo/workflows", json={"constraints": [{"vowel": "a"}]})
        assert response.status_code == 400

    def test_build_workflow_bad_bound_is_400(self):
        response = client.post("/oulipo/workflows", json={"constraints": [{"type": "length", "min": -1}]})
        assert response.status_code == 400
        assert response.json()["detail"]["error"]["code"] == "INVALID_CONFIG"

    def test_check_workflow(self):
        response = client.post(
            "/oulipo/workflows/check",
            json={
                "text": "A cat and a rat ran fast",
                "constraints": [{"type": "univocalic", "vowel": "a"}, {"type": "words", "min": 3}],
            },
        )
        data = response.json()
        assert data["success"] is True
        assert data["summary"] == "✅ All 2 constraints satisfied"

    def test_check_workflow_unknown_constraint(self):
        response = client.post(
            "/oulipo/workflows/check",
            json={"text": "anything", "constraints": [{"type": "nonexistent"}]},
        )
        data = response.json()
        assert response.status_code == 200
        assert data["success"] is False
        assert data["constraint_results"][0]["metadata"]["error"] == "unknown_constraint"

    def test_preset(self):
        response = client.post(
            "/oulipo/presets/minimal/check", json={"text": "A short text with words"}
        )
        assert response.json()["success"] is True

    def test_unknown_preset_is_400(self):
        response = client.post("/oulipo/presets/baroque/check", json={"text": "text"})
        assert response.status_code == 400
        assert response.json()["detail"]["error"]["code"] == "UNKNOWN_PRESET"
