# =============================================================================
# tests/test_seed.py - Seed Loader Tests
# =============================================================================
# Tests for lib/seed.py and seeding at application startup.
#
# Run with: poetry run pytest tests/test_seed.py -v
# =============================================================================

import json
import logging

import pytest
from fastapi.testclient import TestClient

from app.config import DEFAULT_SEED_FILE, settings
from app.main import app
from core.models import QuestionId
from lib.seed import SeedLoadError, load_seed_questions


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadSeedQuestions:
    """Tests for load_seed_questions."""

    def test_bundled_seed(self):
        questions = load_seed_questions(DEFAULT_SEED_FILE)

        assert questions
        assert questions[0].id == QuestionId("1")
        assert questions[0].title == "First Question"

    def test_mapping_document(self, tmp_path):
        path = write_json(tmp_path / "seed.json", {
            "a": {"id": "a", "title": "T", "content": "C", "tags": ["x"]},
            "b": {"id": "b", "title": "T", "content": "C"},
        })

        questions = load_seed_questions(path)

        assert [str(q.id) for q in questions] == ["a", "b"]
        assert questions[1].tags is None

    def test_key_mismatch_uses_embedded_id(self, tmp_path):
        path = write_json(tmp_path / "seed.json", {
            "key": {"id": "real", "title": "T", "content": "C"},
        })

        assert load_seed_questions(path)[0].id == QuestionId("real")

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedLoadError) as exc_info:
            load_seed_questions(tmp_path / "absent.json")

        assert exc_info.value.code == "SEED_LOAD_ERROR"

    def test_error_to_dict(self, tmp_path):
        path = tmp_path / "absent.json"

        with pytest.raises(SeedLoadError) as exc_info:
            load_seed_questions(path)

        error = exc_info.value.to_dict()
        assert error["code"] == "SEED_LOAD_ERROR"
        assert error["details"]["path"] == str(path)
        assert error["suggestion"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{oops", encoding="utf-8")

        with pytest.raises(SeedLoadError, match="invalid JSON"):
            load_seed_questions(path)

    def test_not_an_object(self, tmp_path):
        path = write_json(tmp_path / "seed.json", [{"id": "1", "title": "T", "content": "C"}])

        with pytest.raises(SeedLoadError, match="expected a JSON object"):
            load_seed_questions(path)

    def test_invalid_entry(self, tmp_path):
        path = write_json(tmp_path / "seed.json", {"1": {"id": "1"}})

        with pytest.raises(SeedLoadError, match="entry '1'"):
            load_seed_questions(path)


class TestStartupSeeding:
    """The application seeds its store during startup."""

    def test_store_seeded_from_settings(self, tmp_path, monkeypatch):
        path = write_json(tmp_path / "seed.json", {
            "s1": {"id": "s1", "title": "Seeded", "content": "C"},
        })
        monkeypatch.setattr(settings, "SEED_FILE", path)

        with TestClient(app) as client:
            response = client.get("/questions/s1")

        assert response.status_code == 200
        assert response.json()["title"] == "Seeded"

    def test_bad_seed_aborts_startup(self, tmp_path, monkeypatch, caplog):
        """Startup fails and the structured error is logged first."""
        monkeypatch.setattr(settings, "SEED_FILE", tmp_path / "absent.json")

        with caplog.at_level(logging.ERROR, logger="app.main"):
            with pytest.raises(SeedLoadError):
                with TestClient(app):
                    pass

        messages = [record.getMessage() for record in caplog.records if record.name == "app.main"]
        assert any("SEED_LOAD_ERROR" in message for message in messages)
        assert any("absent.json" in message for message in messages)
