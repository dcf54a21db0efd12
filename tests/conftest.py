import pytest

from config.settings import get_settings
from services.profile_engine.catalog import questions_for_branch
from services.profile_engine.validation import parse_answers


@pytest.fixture
def make_answers():
    """Parses a {question_id: value} mapping against the questions of a branch."""
    def _make(raw, branch=None):
        return parse_answers(raw, questions_for_branch(branch))
    return _make


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Points every file and database setting at a per-test temp directory."""
    monkeypatch.setenv("SPEECH_PROFILE_DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("SPEECH_PROFILE_LEAD_FALLBACK_PATH", str(tmp_path / "leads_fallback.json"))
    monkeypatch.setenv("SPEECH_PROFILE_DRAFT_PATH", str(tmp_path / "draft.json"))
    monkeypatch.setenv("SPEECH_PROFILE_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
