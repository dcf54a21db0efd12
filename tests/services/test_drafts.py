from datetime import datetime, timedelta, timezone

import pytest

from services.profile_engine.models import BooleanAnswer, Branch
from src.services.drafts import Draft, DraftStore

SAVED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    return DraftStore(str(tmp_path / "draft.json"), max_age_hours=24)


@pytest.fixture
def draft():
    return Draft(
        current_step=2,
        branch=Branch.POSITIVE,
        answers=[BooleanAnswer(question_id="q0", value=True), BooleanAnswer(question_id="q1", value=False)],
        saved_at=SAVED_AT,
    )


def test_save_and_load(store, draft):
    store.save(draft)
    loaded = store.load(now=SAVED_AT + timedelta(hours=1))
    assert loaded == draft
    assert isinstance(loaded.answers[1], BooleanAnswer)


def test_missing_draft(store):
    assert store.load() is None


def test_empty_draft_is_not_saved(store):
    store.save(Draft(current_step=0))
    assert not store.path.exists()


def test_stale_draft_is_ignored(store, draft):
    store.save(draft)
    assert store.load(now=SAVED_AT + timedelta(hours=24)) is None
    assert store.load(now=SAVED_AT + timedelta(hours=23, minutes=59)) is not None


def test_naive_timestamp_is_treated_as_utc(store, draft):
    store.save(draft.model_copy(update={"saved_at": SAVED_AT.replace(tzinfo=None)}))
    assert store.load(now=SAVED_AT + timedelta(hours=2)) is not None


def test_corrupt_draft_is_discarded(store):
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() is None
    assert not store.path.exists()


def test_save_overwrites(store, draft):
    store.save(draft)
    store.save(draft.model_copy(update={"current_step": 5}))
    assert store.load(now=SAVED_AT).current_step == 5


def test_clear(store, draft):
    store.save(draft)
    store.clear()
    assert store.load() is None
    store.clear()
