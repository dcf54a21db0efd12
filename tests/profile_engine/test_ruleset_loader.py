import copy

import pytest
import yaml
from pydantic import ValidationError

from services.profile_engine.loader import (
    ALTERNATE_RULESET_PATH,
    PRIMARY_RULESET_PATH,
    get_ruleset,
    load_ruleset_data,
    load_ruleset_from_file,
)
from services.profile_engine.models import Branch, ChoiceTerm, ProfileType, RuleSetValidationError


@pytest.fixture(scope="module")
def primary_data():
    return yaml.safe_load(PRIMARY_RULESET_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def document(primary_data):
    """A fresh, mutable copy of the primary rule-set document."""
    return copy.deepcopy(primary_data)


# --- Shipped rule-sets ---

def test_shipped_rulesets_load():
    primary = load_ruleset_from_file(PRIMARY_RULESET_PATH)
    alternate = load_ruleset_from_file(ALTERNATE_RULESET_PATH)
    assert primary.id == "primary"
    assert primary.catalog == "stuttering"
    assert alternate.id == "alternate"
    assert alternate.catalog == "speaking-confidence"
    for ruleset in (primary, alternate):
        assert [r.profile for r in ruleset.profile_rules] == list(ProfileType)
        assert set(ruleset.labels) == set(ProfileType)


def test_primary_weights(primary_data):
    ruleset = load_ruleset_data(primary_data)
    risk_questions = [t.question for t in ruleset.scores.risk]
    assert risk_questions == ["q1", "q2", "q4", "q5", "q7"]
    choice = ruleset.scores.risk[1]
    assert isinstance(choice, ChoiceTerm)
    assert choice.points == {"Before age 8": 20}
    no_behaviour_bonus = ruleset.scores.function[-1]
    assert (no_behaviour_bonus.question, no_behaviour_bonus.when, no_behaviour_bonus.points) == ("q5", False, 30)


@pytest.mark.parametrize("branch,expected", [
    (None, "primary"),
    (Branch.UNKNOWN, "primary"),
    (Branch.POSITIVE, "primary"),
    (Branch.NEGATIVE, "alternate"),
])
def test_get_ruleset_by_branch(branch, expected):
    assert get_ruleset(branch).id == expected


def test_get_ruleset_is_cached():
    assert get_ruleset() is get_ruleset(Branch.POSITIVE)


# --- Catalog cross-checks ---

def test_unknown_catalog(document):
    document["catalog"] = "nope"
    with pytest.raises(RuleSetValidationError, match="unknown catalog 'nope'"):
        load_ruleset_data(document)


def test_term_question_outside_catalog(document):
    document["scores"]["risk"].append({"kind": "flag", "question": "a1", "points": 5})
    with pytest.raises(RuleSetValidationError, match="'a1' which is not in catalog 'stuttering'"):
        load_ruleset_data(document)


def test_term_kind_must_fit_question_type(document):
    document["scores"]["emotion"].append({"kind": "scale", "question": "q1", "cap": 10})
    with pytest.raises(RuleSetValidationError, match="cannot read question 'q1' of type 'yes-no'"):
        load_ruleset_data(document)


def test_choice_labels_must_be_options(document):
    document["scores"]["risk"][1]["points"] = {"Before age 5": 20}
    with pytest.raises(RuleSetValidationError, match="are not options of question 'q2'"):
        load_ruleset_data(document)


def test_triggers_question_must_be_rank(document):
    document["triggers_question"] = "q1"
    with pytest.raises(RuleSetValidationError, match="must be a rank question"):
        load_ruleset_data(document)


# --- Profile rules ---

def test_duplicate_profile_rule(document):
    document["profile_rules"].insert(0, {"profile": "motor-severe", "at_least": {"risk": 90}})
    with pytest.raises(RuleSetValidationError, match="Duplicate profile rule for 'motor-severe'"):
        load_ruleset_data(document)


def test_unconditional_rule_must_be_last(document):
    fallback = document["profile_rules"].pop()
    document["profile_rules"].insert(0, fallback)
    with pytest.raises(RuleSetValidationError, match="must be the last profile rule"):
        load_ruleset_data(document)


def test_last_rule_must_be_unconditional(document):
    document["profile_rules"][-1] = {"profile": "low-risk", "below": {"risk": 10}}
    with pytest.raises(RuleSetValidationError, match="last profile rule must be unconditional"):
        load_ruleset_data(document)


def test_every_profile_needs_a_rule(document):
    del document["profile_rules"][3]  # motor-severe
    with pytest.raises(RuleSetValidationError, match="No profile rule for \\['motor-severe'\\]"):
        load_ruleset_data(document)


def test_every_profile_needs_a_label(document):
    del document["labels"]["avoidance-dominant"]
    with pytest.raises(RuleSetValidationError, match="No label for \\['avoidance-dominant'\\]"):
        load_ruleset_data(document)


# --- Schema errors come straight from pydantic ---

def test_fallback_triggers_need_three_entries(document):
    document["fallback_triggers"] = ["Phone calls", "Public speaking"]
    with pytest.raises(ValidationError):
        load_ruleset_data(document)


def test_unknown_term_kind(document):
    document["scores"]["risk"].append({"kind": "bonus", "question": "q1", "points": 5})
    with pytest.raises(ValidationError):
        load_ruleset_data(document)


def test_negative_points_rejected(document):
    document["scores"]["risk"][0]["points"] = -5
    with pytest.raises(ValidationError):
        load_ruleset_data(document)


# --- File handling ---

def test_missing_file(tmp_path):
    with pytest.raises(RuleSetValidationError, match="File not found"):
        load_ruleset_from_file(tmp_path / "missing.yml")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(RuleSetValidationError, match="empty or invalid"):
        load_ruleset_from_file(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("id: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuleSetValidationError, match="Error parsing YAML file"):
        load_ruleset_from_file(path)
