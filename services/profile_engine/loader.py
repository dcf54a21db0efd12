import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from services.profile_engine.catalog import CATALOGS
from services.profile_engine.models import (
    Branch,
    ChoiceTerm,
    FlagTerm,
    ProfileType,
    QuestionType,
    RuleSet,
    RuleSetValidationError,
    ScaleTerm,
)

logger = logging.getLogger(__name__)

RULESET_DIR = Path(__file__).parent / "rulesets"
PRIMARY_RULESET_PATH = RULESET_DIR / "primary.yml"
ALTERNATE_RULESET_PATH = RULESET_DIR / "alternate.yml"

# Question type each term kind may read from
_TERM_QUESTION_TYPES = {
    FlagTerm: QuestionType.YES_NO,
    ScaleTerm: QuestionType.SLIDER,
    ChoiceTerm: QuestionType.MULTIPLE_CHOICE,
}


def load_ruleset_data(data: Dict[str, Any]) -> RuleSet:
    """
    Validates the raw dictionary data against the RuleSet model
    and checks it against the question catalog it names.
    """
    try:
        ruleset = RuleSet.model_validate(data)
    except ValidationError as e:
        # Schema issues are reported by pydantic as-is
        raise e

    if ruleset.catalog not in CATALOGS:
        raise RuleSetValidationError(f"Rule-set '{ruleset.id}' names unknown catalog '{ruleset.catalog}'")
    questions = {q.id: q for q in CATALOGS[ruleset.catalog]}

    for score_name in ("risk", "emotion", "function"):
        for term in getattr(ruleset.scores, score_name):
            question = questions.get(term.question)
            if question is None:
                raise RuleSetValidationError(
                    f"{score_name} term references question '{term.question}' "
                    f"which is not in catalog '{ruleset.catalog}'"
                )
            expected_type = _TERM_QUESTION_TYPES[type(term)]
            if question.type != expected_type:
                raise RuleSetValidationError(
                    f"{score_name} term of kind '{term.kind}' cannot read question "
                    f"'{question.id}' of type '{question.type.value}'"
                )
            if isinstance(term, ChoiceTerm):
                unknown = [label for label in term.points if label not in question.options]
                if unknown:
                    raise RuleSetValidationError(
                        f"Choice labels {unknown} are not options of question '{question.id}'"
                    )

    triggers_question = questions.get(ruleset.triggers_question)
    if triggers_question is None or triggers_question.type != QuestionType.RANK:
        raise RuleSetValidationError(
            f"Triggers question '{ruleset.triggers_question}' must be a rank question in '{ruleset.catalog}'"
        )

    seen_profiles = set()
    for index, rule in enumerate(ruleset.profile_rules):
        if rule.profile in seen_profiles:
            raise RuleSetValidationError(f"Duplicate profile rule for '{rule.profile.value}'")
        seen_profiles.add(rule.profile)
        is_last = index == len(ruleset.profile_rules) - 1
        if rule.unconditional and not is_last:
            raise RuleSetValidationError(
                f"Unconditional rule '{rule.profile.value}' must be the last profile rule"
            )
        if is_last and not rule.unconditional:
            raise RuleSetValidationError("The last profile rule must be unconditional")

    missing_rules = set(ProfileType) - seen_profiles
    if missing_rules:
        raise RuleSetValidationError(f"No profile rule for {sorted(p.value for p in missing_rules)}")
    missing_labels = set(ProfileType) - set(ruleset.labels)
    if missing_labels:
        raise RuleSetValidationError(f"No label for {sorted(p.value for p in missing_labels)}")

    return ruleset


def load_ruleset_from_file(file_path) -> RuleSet:
    """
    Loads a rule-set from a YAML file, validates it,
    and returns a RuleSet object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RuleSetValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise RuleSetValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise RuleSetValidationError(f"YAML file is empty or invalid: {file_path}")

    ruleset = load_ruleset_data(data)
    logger.debug(f"Loaded rule-set '{ruleset.id}' from {file_path}")
    return ruleset


@lru_cache(maxsize=None)
def _load_cached(path: str) -> RuleSet:
    return load_ruleset_from_file(path)


def get_ruleset(branch: Optional[Branch] = None) -> RuleSet:
    """Primary rule-set unless the screening answer was negative."""
    if branch == Branch.NEGATIVE:
        return _load_cached(str(ALTERNATE_RULESET_PATH))
    return _load_cached(str(PRIMARY_RULESET_PATH))
