# services/profile_engine/scorer.py
# Scores a validated answer set into composite scores, a profile and recommendations.

import logging
import math
from typing import Dict, Iterable, List, Optional

from .catalog import get_question
from .loader import get_ruleset
from .models import (
    Answer,
    Branch,
    ChoiceTerm,
    FlagTerm,
    ProfileType,
    RankingAnswer,
    RuleSet,
    ScaleTerm,
    Scores,
    ScoreTerm,
    TestResult,
)
from .recommendations import select_exercises

logger = logging.getLogger(__name__)

MAX_SCORE = 100
TRIGGER_COUNT = 3


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positive values (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def term_contribution(term: ScoreTerm, answers_by_id: Dict[str, Answer]) -> int:
    """Points contributed by one weight term; an absent answer contributes nothing."""
    answer = answers_by_id.get(term.question)
    if answer is None:
        return 0

    if isinstance(term, FlagTerm):
        return term.points if answer.value is term.when else 0

    if isinstance(term, ScaleTerm):
        scale_max = get_question(term.question).slider_max
        return round_half_up(answer.value / scale_max * term.cap)

    if isinstance(term, ChoiceTerm):
        return term.points.get(answer.value, 0)

    return 0


def composite_score(terms: Iterable[ScoreTerm], answers_by_id: Dict[str, Answer]) -> int:
    """Sums every term, then clamps the total into [0, 100]."""
    raw_total = sum(term_contribution(term, answers_by_id) for term in terms)
    return max(0, min(MAX_SCORE, raw_total))


def calculate_scores(answers_by_id: Dict[str, Answer], ruleset: RuleSet) -> Scores:
    weights = ruleset.scores
    return Scores(
        risk=composite_score(weights.risk, answers_by_id),
        emotion=composite_score(weights.emotion, answers_by_id),
        function=composite_score(weights.function, answers_by_id),
    )


def classify_profile(scores: Scores, ruleset: RuleSet) -> ProfileType:
    """First matching profile rule wins; the rule-set always ends with an unconditional rule."""
    for rule in ruleset.profile_rules:
        if rule.matches(scores):
            return rule.profile
    return ProfileType.LOW_RISK


def strip_symbol_prefix(label: str) -> str:
    """Drops a leading emoji/symbol token such as '📞 ' from a ranking option."""
    parts = label.split(None, 1)
    if len(parts) == 2 and not any(ch.isalnum() for ch in parts[0]):
        return parts[1]
    return label


def extract_triggers(answers_by_id: Dict[str, Answer], ruleset: RuleSet) -> List[str]:
    answer = answers_by_id.get(ruleset.triggers_question)
    if not isinstance(answer, RankingAnswer):
        return list(ruleset.fallback_triggers)
    return [strip_symbol_prefix(option) for option in answer.value[:TRIGGER_COUNT]]


def compute_result(answers: Iterable[Answer], branch: Optional[Branch] = None) -> TestResult:
    """
    Computes the complete result for a (possibly partial) answer snapshot.

    Pure and deterministic: the inputs are not modified and nothing is stored.
    Unanswered questions contribute zero to every score that reads them.

    Args:
        answers: Answers already validated by ``validation.parse_answers``.
        branch: Screening outcome. NEGATIVE selects the alternate rule-set;
                anything else (including None, the non-branching mode) the primary one.
    """
    ruleset = get_ruleset(branch)
    answers_by_id = {answer.question_id: answer for answer in answers}

    scores = calculate_scores(answers_by_id, ruleset)
    profile_type = classify_profile(scores, ruleset)

    logger.debug(
        f"Rule-set '{ruleset.id}': risk={scores.risk} emotion={scores.emotion} "
        f"function={scores.function} profile={profile_type.value}"
    )
    return TestResult(
        risk_score=scores.risk,
        emotion_score=scores.emotion,
        function_score=scores.function,
        profile_type=profile_type,
        profile_label=ruleset.labels[profile_type],
        triggers=extract_triggers(answers_by_id, ruleset),
        exercises=select_exercises(profile_type, scores),
    )
