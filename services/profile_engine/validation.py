"""
Boundary validation: turns raw answer payloads into typed Answer models.

The value shape of an answer depends on the type of the question it refers to,
so parsing needs the question catalog. The scoring engine only ever sees the
typed models produced here.
"""
import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Union

from .models import (
    Answer,
    BooleanAnswer,
    ChoiceAnswer,
    InvalidSubmissionError,
    Question,
    QuestionType,
    RankingAnswer,
    ScaleAnswer,
)

logger = logging.getLogger(__name__)

RawAnswers = Union[Mapping[str, Any], Iterable[Mapping[str, Any]]]


def parse_answer(question: Question, value: Any) -> Answer:
    """Validates one raw value against its question and wraps it in the matching Answer type."""
    qid = question.id

    if question.type == QuestionType.YES_NO:
        if not isinstance(value, bool):
            raise InvalidSubmissionError(f"Question '{qid}' expects true or false, got {value!r}")
        return BooleanAnswer(question_id=qid, value=value)

    if question.type == QuestionType.SLIDER:
        # bool is an int subclass; a slider never accepts it
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or (isinstance(value, float) and not math.isfinite(value))
            or int(value) != value
        ):
            raise InvalidSubmissionError(f"Question '{qid}' expects an integer, got {value!r}")
        if not question.slider_min <= value <= question.slider_max:
            raise InvalidSubmissionError(
                f"Answer {value} for question '{qid}' is outside "
                f"{question.slider_min}..{question.slider_max}"
            )
        return ScaleAnswer(question_id=qid, value=int(value))

    if question.type == QuestionType.MULTIPLE_CHOICE:
        if value not in question.options:
            raise InvalidSubmissionError(
                f"Invalid answer {value!r} for question '{qid}'. Valid options: {question.options}"
            )
        return ChoiceAnswer(question_id=qid, value=value)

    # Ranking: a full permutation of the declared options
    if (
        not isinstance(value, (list, tuple))
        or not all(isinstance(item, str) for item in value)
        or sorted(value) != sorted(question.options)
    ):
        raise InvalidSubmissionError(
            f"Question '{qid}' expects a ranking of all options {question.options}, got {value!r}"
        )
    return RankingAnswer(question_id=qid, value=list(value))


def _iter_pairs(raw: RawAnswers):
    if isinstance(raw, Mapping):
        yield from raw.items()
        return
    if not isinstance(raw, (list, tuple)):
        raise InvalidSubmissionError(f"Answers must be an object or a list, got {type(raw).__name__}")
    for item in raw:
        if not isinstance(item, Mapping):
            raise InvalidSubmissionError(f"Each answer must be an object, got {item!r}")
        qid = item.get("questionId", item.get("question_id"))
        if qid is None or "value" not in item:
            raise InvalidSubmissionError(f"Answer {dict(item)!r} needs a question id and a value")
        yield qid, item["value"]


def parse_answers(raw: RawAnswers, questions: Iterable[Question]) -> List[Answer]:
    """
    Parses a raw answer payload against the addressable questions.

    Accepts either a ``{question_id: value}`` mapping or a list of
    ``{"questionId": ..., "value": ...}`` objects. A repeated question id
    replaces the earlier value but keeps its position.
    """
    by_id = {q.id: q for q in questions}
    parsed: Dict[str, Answer] = {}

    for qid, value in _iter_pairs(raw):
        question = by_id.get(qid)
        if question is None:
            raise InvalidSubmissionError(f"Unknown question id '{qid}'")
        parsed[qid] = parse_answer(question, value)

    logger.debug(f"Parsed {len(parsed)} answers")
    return list(parsed.values())
