"""
Typed, read-only access to the question catalogs and the exercise library.

The raw tables in definitions.py are validated into frozen pydantic models once,
at import time.
"""
from typing import Dict, Optional, Tuple

from .definitions import (
    BREATHING_EXERCISES,
    SCREENING_QUESTIONS,
    SPEAKING_CONFIDENCE_QUESTIONS,
    STUTTERING_QUESTIONS,
)
from .models import Branch, BreathingExercise, Question

SCREENING = "screening"
STUTTERING = "stuttering"
SPEAKING_CONFIDENCE = "speaking-confidence"

SCREENING_QUESTION_ID = SCREENING_QUESTIONS[0]["id"]
BASELINE_EXERCISE_ID = "diaphragmatic"

CATALOGS: Dict[str, Tuple[Question, ...]] = {
    SCREENING: tuple(Question.model_validate(q) for q in SCREENING_QUESTIONS),
    STUTTERING: tuple(Question.model_validate(q) for q in STUTTERING_QUESTIONS),
    SPEAKING_CONFIDENCE: tuple(Question.model_validate(q) for q in SPEAKING_CONFIDENCE_QUESTIONS),
}

EXERCISES: Dict[str, BreathingExercise] = {
    e["id"]: BreathingExercise.model_validate(e) for e in BREATHING_EXERCISES
}

_QUESTIONS_BY_ID: Dict[str, Question] = {
    q.id: q for questions in CATALOGS.values() for q in questions
}


def get_catalog(name: str) -> Tuple[Question, ...]:
    """Returns the questions of a catalog in presentation order."""
    if name not in CATALOGS:
        raise KeyError(f"Unknown question catalog: {name}")
    return CATALOGS[name]


def get_question(question_id: str) -> Question:
    return _QUESTIONS_BY_ID[question_id]


def get_exercise(exercise_id: str) -> BreathingExercise:
    if exercise_id not in EXERCISES:
        raise KeyError(f"Unknown exercise: {exercise_id}")
    return EXERCISES[exercise_id]


def questions_for_branch(branch: Optional[Branch]) -> Tuple[Question, ...]:
    """
    Questions addressable for a branch.

    None is the non-branching mode (the generic set only). UNKNOWN means the
    screening question has not been answered yet, so it is the only question.
    """
    if branch is None:
        return CATALOGS[STUTTERING]
    if branch == Branch.UNKNOWN:
        return CATALOGS[SCREENING]
    if branch == Branch.POSITIVE:
        return CATALOGS[SCREENING] + CATALOGS[STUTTERING]
    return CATALOGS[SCREENING] + CATALOGS[SPEAKING_CONFIDENCE]


def branch_from_screening(value: Optional[bool]) -> Branch:
    if value is None:
        return Branch.UNKNOWN
    return Branch.POSITIVE if value else Branch.NEGATIVE
