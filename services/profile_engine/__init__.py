"""Rule-based scoring engine for the speech profile questionnaire."""
from .catalog import get_catalog, get_exercise, get_question, questions_for_branch
from .models import Branch, ProfileType, TestResult, TierType
from .recommendations import select_exercises
from .scorer import compute_result
from .tiers import get_tier
from .validation import parse_answers

__all__ = [
    "Branch",
    "ProfileType",
    "TestResult",
    "TierType",
    "compute_result",
    "get_catalog",
    "get_exercise",
    "get_question",
    "get_tier",
    "parse_answers",
    "questions_for_branch",
    "select_exercises",
]
