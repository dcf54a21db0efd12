"""Answer accumulation for one respondent working through the questionnaire."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from services.profile_engine.catalog import (
    SCREENING_QUESTION_ID,
    branch_from_screening,
    questions_for_branch,
)
from services.profile_engine.models import Answer, Branch, Question, TestResult
from services.profile_engine.scorer import compute_result
from services.profile_engine.validation import parse_answer
from src.services.drafts import Draft

logger = logging.getLogger(__name__)


class AssessmentSession:
    """
    Tracks the current step and the answers given so far.

    In branching mode the screening question comes first and decides which
    question set follows. Answering a question again replaces the earlier answer.
    """

    def __init__(self, branching: bool = False):
        self.branching = branching
        self.current_step = 0
        self.is_complete = False
        self._answers: Dict[str, Answer] = {}

    # --- Navigation ---

    @property
    def branch(self) -> Optional[Branch]:
        if not self.branching:
            return None
        screening = self._answers.get(SCREENING_QUESTION_ID)
        return branch_from_screening(screening.value if screening else None)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return questions_for_branch(self.branch)

    @property
    def total_questions(self) -> int:
        # Until the screening answer is known the follow-up set size is the generic one
        if self.branch == Branch.UNKNOWN:
            return len(questions_for_branch(Branch.POSITIVE))
        return len(self.questions)

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_step]

    @property
    def is_last_question(self) -> bool:
        return self.current_step >= self.total_questions - 1

    @property
    def progress(self) -> float:
        return self.current_step / self.total_questions * 100

    @property
    def answers(self) -> List[Answer]:
        return list(self._answers.values())

    def answer_for(self, question_id: str) -> Any:
        answer = self._answers.get(question_id)
        return answer.value if answer else None

    def submit_answer(self, value: Any) -> bool:
        """
        Records an answer for the current question and moves on.

        Returns True when that was the last question, i.e. the caller should
        collect contact details and complete the session.
        """
        question = self.current_question
        previous_branch = self.branch
        self._answers[question.id] = parse_answer(question, value)

        if question.id == SCREENING_QUESTION_ID and self.branch != previous_branch:
            self._drop_answers_outside_branch()

        if self.is_last_question:
            return True
        self.current_step += 1
        return False

    def go_back(self) -> None:
        if self.current_step > 0:
            self.current_step -= 1

    def reset(self) -> None:
        self.current_step = 0
        self.is_complete = False
        self._answers.clear()

    def _drop_answers_outside_branch(self) -> None:
        allowed = {q.id for q in self.questions}
        dropped = [qid for qid in self._answers if qid not in allowed]
        for qid in dropped:
            del self._answers[qid]
        if dropped:
            logger.info(f"Screening answer changed; discarded answers {dropped}")

    # --- Results ---

    def preview(self) -> Optional[TestResult]:
        """Result for the answers so far, or None before the first answer."""
        if not self._answers:
            return None
        return compute_result(self.answers, self.branch)

    def complete(self) -> TestResult:
        result = compute_result(self.answers, self.branch)
        self.is_complete = True
        logger.info(f"Assessment complete: {result.profile_type.value}")
        return result

    # --- Drafts ---

    def snapshot(self) -> Draft:
        return Draft(current_step=self.current_step, branch=self.branch, answers=self.answers)

    def restore(self, draft: Draft) -> None:
        self._answers = {a.question_id: a for a in draft.answers}
        self.branching = draft.branch is not None
        self.current_step = min(draft.current_step, len(self.questions) - 1)
        self.is_complete = False
