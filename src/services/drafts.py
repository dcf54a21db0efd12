import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from services.profile_engine.models import Answer, Branch

logger = logging.getLogger(__name__)


class Draft(BaseModel):
    """Snapshot of an unfinished questionnaire."""
    current_step: int = 0
    branch: Optional[Branch] = None
    answers: List[Answer] = []
    saved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DraftStore:
    """Keeps one draft in a JSON file so a respondent can resume later."""

    def __init__(self, path: str, max_age_hours: int = 24):
        self.path = Path(path)
        self.max_age = timedelta(hours=max_age_hours)

    def save(self, draft: Draft) -> None:
        if not draft.answers:
            return
        self.path.write_text(draft.model_dump_json(), encoding="utf-8")
        logger.debug(f"Draft saved at step {draft.current_step} with {len(draft.answers)} answers")

    def load(self, now: Optional[datetime] = None) -> Optional[Draft]:
        """Returns the stored draft unless it is missing, empty, stale or unreadable."""
        if not self.path.exists():
            return None
        try:
            draft = Draft.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (ValidationError, ValueError) as e:
            logger.warning(f"Discarding unreadable draft {self.path}: {e}")
            self.clear()
            return None

        now = now or datetime.now(timezone.utc)
        saved_at = draft.saved_at
        if saved_at.tzinfo is None:
            saved_at = saved_at.replace(tzinfo=timezone.utc)
        if now - saved_at >= self.max_age or not draft.answers:
            logger.info("Ignoring stale or empty draft")
            return None
        return draft

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
