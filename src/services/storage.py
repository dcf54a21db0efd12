import json
import logging
import secrets
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from services.profile_engine.models import Answer, TestResult
from src.db.models import Lead
from src.schemas.lead import LeadFormData

logger = logging.getLogger(__name__)


class LeadRepository:
    """
    Persists captured leads together with their result and answers.

    The database is the primary store and every saved record is also appended to a
    local JSON file. When the database write fails the record goes only to that
    file, under a `local_` id, so a lead is never lost because the database is down.
    """

    def __init__(self, session_factory: sessionmaker, fallback_path: str):
        self.session_factory = session_factory
        self.fallback_path = Path(fallback_path)

    def save(self, lead: LeadFormData, result: TestResult, answers: Sequence[Answer]) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "name": lead.name,
            "whatsapp": lead.whatsapp,
            "email": lead.email,
            "result": result.model_dump(mode="json", by_alias=True),
            "answers": [
                {"questionId": a.question_id, "value": a.value} for a in answers
            ],
        }
        logger.info(f"Saving lead for profile '{result.profile_type.value}'")

        try:
            with self.session_factory() as session:
                record = Lead(**payload, created_at=now, updated_at=now)
                session.add(record)
                session.commit()
                lead_id = record.id
            logger.info(f"Lead saved with id {lead_id}")
        except SQLAlchemyError as e:
            logger.error(f"Error saving lead to the database: {e}", exc_info=True)
            try:
                fallback_id = self._save_fallback(payload, now)
            except (OSError, ValueError) as local_err:
                logger.error(f"Fallback lead store also failed: {local_err}")
                raise e
            logger.warning(f"Lead saved to local fallback with id {fallback_id}")
            return fallback_id

        try:
            self._append_fallback(lead_id, payload, now)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not write local backup for lead {lead_id}: {e}")
        return lead_id

    def _save_fallback(self, payload: Dict[str, Any], now: datetime) -> str:
        fallback_id = f"local_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"
        self._append_fallback(fallback_id, payload, now)
        return fallback_id

    def _append_fallback(self, lead_id: str, payload: Dict[str, Any], now: datetime) -> None:
        records = self._read_fallback()
        records.append({
            "id": lead_id,
            **payload,
            "createdAt": now.isoformat(),
            "updatedAt": now.isoformat(),
        })
        self.fallback_path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")

    def _read_fallback(self) -> List[Dict[str, Any]]:
        if not self.fallback_path.exists():
            return []
        return json.loads(self.fallback_path.read_text(encoding="utf-8") or "[]")

    def _find_local(self, lead_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self._read_fallback() if r["id"] == lead_id), None)

    def get(self, lead_id: str) -> Optional[Dict[str, Any]]:
        """Looks a lead up in the database, then in the local file."""
        if lead_id.startswith("local_"):
            return self._find_local(lead_id)
        try:
            with self.session_factory() as session:
                record = session.get(Lead, lead_id)
                if record is not None:
                    return record.to_dict()
        except SQLAlchemyError as e:
            logger.error(f"Error reading lead {lead_id} from the database: {e}", exc_info=True)
        return self._find_local(lead_id)

    def list_all(self) -> List[Dict[str, Any]]:
        """
        Database records followed by the records that only exist locally.

        While the database is unreachable every local record is returned,
        backups of database records included.
        """
        local_records = self._read_fallback()
        try:
            with self.session_factory() as session:
                records = session.scalars(select(Lead).order_by(Lead.created_at)).all()
                stored = [r.to_dict() for r in records]
        except SQLAlchemyError as e:
            logger.error(f"Error listing leads from the database: {e}", exc_info=True)
            return local_records
        return stored + [r for r in local_records if r["id"].startswith("local_")]
