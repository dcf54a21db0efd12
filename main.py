"""
Speech Profile CLI
==================

Runs the questionnaire interactively (resuming a saved draft), scores a saved
answer set, lists the questionnaire, or maps scores to a tier. Contact details
given with a result are stored as a lead.
"""
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from config.logging_config import setup_logging
from config.settings import get_settings
from services.profile_engine import (
    Branch,
    compute_result,
    get_tier,
    parse_answers,
    questions_for_branch,
)
from services.profile_engine.models import InvalidSubmissionError, Question, QuestionType
from src.db.database import get_engine, get_session_factory, init_db
from src.schemas.lead import LeadFormData
from src.services.drafts import DraftStore
from src.services.report import render_text_report, result_document, share_message
from src.services.session import AssessmentSession
from src.services.storage import LeadRepository

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="speech-profile",
    help="Speech profile questionnaire scoring",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    json = "json"
    text = "text"
    share = "share"


@app.callback()
def _root():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)


def _lead_repository() -> LeadRepository:
    """Repository on the configured database; saves still reach the local file if the database is down."""
    settings = get_settings()
    engine = get_engine(settings.database_url)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        logger.error(f"Could not prepare the lead table: {e}")
    return LeadRepository(get_session_factory(engine), settings.lead_fallback_path)


def _save_lead(lead, result, answers) -> str:
    try:
        return _lead_repository().save(lead, result, answers)
    except SQLAlchemyError as e:
        err_console.print(f"[red]Could not store contact details:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def questions(
    branch: Optional[Branch] = typer.Option(None, "--branch", help="Screening outcome; omit for the generic set")
):
    """List the questions for a branch."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Category")
    table.add_column("Question")
    table.add_column("Options")
    for q in questions_for_branch(branch):
        if q.options:
            options = ", ".join(q.options)
        elif q.slider_max is not None:
            options = f"{q.slider_min}-{q.slider_max}"
        else:
            options = "yes / no"
        table.add_row(q.id, q.type.value, q.category, f"{q.emoji or ''} {q.text}".strip(), options)
    console.print(table)


@app.command()
def score(
    answers_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON answers file"),
    branch: Optional[Branch] = typer.Option(None, "--branch", help="Screening outcome; omit for the generic set"),
    output: OutputFormat = typer.Option(OutputFormat.json, "--format", "-f", help="Output format"),
    name: Optional[str] = typer.Option(None, "--name", help="Respondent name; stores the result as a lead"),
    whatsapp: Optional[str] = typer.Option(None, "--whatsapp", help="WhatsApp number; stores the result as a lead"),
    email: Optional[str] = typer.Option(None, "--email", help="Optional email for the lead"),
):
    """Score an answers file and print the result."""
    try:
        raw = json.loads(answers_file.read_text(encoding="utf-8"))
        answers = parse_answers(raw, questions_for_branch(branch))
    except (json.JSONDecodeError, InvalidSubmissionError) as e:
        err_console.print(f"[red]Invalid answers:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = compute_result(answers, branch)

    lead = None
    lead_id = None
    if name or whatsapp:
        try:
            lead = LeadFormData(name=name or "", whatsapp=whatsapp or "", email=email)
        except ValidationError as e:
            err_console.print(f"[red]Invalid contact details:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        lead_id = _save_lead(lead, result, answers)

    if output == OutputFormat.json:
        document = result_document(result)
        document["tier"] = get_tier(result.risk_score, result.emotion_score).value
        if lead_id:
            document["leadId"] = lead_id
        typer.echo(json.dumps(document, ensure_ascii=False, indent=2))
        return

    if lead_id:
        err_console.print(f"Saved lead {lead_id}")
    if output == OutputFormat.share:
        if lead is None:
            err_console.print("[red]--name and --whatsapp are required for share output[/red]")
            raise typer.Exit(1)
        typer.echo(share_message(result, lead))
    else:
        typer.echo(render_text_report(result, lead))


def _ask(question: Question) -> Any:
    """Prompts for one answer; returns the raw value for the session to validate."""
    text = f"{question.emoji or ''} {question.text}".strip()
    if question.type == QuestionType.YES_NO:
        return typer.confirm(text)
    if question.type == QuestionType.SLIDER:
        return typer.prompt(f"{text} [{question.slider_min}-{question.slider_max}]", type=int)

    console.print(text)
    for number, option in enumerate(question.options, start=1):
        console.print(f"  {number}. {option}")
    if question.type == QuestionType.MULTIPLE_CHOICE:
        reply = typer.prompt("Choose a number")
        try:
            return question.options[int(reply) - 1]
        except (ValueError, IndexError):
            return reply

    reply = typer.prompt("Rank all options, most difficult first (e.g. 2,1,3,4,5)")
    try:
        return [question.options[int(n) - 1] for n in reply.split(",")]
    except (ValueError, IndexError):
        return reply


@app.command()
def take(
    branching: bool = typer.Option(False, "--branching", help="Start with the screening question"),
):
    """Answer the questionnaire step by step; progress is kept as a draft."""
    settings = get_settings()
    drafts = DraftStore(settings.draft_path, settings.draft_max_age_hours)
    session = AssessmentSession(branching=branching)

    draft = drafts.load()
    if draft and typer.confirm(f"Resume your saved progress ({len(draft.answers)} answers)?", default=True):
        session.restore(draft)

    finished = False
    while not finished:
        question = session.current_question
        console.print(f"[dim]Question {session.current_step + 1} of {session.total_questions}[/dim]")
        try:
            finished = session.submit_answer(_ask(question))
        except InvalidSubmissionError as e:
            err_console.print(f"[red]{escape(str(e))}[/red]")
            continue
        drafts.save(session.snapshot())

    result = session.complete()
    drafts.clear()
    typer.echo(render_text_report(result))

    if typer.confirm("Save your details to receive the full report?", default=False):
        while True:
            try:
                lead = LeadFormData(
                    name=typer.prompt("Name"),
                    whatsapp=typer.prompt("WhatsApp number"),
                    email=typer.prompt("Email (optional)", default="", show_default=False),
                )
                break
            except ValidationError as e:
                err_console.print(f"[red]{escape(str(e))}[/red]")
        lead_id = _save_lead(lead, result, session.answers)
        typer.echo(f"Saved lead {lead_id}")


@app.command()
def tier(
    risk: int = typer.Argument(..., min=0, max=100),
    emotion: int = typer.Argument(..., min=0, max=100),
):
    """Map a risk and emotion score to a tier."""
    typer.echo(get_tier(risk, emotion).value)


if __name__ == "__main__":
    app()
