# src/services/report.py
# Read-only renderings of a TestResult: export document, share text and a plain-text report.

from datetime import date
from typing import Any, Dict, List, Literal, Optional

from config.settings import get_settings
from services.profile_engine.models import TestResult
from services.profile_engine.tiers import get_tier
from src.schemas.lead import LeadFormData

ScoreKind = Literal["risk", "emotion", "function"]

STARTER_PLAN = [
    "Day 1-2: Practice Diaphragmatic Breathing (3 min/day)",
    "Day 3-4: Add Easy Onset exercises",
    "Day 5-6: Practice in low-stress situations",
    "Day 7: Review progress and continue daily practice",
]

DISCLAIMER = (
    "This report is a screening tool only and does not replace a clinical "
    "assessment by a speech-language pathologist."
)


def score_label(score: int, kind: ScoreKind) -> str:
    """Wording for a score; the function score reads the other way round (higher is better)."""
    if kind == "function":
        if score >= 60:
            return "Strong"
        if score >= 40:
            return "Moderate"
        return "Needs Support"
    if score < 40:
        return "Low"
    if score < 60:
        return "Moderate"
    return "High"


def result_document(result: TestResult) -> Dict[str, Any]:
    """camelCase export of the result, the shape stored alongside a lead."""
    return result.model_dump(mode="json", by_alias=True)


def share_message(result: TestResult, lead: LeadFormData) -> str:
    triggers = "\n".join(f"{i}. {t}" for i, t in enumerate(result.triggers, start=1))
    exercises = "\n".join(f"• {e.name}" for e in result.exercises[:2])
    return (
        "🎯 *ZLAQA Speech Profile Report*\n"
        "\n"
        f"Hi {lead.name}! Here's your personalized speech profile:\n"
        "\n"
        f"📊 *Your Profile:* {result.profile_label}\n"
        "\n"
        "*Scores:*\n"
        f"• Risk Score: {result.risk_score}/100\n"
        f"• Emotion Score: {result.emotion_score}/100\n"
        f"• Strength Score: {result.function_score}/100\n"
        "\n"
        "*Your Top Triggers:*\n"
        f"{triggers}\n"
        "\n"
        "*Recommended Exercises:*\n"
        f"{exercises}\n"
        "\n"
        "Join our community for your full PDF report & guided program!\n"
        f"🔗 {get_settings().community_url}"
    )


def render_text_report(result: TestResult, lead: Optional[LeadFormData] = None, on: Optional[date] = None) -> str:
    """Plain-text version of the downloadable report."""
    on = on or date.today()
    lines: List[str] = [
        f"ZLAQA Speech Profile Report - {on.strftime('%d %B %Y')}",
        "=" * 60,
    ]

    if lead:
        lines += ["", "Patient Information", f"  Name: {lead.name}", f"  WhatsApp: {lead.whatsapp}"]
        if lead.email:
            lines.append(f"  Email: {lead.email}")

    lines += [
        "",
        f"YOUR PROFILE: {result.profile_label}",
        f"Tier: {get_tier(result.risk_score, result.emotion_score).value}",
        "",
        "Assessment Scores",
        f"  Risk Score      {result.risk_score:>3}/100  {score_label(result.risk_score, 'risk')}",
        f"  Emotion Score   {result.emotion_score:>3}/100  {score_label(result.emotion_score, 'emotion')}",
        f"  Strength Score  {result.function_score:>3}/100  {score_label(result.function_score, 'function')}",
        "",
        "Your Top Triggers",
    ]
    lines += [f"  {i}. {t}" for i, t in enumerate(result.triggers, start=1)]

    lines += ["", "Recommended Breathing Exercises"]
    for i, exercise in enumerate(result.exercises, start=1):
        lines.append(f"  {i}. {exercise.name} ({exercise.duration})")
        lines.append(f"     {exercise.description}")
        lines += [f"     - {step}" for step in exercise.steps]

    lines += ["", "7-Day Starter Plan"]
    lines += [f"  • {item}" for item in STARTER_PLAN]
    lines += ["", DISCLAIMER]
    return "\n".join(lines)
