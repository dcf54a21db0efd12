from datetime import date

import pytest

from services.profile_engine.scorer import compute_result
from src.schemas.lead import LeadFormData
from src.services.report import (
    DISCLAIMER,
    STARTER_PLAN,
    render_text_report,
    result_document,
    score_label,
    share_message,
)


@pytest.fixture
def result(make_answers):
    return compute_result(make_answers({"q1": True, "q2": "Before age 8", "q4": 8, "q5": True, "q7": True}))


@pytest.fixture
def lead():
    return LeadFormData(name="Omar", whatsapp="0501234567")


@pytest.mark.parametrize("score,kind,expected", [
    (0, "risk", "Low"),
    (39, "risk", "Low"),
    (40, "emotion", "Moderate"),
    (59, "emotion", "Moderate"),
    (60, "risk", "High"),
    (100, "emotion", "High"),
    (0, "function", "Needs Support"),
    (40, "function", "Moderate"),
    (60, "function", "Strong"),
])
def test_score_label(score, kind, expected):
    assert score_label(score, kind) == expected


def test_result_document_uses_camel_case(result):
    document = result_document(result)
    assert document["riskScore"] == 89
    assert document["emotionScore"] == 20
    assert document["functionScore"] == 0
    assert document["profileType"] == "motor-severe"
    assert document["profileLabel"] == "Motor-Dominant Severe"
    assert document["exercises"][0]["id"] == "diaphragmatic"


def test_share_message(result, lead):
    message = share_message(result, lead)
    assert "Hi Omar!" in message
    assert "Motor-Dominant Severe" in message
    assert "Risk Score: 89/100" in message
    assert "1. Phone calls" in message
    assert "• Diaphragmatic Breathing" in message
    # Only the first two exercises are listed
    assert message.count("• ") == 3 + 2
    assert message.rstrip().endswith("https://chat.whatsapp.com/GJdRe8ZhIHBHwT3TiadtkL/")


def test_share_message_uses_configured_community_url(result, lead, monkeypatch):
    from config.settings import get_settings

    monkeypatch.setenv("SPEECH_PROFILE_COMMUNITY_URL", "https://example.com/join")
    get_settings.cache_clear()
    assert share_message(result, lead).endswith("https://example.com/join")


def test_text_report(result, lead):
    report = render_text_report(result, lead, on=date(2024, 3, 5))
    assert report.startswith("ZLAQA Speech Profile Report - 05 March 2024")
    assert "Name: Omar" in report
    assert "Email:" not in report
    assert "YOUR PROFILE: Motor-Dominant Severe" in report
    assert "Tier: Responder" in report
    assert "89/100  High" in report
    assert "0/100  Needs Support" in report
    for item in STARTER_PLAN:
        assert item in report
    assert report.endswith(DISCLAIMER)


def test_text_report_without_lead(result):
    report = render_text_report(result, on=date(2024, 3, 5))
    assert "Patient Information" not in report
