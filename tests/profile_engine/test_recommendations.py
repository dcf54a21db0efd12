import pytest

from services.profile_engine.models import ProfileType, Scores
from services.profile_engine.recommendations import MAX_EXERCISES, exercise_ids_for, select_exercises


@pytest.mark.parametrize("profile_type", list(ProfileType))
@pytest.mark.parametrize("emotion", [0, 60, 61, 100])
def test_selection_invariants(profile_type, emotion):
    exercises = select_exercises(profile_type, Scores(risk=50, emotion=emotion, function=50))
    ids = [e.id for e in exercises]
    assert ids[0] == "diaphragmatic"
    assert len(ids) <= MAX_EXERCISES
    assert len(ids) == len(set(ids))


def test_low_risk_plan():
    assert exercise_ids_for(ProfileType.LOW_RISK, Scores()) == ["diaphragmatic", "box-breathing", "pausing"]


def test_motor_tension_plan():
    assert exercise_ids_for(ProfileType.MOTOR_TENSION, Scores()) == [
        "diaphragmatic", "easy-onset", "relaxation", "prolonged-speech"
    ]


def test_avoidance_dominant_plan():
    assert exercise_ids_for(ProfileType.AVOIDANCE_DOMINANT, Scores()) == [
        "diaphragmatic", "voluntary-stuttering", "mindful-speaking", "pausing"
    ]


def test_motor_severe_plan_is_truncated_to_four():
    """Baseline plus four plan entries: the last one ('pausing') is cut."""
    assert exercise_ids_for(ProfileType.MOTOR_SEVERE, Scores()) == [
        "diaphragmatic", "easy-onset", "prolonged-speech", "relaxation"
    ]


def test_emotional_tension_extra_only_above_threshold():
    at_threshold = exercise_ids_for(ProfileType.EMOTIONAL_TENSION, Scores(emotion=60))
    above = exercise_ids_for(ProfileType.EMOTIONAL_TENSION, Scores(emotion=61))
    assert at_threshold == ["diaphragmatic", "box-breathing", "mindful-speaking"]
    assert above == ["diaphragmatic", "box-breathing", "mindful-speaking", "voluntary-stuttering"]


def test_extra_ignored_for_other_profiles():
    assert "voluntary-stuttering" not in exercise_ids_for(ProfileType.LOW_RISK, Scores(emotion=100))


def test_returns_full_exercise_records():
    exercise = select_exercises(ProfileType.LOW_RISK, Scores())[0]
    assert exercise.name == "Diaphragmatic Breathing"
    assert exercise.duration == "3-5 minutes"
    assert len(exercise.steps) == 6
