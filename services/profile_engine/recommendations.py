# services/profile_engine/recommendations.py
# Picks breathing exercises for a classified profile.

from typing import Dict, List

from .catalog import BASELINE_EXERCISE_ID, get_exercise
from .models import BreathingExercise, ProfileType, Scores

MAX_EXERCISES = 4

# Exercises appended after the baseline, in order
EXERCISE_PLANS: Dict[ProfileType, List[str]] = {
    # High anxiety: calming and confidence
    ProfileType.EMOTIONAL_TENSION: ['box-breathing', 'mindful-speaking'],
    # Physical tension: relaxation and easy onset
    ProfileType.MOTOR_TENSION: ['easy-onset', 'relaxation', 'prolonged-speech'],
    # Avoidance: desensitization and confidence
    ProfileType.AVOIDANCE_DOMINANT: ['voluntary-stuttering', 'mindful-speaking', 'pausing'],
    # Severe motor pattern: comprehensive
    ProfileType.MOTOR_SEVERE: ['easy-onset', 'prolonged-speech', 'relaxation', 'pausing'],
    # Mild: maintenance
    ProfileType.LOW_RISK: ['box-breathing', 'pausing'],
}

HIGH_EMOTION_THRESHOLD = 60
HIGH_EMOTION_EXTRA = 'voluntary-stuttering'


def exercise_ids_for(profile_type: ProfileType, scores: Scores) -> List[str]:
    """Ordered, de-duplicated exercise ids for a profile, capped at MAX_EXERCISES."""
    ids = [BASELINE_EXERCISE_ID]
    ids.extend(EXERCISE_PLANS.get(profile_type, EXERCISE_PLANS[ProfileType.LOW_RISK]))
    if profile_type == ProfileType.EMOTIONAL_TENSION and scores.emotion > HIGH_EMOTION_THRESHOLD:
        ids.append(HIGH_EMOTION_EXTRA)

    # dict keeps first-seen order
    unique_ids = list(dict.fromkeys(ids))
    return unique_ids[:MAX_EXERCISES]


def select_exercises(profile_type: ProfileType, scores: Scores) -> List[BreathingExercise]:
    return [get_exercise(exercise_id) for exercise_id in exercise_ids_for(profile_type, scores)]
