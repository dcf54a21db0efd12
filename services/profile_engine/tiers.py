from .models import TierType

# Upper bounds (exclusive) of the average of risk and emotion, low to high
TIER_THRESHOLDS = (
    (30, TierType.EXPLORER),
    (50, TierType.CHALLENGER),
    (70, TierType.RESPONDER),
)


def get_tier(risk_score: int, emotion_score: int) -> TierType:
    """Maps the average of risk and emotion scores to a presentation tier."""
    average = (risk_score + emotion_score) / 2
    for upper_bound, tier in TIER_THRESHOLDS:
        if average < upper_bound:
            return tier
    return TierType.FOUNDER
