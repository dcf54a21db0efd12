from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    YES_NO = "yes-no"
    SLIDER = "slider"
    MULTIPLE_CHOICE = "multiple-choice"
    RANK = "rank"


class ProfileType(str, Enum):
    EMOTIONAL_TENSION = "emotional-tension"
    MOTOR_TENSION = "motor-tension"
    AVOIDANCE_DOMINANT = "avoidance-dominant"
    MOTOR_SEVERE = "motor-severe"
    LOW_RISK = "low-risk"


class TierType(str, Enum):
    EXPLORER = "Explorer"
    CHALLENGER = "Challenger"
    RESPONDER = "Responder"
    FOUNDER = "Founder"


class Branch(str, Enum):
    """Outcome of the screening question."""
    UNKNOWN = "unknown"
    POSITIVE = "positive"
    NEGATIVE = "negative"


ScoreName = Literal["risk", "emotion", "function"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# --- Catalog models ---

class SliderLabels(_Frozen):
    min: str
    max: str


class Question(_Frozen):
    id: str
    type: QuestionType
    category: str
    text: str
    emoji: Optional[str] = None
    options: Optional[List[str]] = None
    slider_min: Optional[int] = None
    slider_max: Optional[int] = None
    slider_labels: Optional[SliderLabels] = None

    @model_validator(mode="after")
    def check_type_metadata(self) -> "Question":
        if self.type in (QuestionType.MULTIPLE_CHOICE, QuestionType.RANK):
            if not self.options or len(self.options) < 2:
                raise ValueError(f"Question '{self.id}' needs at least two options")
        if self.type == QuestionType.SLIDER:
            if self.slider_min is None or self.slider_max is None:
                raise ValueError(f"Slider question '{self.id}' needs slider bounds")
            if self.slider_min >= self.slider_max:
                raise ValueError(f"Slider question '{self.id}' has slider_min >= slider_max")
        return self


class BreathingExercise(_Frozen):
    id: str
    name: str
    description: str
    duration: str
    steps: List[str]
    benefit: str


# --- Answers (validated at the boundary, see validation.py) ---

class BooleanAnswer(_Frozen):
    kind: Literal["boolean"] = "boolean"
    question_id: str
    value: bool


class ScaleAnswer(_Frozen):
    kind: Literal["scale"] = "scale"
    question_id: str
    value: int


class ChoiceAnswer(_Frozen):
    kind: Literal["choice"] = "choice"
    question_id: str
    value: str


class RankingAnswer(_Frozen):
    kind: Literal["ranking"] = "ranking"
    question_id: str
    value: List[str]


Answer = Annotated[
    Union[BooleanAnswer, ScaleAnswer, ChoiceAnswer, RankingAnswer],
    Field(discriminator="kind"),
]


# --- Results ---

class Scores(_Frozen):
    risk: int = 0
    emotion: int = 0
    function: int = 0


class TestResult(_Frozen):
    __test__ = False  # not a pytest class

    risk_score: int = Field(..., ge=0, le=100)
    emotion_score: int = Field(..., ge=0, le=100)
    function_score: int = Field(..., ge=0, le=100)
    profile_type: ProfileType
    profile_label: str
    triggers: List[str]
    exercises: List[BreathingExercise]

    @property
    def scores(self) -> Scores:
        return Scores(risk=self.risk_score, emotion=self.emotion_score, function=self.function_score)


# --- Rule-set descriptor (loaded from rulesets/*.yml) ---

class FlagTerm(BaseModel):
    kind: Literal["flag"]
    question: str
    points: int = Field(..., ge=0)
    when: bool = True


class ScaleTerm(BaseModel):
    kind: Literal["scale"]
    question: str
    cap: int = Field(..., ge=0)


class ChoiceTerm(BaseModel):
    kind: Literal["choice"]
    question: str
    points: Dict[str, NonNegativeInt]


ScoreTerm = Annotated[Union[FlagTerm, ScaleTerm, ChoiceTerm], Field(discriminator="kind")]


class ScoreWeights(BaseModel):
    risk: List[ScoreTerm] = []
    emotion: List[ScoreTerm] = []
    function: List[ScoreTerm] = []


class ProfileRule(BaseModel):
    profile: ProfileType
    at_least: Dict[ScoreName, int] = {}
    below: Dict[ScoreName, int] = {}

    @property
    def unconditional(self) -> bool:
        return not self.at_least and not self.below

    def matches(self, scores: Scores) -> bool:
        values = scores.model_dump()
        return (
            all(values[name] >= threshold for name, threshold in self.at_least.items())
            and all(values[name] < threshold for name, threshold in self.below.items())
        )


class RuleSet(BaseModel):
    id: str
    name: str
    catalog: str
    triggers_question: str
    fallback_triggers: List[str] = Field(..., min_length=3, max_length=3)
    scores: ScoreWeights
    profile_rules: List[ProfileRule]
    labels: Dict[ProfileType, str]


# Custom Error Classes
class InvalidSubmissionError(ValueError):
    """Raised when submitted answers do not fit the question catalog."""
    pass


class RuleSetValidationError(ValueError):
    """Rule-set problems not covered by the pydantic schema."""
    pass
