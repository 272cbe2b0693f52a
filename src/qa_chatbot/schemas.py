from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfidenceTier(str, Enum):
    """Coarse bucket summarizing match quality for the caller."""
    NONE = "none"
    MEDIUM = "medium"
    HIGH = "high"


class ResolutionMethod(str, Enum):
    """Which resolution tier produced the answer."""
    NONE = "none"
    INTENT = "intent"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class IntentPrediction:
    intent_label: str
    confidence: float
    fulfillment_text: Optional[str] = None

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")


@dataclass(frozen=True)
class IntentMatch:
    answer: str
    question: str
    source: str  # "store" or "cache"


@dataclass(frozen=True)
class MatchResult:
    answer: str
    matched_question: Optional[str]
    confidence_tier: ConfidenceTier
    method: ResolutionMethod
    score: Optional[float] = None
    source: Optional[str] = None

    @property
    def is_match(self) -> bool:
        return self.method != ResolutionMethod.NONE


@dataclass
class ChatResponse:
    reply: str
    confidence: str
    method: str
    session_id: str
    timestamp: str
    matched_question: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to the wire format returned by /api/chat."""
        result = {"reply": self.reply}

        if self.matched_question is not None:
            result["matchedQuestion"] = self.matched_question

        result.update({
            "confidence": self.confidence,
            "method": self.method,
            "sessionId": self.session_id,
            "timestamp": self.timestamp,
        })
        return result


@dataclass
class ServiceStats:
    environment: str
    classifier_enabled: bool
    total_questions: int
    is_loaded: bool
    project_id: str
    last_loaded_at: Optional[str]
    timestamp: str

    def to_dict(self) -> dict:
        return {
            "environment": self.environment,
            "classifierEnabled": self.classifier_enabled,
            "totalQuestions": self.total_questions,
            "isLoaded": self.is_loaded,
            "projectId": self.project_id,
            "lastLoadedAt": self.last_loaded_at,
            "timestamp": self.timestamp,
        }
