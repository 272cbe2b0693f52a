"""
Deterministic classifiers that need no external service.
"""
from typing import Dict, Optional, Tuple
from ..schemas import IntentPrediction


class StaticIntentClassifier:
    """
    Classifies utterances by exact (normalized) phrase lookup.

    Usage:
        classifier = StaticIntentClassifier({
            "who wrote hamlet": ("hamlet_author", 0.93),
        })
        classifier.classify("Who wrote Hamlet?", "session-1")
    """

    def __init__(self, phrases: Optional[Dict[str, Tuple[str, float]]] = None):
        self._phrases: Dict[str, IntentPrediction] = {}
        for phrase, (label, confidence) in (phrases or {}).items():
            self.register(phrase, label, confidence)

    @property
    def enabled(self) -> bool:
        return True

    def register(self, phrase: str, intent_label: str, confidence: float) -> None:
        self._phrases[_normalize(phrase)] = IntentPrediction(
            intent_label=intent_label,
            confidence=confidence,
        )

    def classify(self, utterance: str, session_id: str) -> Optional[IntentPrediction]:
        return self._phrases.get(_normalize(utterance))


class DisabledIntentClassifier:
    """Classifier used when intent detection is turned off."""

    @property
    def enabled(self) -> bool:
        return False

    def classify(self, utterance: str, session_id: str) -> Optional[IntentPrediction]:
        return None


def _normalize(text: str) -> str:
    cleaned = "".join(ch for ch in text.lower() if ch.isalnum() or ch.isspace())
    return " ".join(cleaned.split())
