from typing import Optional, Protocol
from ..schemas import IntentPrediction


class IntentClassifier(Protocol):
    """
    Protocol for an external natural-language intent classifier.

    Implementations may raise ClassifierFailure; callers treat that as
    "no intent result" and fall back to keyword matching.
    """

    @property
    def enabled(self) -> bool:
        ...

    def classify(self, utterance: str, session_id: str) -> Optional[IntentPrediction]:
        ...
