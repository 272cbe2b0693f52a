"""
Two-tier answer resolution: intent classifier first, keyword matching second.

Implements the escalation logic: intent → keyword → fallback reply.
"""
import logging
from typing import Optional

from ..classifier import IntentClassifier
from ..exceptions import ClassifierFailure
from ..schemas import ConfidenceTier, IntentPrediction, MatchResult, ResolutionMethod
from . import keyword_matcher
from .entry_cache import EntryCache
from .intent_resolver import IntentResolver

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I'm sorry, I don't have a good answer to that question. Try asking about general"
    " knowledge topics like history, science, geography, or famous people!"
)

# Classifier confidence must exceed this to attempt an intent lookup
INTENT_MIN_CONFIDENCE = 0.5
INTENT_HIGH_CONFIDENCE = 0.8
KEYWORD_HIGH_SCORE = 15


def classify_intent_confidence(confidence: float) -> ConfidenceTier:
    return ConfidenceTier.HIGH if confidence > INTENT_HIGH_CONFIDENCE else ConfidenceTier.MEDIUM


def classify_keyword_score(score: float) -> ConfidenceTier:
    return ConfidenceTier.HIGH if score > KEYWORD_HIGH_SCORE else ConfidenceTier.MEDIUM


class ResolutionPipeline:
    """
    Resolves an utterance to a single confidence-annotated answer.

    Never raises for classifier or intent lookup problems: each failure
    degrades to the next tier, ending at the fallback reply.
    """

    def __init__(
        self,
        cache: EntryCache,
        intent_resolver: IntentResolver,
        classifier: IntentClassifier,
    ):
        """
        :param cache: Shared entry snapshot used for keyword matching
        :param intent_resolver: Maps intent labels to entries
        :param classifier: External intent classifier (may be disabled)
        """
        self._cache = cache
        self._intent_resolver = intent_resolver
        self._classifier = classifier

    def resolve(self, utterance: str, session_id: str) -> MatchResult:
        """
        Resolve a user utterance.

        :param utterance: Free-text question
        :param session_id: Conversation id forwarded to the classifier
        :return: MatchResult (method "none" when nothing matched)
        """
        result = self._resolve_by_intent(utterance, session_id)
        if result is not None:
            logger.info(f"Found via intent ({result.source}): \"{result.matched_question}\"")
            return result

        result = self._resolve_by_keyword(utterance)
        if result is not None:
            logger.info(f"Found via keyword matching: \"{result.matched_question}\" (score {result.score:.2f})")
            return result

        logger.info("No match found")
        return MatchResult(
            answer=FALLBACK_REPLY,
            matched_question=None,
            confidence_tier=ConfidenceTier.NONE,
            method=ResolutionMethod.NONE,
        )

    def _classify(self, utterance: str, session_id: str) -> Optional[IntentPrediction]:
        if not self._classifier.enabled:
            return None

        try:
            return self._classifier.classify(utterance, session_id)
        except ClassifierFailure as e:
            logger.warning(f"Intent classifier failed, falling back to keyword matching: {e}")
        except Exception:
            logger.error("Unexpected intent classifier error, falling back to keyword matching", exc_info=True)
        return None

    def _resolve_by_intent(self, utterance: str, session_id: str) -> Optional[MatchResult]:
        prediction = self._classify(utterance, session_id)
        if prediction is None or prediction.confidence <= INTENT_MIN_CONFIDENCE:
            return None

        try:
            found = self._intent_resolver.resolve_by_intent(prediction.intent_label)
        except Exception:
            logger.error(f"Error finding answer by intent '{prediction.intent_label}'", exc_info=True)
            return None

        if found is None:
            return None

        return MatchResult(
            answer=found.answer,
            matched_question=found.question,
            confidence_tier=classify_intent_confidence(prediction.confidence),
            method=ResolutionMethod.INTENT,
            score=prediction.confidence,
            source=found.source,
        )

    def _resolve_by_keyword(self, utterance: str) -> Optional[MatchResult]:
        found = keyword_matcher.match(utterance, self._cache.snapshot())
        if found is None:
            return None

        return MatchResult(
            answer=found.entry.answer,
            matched_question=found.entry.question,
            confidence_tier=classify_keyword_score(found.score),
            method=ResolutionMethod.KEYWORD,
            score=found.score,
        )
