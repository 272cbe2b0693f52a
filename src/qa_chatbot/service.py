import logging
import time
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from .classifier import IntentClassifier
from .config import ChatbotConfig
from .exceptions import DataNotLoadedError, InvalidInput, StoreUnavailable
from .resolution import EntryCache, IntentResolver, ResolutionPipeline, get_random_samples
from .schemas import ChatResponse, ServiceStats
from .store import EntryStore

logger = logging.getLogger(__name__)


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatbotService:
    """
    Facade over the answer resolution engine.
    The ONLY entry point for the HTTP layer.
    """

    def __init__(
        self,
        config: ChatbotConfig,
        store: EntryStore,
        classifier: IntentClassifier,
    ):
        """
        Composition root.
        The cache, intent resolver and pipeline are created and wired here.
        """
        self.config = config
        self._store = store
        self._classifier = classifier

        self._cache = EntryCache(store)
        self._intent_resolver = IntentResolver(store, self._cache)
        self._pipeline = ResolutionPipeline(self._cache, self._intent_resolver, classifier)

    # ----------------------------
    # Startup / reload
    # ----------------------------
    def initialize(self) -> bool:
        """
        Run the initial cache load.

        A failed load is logged and the service keeps running; requests get
        DataNotLoadedError until a later reload succeeds.
        """
        try:
            self._cache.load()
        except StoreUnavailable as e:
            logger.error(f"Failed to load Q&A data: {e}")
            logger.warning("Service running but data not loaded. Check the store connection.")
            return False
        return True

    def reload(self) -> int:
        """Reload the cache from the store. Raises StoreUnavailable on failure."""
        return self._cache.load()

    # ----------------------------
    # Query handling
    # ----------------------------
    def chat(self, message: str, session_id: Optional[str] = None) -> ChatResponse:
        """
        Answer a free-text question.

        :param message: User question
        :param session_id: Conversation id (generated when absent)
        :raises InvalidInput: If message is empty
        :raises DataNotLoadedError: If the cache has never loaded
        """
        if not isinstance(message, str) or not message:
            raise InvalidInput("Message is required")

        if not self._cache.is_loaded():
            raise DataNotLoadedError("Service is loading data. Please try again in a moment.")

        session_id = session_id or str(uuid.uuid4())
        logger.info(f"User question: \"{message}\" (session {session_id})")

        result = self._pipeline.resolve(message, session_id)

        return ChatResponse(
            reply=result.answer,
            matched_question=result.matched_question,
            confidence=result.confidence_tier.value,
            method=result.method.value,
            session_id=session_id,
            timestamp=utc_timestamp(),
        )

    def sample_questions(self, count: int = 10) -> List[str]:
        if not self._cache.is_loaded():
            raise DataNotLoadedError("Data not loaded yet")

        return get_random_samples(self._cache.snapshot(), count)

    # ----------------------------
    # Admin mutation
    # ----------------------------
    def add_entry(self, intent: Optional[str], question: str, answer: str) -> str:
        """
        Persist a new entry, then reload the whole cache before returning.

        :param intent: Optional intent label (placeholder generated when omitted)
        :return: Store-assigned id of the new entry
        :raises InvalidInput: If question or answer is empty
        :raises StoreUnavailable: If persisting or reloading fails
        """
        question = (question or "").strip()
        answer = (answer or "").strip()
        if not question or not answer:
            raise InvalidInput("question and answer are required")

        intent = (intent or "").strip() or f"custom_{int(time.time() * 1000)}"

        doc_id = self._store.add({
            "intent": intent,
            "question": question,
            "answer": answer,
            "createdAt": utc_timestamp(),
        })
        logger.info(f"Added Q&A pair {doc_id} (intent {intent})")

        self._cache.load()
        return doc_id

    # ----------------------------
    # Status
    # ----------------------------
    def is_data_loaded(self) -> bool:
        return self._cache.is_loaded()

    @property
    def classifier_enabled(self) -> bool:
        return self._classifier.enabled

    @property
    def total_questions(self) -> int:
        return self._cache.size()

    def stats(self) -> ServiceStats:
        loaded_at = self._cache.loaded_at
        return ServiceStats(
            environment=self.config.environment,
            classifier_enabled=self.classifier_enabled,
            total_questions=self._cache.size(),
            is_loaded=self._cache.is_loaded(),
            project_id=self.config.project_id,
            last_loaded_at=utc_timestamp(loaded_at) if loaded_at else None,
            timestamp=utc_timestamp(),
        )
