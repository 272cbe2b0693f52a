"""
Public application facade for the Q&A chatbot.

This is the single stable entry point for the library.
All dependency wiring and factory usage is encapsulated here.
"""
from typing import List, Optional
from .classifier import IntentClassifier, create_intent_classifier
from .config import ChatbotConfig
from .schemas import ChatResponse, ServiceStats
from .service import ChatbotService
from .store import EntryStore, create_entry_store


class ChatbotApp:
    """
    Public application facade.

    Usage:
        config = load_config_from_env()
        app = ChatbotApp(config)
        app.initialize()
        response = app.chat("What is the capital of France?")
    """

    def __init__(
        self,
        config: ChatbotConfig,
        store: Optional[EntryStore] = None,
        classifier: Optional[IntentClassifier] = None,
    ):
        """
        :param config: ChatbotConfig instance
        :param store: Pre-built store (created from config if None)
        :param classifier: Pre-built classifier (created from config if None)
        """
        self._config = config
        self._store = store
        self._classifier = classifier
        self._service: Optional[ChatbotService] = None

    def initialize(self) -> bool:
        """
        Build the store and classifier, wire the service, load the cache.

        :return: True if the initial cache load succeeded
        """
        if self._service:
            return self._service.is_data_loaded()

        if self._store is None:
            self._store = create_entry_store(self._config)
        if self._classifier is None:
            self._classifier = create_intent_classifier(self._config)

        self._service = ChatbotService(self._config, self._store, self._classifier)
        return self._service.initialize()

    @property
    def service(self) -> ChatbotService:
        if not self._service:
            raise RuntimeError("App not initialized. Call initialize() first.")
        return self._service

    def chat(self, message: str, session_id: Optional[str] = None) -> ChatResponse:
        return self.service.chat(message, session_id=session_id)

    def add_entry(self, intent: Optional[str], question: str, answer: str) -> str:
        return self.service.add_entry(intent, question, answer)

    def sample_questions(self, count: int = 10) -> List[str]:
        return self.service.sample_questions(count)

    def stats(self) -> ServiceStats:
        return self.service.stats()
