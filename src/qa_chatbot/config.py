from dataclasses import dataclass, field
from typing import List


@dataclass
class ChatbotConfig:
    # Deployment
    environment: str = "local"
    port: int = 3000

    # Durable store
    project_id: str = "demo-chatbot-project"
    store_backend: str = "firestore"
    firestore_emulator_host: str = "localhost:8080"
    firestore_database_id: str = "(default)"
    qa_collection: str = "qa_pairs"

    # Intent classifier
    use_intent_classifier: bool = False
    classifier_language_code: str = "en-US"
    classifier_timeout_seconds: float = 5.0

    # HTTP
    rate_limit_enabled: bool = True
    default_rate_limits: List[str] = field(
        default_factory=lambda: ["200 per hour", "30 per minute"]
    )
    chat_rate_limit: str = "20 per minute"

    # Logging
    log_level: str = "INFO"

    @property
    def is_local(self) -> bool:
        return self.environment == "local"

    @property
    def is_cloud(self) -> bool:
        return self.environment == "cloud"
