import logging
from ..config import ChatbotConfig
from .base import IntentClassifier
from .static_classifier import DisabledIntentClassifier

logger = logging.getLogger(__name__)


def create_intent_classifier(config: ChatbotConfig) -> IntentClassifier:
    """
    Factory returning the intent classifier for this deployment.

    Returns a disabled classifier unless ``config.use_intent_classifier`` is set.

    :param config: ChatbotConfig instance
    :return: IntentClassifier implementation
    """
    if not config.use_intent_classifier:
        logger.info("Dialogflow disabled - using keyword matching")
        return DisabledIntentClassifier()

    from .dialogflow_classifier import DialogflowIntentClassifier
    return DialogflowIntentClassifier(
        project_id=config.project_id,
        language_code=config.classifier_language_code,
        timeout=config.classifier_timeout_seconds,
    )
