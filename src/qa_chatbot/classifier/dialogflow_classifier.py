"""
Dialogflow adapter for the IntentClassifier protocol.
"""
import logging
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import dialogflow

from ..exceptions import ClassifierFailure
from ..schemas import IntentPrediction

logger = logging.getLogger(__name__)


class DialogflowIntentClassifier:
    """
    Detects intents with a Dialogflow ES agent.

    Each chat session maps to a Dialogflow session path so the agent can
    keep its own conversational context.
    """

    def __init__(
        self,
        project_id: str,
        language_code: str = "en-US",
        timeout: Optional[float] = 5.0,
        client: Optional[dialogflow.SessionsClient] = None,
    ):
        """
        :param project_id: GCP project owning the Dialogflow agent
        :param language_code: Language of incoming utterances
        :param timeout: Per-call timeout in seconds
        :param client: Pre-built SessionsClient (created from ambient credentials if None)
        """
        self._project_id = project_id
        self._language_code = language_code
        self._timeout = timeout
        self._client = client or dialogflow.SessionsClient()
        logger.info("Dialogflow client initialized")

    @property
    def enabled(self) -> bool:
        return True

    def classify(self, utterance: str, session_id: str) -> Optional[IntentPrediction]:
        session = self._client.session_path(self._project_id, session_id)
        text_input = dialogflow.TextInput(text=utterance, language_code=self._language_code)
        query_input = dialogflow.QueryInput(text=text_input)

        try:
            response = self._client.detect_intent(
                request={"session": session, "query_input": query_input},
                timeout=self._timeout,
            )
        except google_exceptions.GoogleAPIError as e:
            raise ClassifierFailure(f"Dialogflow detect_intent failed: {e}") from e

        result = response.query_result
        intent_name = result.intent.display_name if result.intent else ""
        if not intent_name:
            logger.info("Dialogflow returned no intent")
            return None

        confidence = min(max(float(result.intent_detection_confidence), 0.0), 1.0)
        logger.info(f"Dialogflow detected intent: {intent_name} ({confidence * 100:.1f}%)")

        return IntentPrediction(
            intent_label=intent_name,
            confidence=confidence,
            fulfillment_text=result.fulfillment_text or None,
        )
