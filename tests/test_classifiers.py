"""
Tests for intent classifier adapters.
"""
import pytest
from unittest.mock import Mock
from google.api_core import exceptions as google_exceptions

from qa_chatbot.classifier import (
    DisabledIntentClassifier,
    StaticIntentClassifier,
    create_intent_classifier,
)
from qa_chatbot.classifier.dialogflow_classifier import DialogflowIntentClassifier
from qa_chatbot.config import ChatbotConfig
from qa_chatbot.exceptions import ClassifierFailure


def _dialogflow_response(display_name, confidence, fulfillment_text=""):
    response = Mock()
    response.query_result.intent.display_name = display_name
    response.query_result.intent_detection_confidence = confidence
    response.query_result.fulfillment_text = fulfillment_text
    return response


@pytest.fixture
def sessions_client():
    client = Mock()
    client.session_path.return_value = "projects/demo/agent/sessions/s-1"
    return client


class TestStaticIntentClassifier:
    """Tests for the deterministic classifier."""

    def test_normalized_lookup(self):
        classifier = StaticIntentClassifier({"who wrote hamlet": ("hamlet_author", 0.9)})

        prediction = classifier.classify("  Who WROTE Hamlet?! ", "s-1")

        assert prediction.intent_label == "hamlet_author"
        assert prediction.confidence == 0.9

    def test_unknown_phrase(self):
        classifier = StaticIntentClassifier({"who wrote hamlet": ("hamlet_author", 0.9)})

        assert classifier.classify("who wrote macbeth", "s-1") is None

    def test_rejects_out_of_range_confidence(self):
        with pytest.raises(ValueError):
            StaticIntentClassifier({"hello": ("greeting", 1.5)})

    def test_disabled(self):
        classifier = DisabledIntentClassifier()

        assert classifier.enabled is False
        assert classifier.classify("anything", "s-1") is None


class TestDialogflowIntentClassifier:
    """Tests for the Dialogflow adapter with a mocked SessionsClient."""

    def test_detected_intent(self, sessions_client):
        sessions_client.detect_intent.return_value = _dialogflow_response("capital_france", 0.92, "Paris")
        classifier = DialogflowIntentClassifier("demo", client=sessions_client, timeout=3.0)

        prediction = classifier.classify("capital of france", "s-1")

        assert prediction.intent_label == "capital_france"
        assert prediction.confidence == pytest.approx(0.92)
        assert prediction.fulfillment_text == "Paris"
        sessions_client.session_path.assert_called_once_with("demo", "s-1")
        _, kwargs = sessions_client.detect_intent.call_args
        assert kwargs["timeout"] == 3.0
        assert kwargs["request"]["session"] == "projects/demo/agent/sessions/s-1"

    def test_no_intent(self, sessions_client):
        sessions_client.detect_intent.return_value = _dialogflow_response("", 0.0)
        classifier = DialogflowIntentClassifier("demo", client=sessions_client)

        assert classifier.classify("gibberish", "s-1") is None

    def test_api_error_becomes_classifier_failure(self, sessions_client):
        sessions_client.detect_intent.side_effect = google_exceptions.ServiceUnavailable("unavailable")
        classifier = DialogflowIntentClassifier("demo", client=sessions_client)

        with pytest.raises(ClassifierFailure):
            classifier.classify("capital of france", "s-1")


class TestClassifierFactory:
    """Tests for create_intent_classifier()."""

    def test_disabled_by_default(self):
        classifier = create_intent_classifier(ChatbotConfig())

        assert isinstance(classifier, DisabledIntentClassifier)

    def test_dialogflow_when_enabled(self, monkeypatch):
        client = Mock()
        monkeypatch.setattr(
            "qa_chatbot.classifier.dialogflow_classifier.dialogflow.SessionsClient",
            Mock(return_value=client),
        )

        classifier = create_intent_classifier(ChatbotConfig(use_intent_classifier=True))

        assert isinstance(classifier, DialogflowIntentClassifier)
        assert classifier.enabled is True
