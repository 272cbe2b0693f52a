"""
Intent classification adapters.

The pipeline only sees the IntentClassifier protocol: Dialogflow in production,
StaticIntentClassifier for tests and offline runs.
"""
from .base import IntentClassifier
from .static_classifier import StaticIntentClassifier, DisabledIntentClassifier
from .classifier_factory import create_intent_classifier

__all__ = [
    "IntentClassifier",
    "StaticIntentClassifier",
    "DisabledIntentClassifier",
    "create_intent_classifier",
]
