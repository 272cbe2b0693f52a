"""
Q&A chatbot: resolves free-text questions against a curated question/answer
collection using an intent classifier with keyword-matching fallback.
"""
from .app import ChatbotApp
from .config import ChatbotConfig
from .config_loader import load_config_from_env
from .schemas import ChatResponse, ConfidenceTier, MatchResult, ResolutionMethod

__all__ = [
    "ChatbotApp",
    "ChatbotConfig",
    "load_config_from_env",
    "ChatResponse",
    "ConfidenceTier",
    "MatchResult",
    "ResolutionMethod",
]
