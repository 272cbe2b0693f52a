class ChatbotError(Exception):
    """Base exception for the Q&A chatbot service."""


class ConfigurationError(ChatbotError):
    """Raised when required configuration is missing or invalid."""


class StoreUnavailable(ChatbotError):
    """Raised when the durable entry store cannot be reached or queried."""


class ClassifierFailure(ChatbotError):
    """Raised when the external intent classifier errors or times out."""


class InvalidInput(ChatbotError):
    """Raised when a request is missing required fields."""


class DataNotLoadedError(ChatbotError):
    """Raised when the entry cache is used before its first successful load."""
