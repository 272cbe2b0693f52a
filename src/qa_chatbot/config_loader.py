"""
Configuration loader with validation.

Builds ChatbotConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv
from .config import ChatbotConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
    get_required_env,
    validate_choice,
)


ENVIRONMENTS = ("local", "cloud")
STORE_BACKENDS = ("firestore", "memory")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def load_config_from_env(use_dotenv: bool = True) -> ChatbotConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = ChatbotApp(config)
        app.initialize()

    :param use_dotenv: Load a .env file first (local development)
    :return: Validated ChatbotConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    if use_dotenv:
        load_dotenv()

    environment = validate_choice(
        get_optional_env("ENVIRONMENT", default="local"),
        "ENVIRONMENT",
        ENVIRONMENTS,
    )

    # The managed service has no sensible demo default
    if environment == "cloud":
        project_id = get_required_env(
            "GCP_PROJECT_ID",
            description="Google Cloud project hosting Firestore and Dialogflow"
        )
    else:
        project_id = get_optional_env("GCP_PROJECT_ID", default="demo-chatbot-project")

    return ChatbotConfig(
        environment=environment,
        port=get_int_env("PORT", 3000),
        project_id=project_id,
        store_backend=validate_choice(
            get_optional_env("STORE_BACKEND", default="firestore"),
            "STORE_BACKEND",
            STORE_BACKENDS,
        ),
        firestore_emulator_host=get_optional_env(
            "FIRESTORE_EMULATOR_HOST", default="localhost:8080"
        ),
        firestore_database_id=get_optional_env(
            "FIRESTORE_DATABASE_ID", default="(default)"
        ),
        qa_collection=get_optional_env("QA_COLLECTION", default="qa_pairs"),
        use_intent_classifier=get_bool_env("USE_DIALOGFLOW", default=False),
        classifier_language_code=get_optional_env(
            "DIALOGFLOW_LANGUAGE_CODE", default="en-US"
        ),
        classifier_timeout_seconds=get_float_env("DIALOGFLOW_TIMEOUT", 5.0),
        rate_limit_enabled=get_bool_env("RATE_LIMIT_ENABLED", default=True),
        log_level=validate_choice(
            get_optional_env("LOG_LEVEL", default="INFO"),
            "LOG_LEVEL",
            LOG_LEVELS,
        ).upper(),
    )
