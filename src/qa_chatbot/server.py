"""
Flask REST API for the Q&A chatbot.

create_app() builds the Flask application around an initialized ChatbotService.
"""
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pydantic import ValidationError

from .exceptions import DataNotLoadedError, InvalidInput, StoreUnavailable
from .request_args import AddEntryArgs, ChatArgs
from .service import ChatbotService, utc_timestamp

logger = logging.getLogger(__name__)

SERVICE_NAME = "Wikipedia General Knowledge Chatbot"
DEFAULT_SAMPLE_COUNT = 10


def _parse_count(raw) -> int:
    try:
        count = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_SAMPLE_COUNT
    return count or DEFAULT_SAMPLE_COUNT


def _request_body() -> dict:
    """JSON body, falling back to form fields for urlencoded posts."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data


def _validation_error_text(error: ValidationError, required_fields, required_text: str) -> str:
    """
    Turn a pydantic ValidationError into the API's error message.

    Problems with a required field (or a body that is not an object) map to
    required_text; anything else is reported per field.
    """
    problems = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        if not field or field in required_fields:
            return required_text
        problems.append(f"{field}: {detail['msg']}")
    return "; ".join(problems)


def create_app(service: ChatbotService) -> Flask:
    """
    Build the Flask application.

    :param service: Initialized ChatbotService
    :return: Flask app with all routes registered
    """
    config = service.config

    app = Flask(__name__)
    CORS(app)

    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=config.default_rate_limits,
        storage_uri="memory://",
        enabled=config.rate_limit_enabled,
    )
    # Route decorators only hold a weak reference to the limiter
    app.extensions["qa_chatbot_limiter"] = limiter
    if config.rate_limit_enabled:
        logger.info("Rate limiting enabled")

    @app.route("/")
    def index():
        """Service status."""
        return jsonify({
            "status": "ok",
            "service": SERVICE_NAME,
            "environment": config.environment,
            "classifierEnabled": service.classifier_enabled,
            "dataLoaded": service.is_data_loaded(),
            "totalQuestions": service.total_questions,
            "timestamp": utc_timestamp(),
        })

    @app.route("/health")
    @limiter.exempt
    def health():
        return jsonify({
            "status": "healthy",
            "dataLoaded": service.is_data_loaded(),
            "classifierEnabled": service.classifier_enabled,
        })

    @app.route("/api/chat", methods=["POST"])
    @limiter.limit(config.chat_rate_limit)
    def chat():
        """Chat endpoint."""
        try:
            try:
                args = ChatArgs.model_validate(_request_body())
            except ValidationError as e:
                message = _validation_error_text(e, ("message",), "Message is required")
                return jsonify({"error": message}), 400

            response = service.chat(args.message, session_id=args.session_id)
            return jsonify(response.to_dict())

        except InvalidInput as e:
            return jsonify({"error": str(e)}), 400
        except DataNotLoadedError as e:
            return jsonify({"error": str(e)}), 503
        except Exception as e:
            logger.error(f"Error in /api/chat: {str(e)}", exc_info=True)
            return jsonify({"error": "Internal server error", "message": str(e)}), 500

    @app.route("/api/sample-questions")
    def sample_questions():
        count = _parse_count(request.args.get("count"))
        try:
            questions = service.sample_questions(count)
        except DataNotLoadedError as e:
            return jsonify({"error": str(e)}), 503

        return jsonify({"count": len(questions), "questions": questions})

    @app.route("/api/stats")
    def stats():
        return jsonify(service.stats().to_dict())

    @app.route("/api/admin/add-qa", methods=["POST"])
    def add_qa():
        """Add a Q&A pair and reload the cache."""
        try:
            try:
                args = AddEntryArgs.model_validate(_request_body())
            except ValidationError as e:
                message = _validation_error_text(
                    e, ("question", "answer"), "question and answer are required"
                )
                return jsonify({"error": message}), 400

            doc_id = service.add_entry(args.intent, args.question, args.answer)
            return jsonify({"message": "Q&A pair added successfully", "id": doc_id})

        except InvalidInput as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.error(f"Error adding Q&A: {str(e)}", exc_info=True)
            return jsonify({"error": "Failed to add Q&A pair", "message": str(e)}), 500

    @app.route("/api/admin/reload", methods=["POST"])
    def reload_cache():
        try:
            total = service.reload()
        except StoreUnavailable as e:
            logger.error(f"Cache reload failed: {str(e)}")
            return jsonify({"error": "Failed to reload Q&A data", "message": str(e)}), 500

        return jsonify({"message": "Q&A cache reloaded", "totalQuestions": total})

    return app
