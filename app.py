#!/usr/bin/env python3
"""
Flask REST API entrypoint for the Q&A chatbot.

Configuration comes from environment variables (and .env for local runs).
Serve with `python app.py` or a WSGI server pointed at `app:app`.
"""
import logging

from dotenv import load_dotenv

from qa_chatbot.app import ChatbotApp
from qa_chatbot.config_loader import load_config_from_env
from qa_chatbot.server import create_app

# Load environment variables
load_dotenv()
config = load_config_from_env(use_dotenv=False)

# Setup logging
logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

logger.info(f"Environment: {config.environment}")
logger.info(f"Dialogflow: {'ENABLED' if config.use_intent_classifier else 'DISABLED'}")
logger.info(f"Project ID: {config.project_id}")

chatbot_app = ChatbotApp(config)
if chatbot_app.initialize():
    logger.info("Server ready to accept requests!")

app = create_app(chatbot_app.service)


if __name__ == "__main__":
    logger.info(f"Server: http://localhost:{config.port}")
    app.run(host="0.0.0.0", port=config.port, debug=False, threaded=True)
