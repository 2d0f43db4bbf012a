"""Main application entry point.

Runs the relay API with uvicorn, or probes which models the configured
key can reach. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_server() -> None:
    """Serve the relay API."""
    import uvicorn

    from chat_relay.api.app import app

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))

    logger.info(f"Server running on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_probe() -> int:
    """Report the first model that answers; non-zero exit if none do."""
    from chat_relay.llm.probe import ProbeError, probe_models

    try:
        result = probe_models()
    except ProbeError as e:
        logger.error(str(e))
        return 1

    logger.info(f"{result.model} is available: {result.output_text}")
    return 0


def main() -> None:
    """Application entry point.

    Set RUN_MODE=probe to check model availability instead of serving.
    """
    mode = os.getenv("RUN_MODE", "serve").lower()

    logger.info(f"Starting Chat Relay in {mode} mode")

    if mode == "probe":
        sys.exit(run_probe())
    run_server()


if __name__ == "__main__":
    main()
