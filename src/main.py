"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
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


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the health check, NiceGUI handles the UI.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Socratica",
        favicon="🎓",
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI page on its own server, without the FastAPI host.

    Useful for UI development.
    """
    from src.ui.chat_page import main as run_ui

    run_ui()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to run only the NiceGUI server on port 8080.
    Default is integrated mode (FastAPI + NiceGUI on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Socratica in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
