"""
Application entry point.

This module only serves as the application entry point. All configuration
and wiring is delegated to specialized modules.
"""

from codeflix.config.settings import get_settings
from codeflix.core.app_factory import create_app
from codeflix.core.shared import configure_logging, get_logger

settings = get_settings()

configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT, log_file=settings.LOG_FILE)

logger = get_logger(__name__)

# Create application using factory
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "codeflix.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
