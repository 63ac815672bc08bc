"""Logging setup for UI shells embedding the scanner core."""

import logging

from originscan.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logging for the scanner."""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Set level for our package specifically
    logging.getLogger("originscan").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_settings(settings: Settings) -> None:
    """Log current settings for debugging. Secrets are never logged."""
    logger.info("=" * 60)
    logger.info("OriginScan Configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Inference:")
    logger.info("    Provider: %s", settings.inference_provider)
    logger.info("    Timeout: %.1fs", settings.inference_timeout)
    if settings.inference_provider == "gemini":
        logger.info("    Model: %s", settings.gemini_model)
        logger.info(
            "    API key: %s",
            "configured" if settings.gemini_api_key else "MISSING",
        )
    else:
        logger.info("    Model: %s", settings.ollama_model)
        logger.info("    Ollama URL: %s", settings.ollama_base_url)
    logger.info("  History size: %d", settings.history_max_size)
    logger.info("=" * 60)
