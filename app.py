"""Article Reply Assistant - process bootstrap.

The UI layer calls ``create_generator()`` once at startup and keeps the
returned client for the lifetime of the process.
"""
import logging
import sys

from assistant.errors import ConfigurationError
from assistant.llm import get_llm_client
from assistant.modules.generate import GenerationClient
from config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=settings.log_level.upper(),
        stream=sys.stdout,
    )


def check_credentials(settings: Settings) -> None:
    """Warn about a missing API key, or refuse to start if configured to."""
    if settings.active_api_key():
        return
    provider = settings.llm_provider.lower()
    if settings.require_api_key:
        raise ConfigurationError(detail=f"No API key configured for provider {provider!r}")
    logger.warning(
        "API key for provider %r is not set. Generation calls will fail to authenticate.",
        provider,
    )


def create_generator(settings: Settings | None = None) -> GenerationClient:
    settings = settings or get_settings()
    check_credentials(settings)
    llm = get_llm_client(settings)
    logger.info("Generator ready (provider=%s).", settings.llm_provider)
    return GenerationClient(
        llm,
        reply_count=settings.reply_count,
        max_tokens=settings.max_output_tokens,
    )
