from assistant.errors import ConfigurationError
from assistant.llm.base import LLMClient


def get_llm_client(settings=None) -> LLMClient:
    if settings is None:
        from config import get_settings
        settings = get_settings()

    provider = settings.llm_provider.lower()

    if provider == "gemini":
        from assistant.llm.gemini_client import GeminiClient
        return GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        )

    if provider == "openai":
        from assistant.llm.openai_client import OpenAIClient
        return OpenAIClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url or None,
        )

    if provider == "anthropic":
        from assistant.llm.anthropic_client import AnthropicClient
        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
        )

    raise ConfigurationError(detail=f"Unknown LLM_PROVIDER: {provider!r}")
