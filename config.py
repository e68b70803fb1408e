from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    llm_provider: str = "gemini"  # gemini | openai | anthropic

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # OpenAI / custom
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_base_url: str = "https://api.openai.com/v1"

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-5"

    # Generation
    reply_count: int = Field(default=5, ge=1)
    max_output_tokens: int = Field(default=2048, ge=1)

    # Refuse to start without a credential instead of failing at call time
    require_api_key: bool = False

    log_level: str = "INFO"

    def active_api_key(self) -> str:
        provider = self.llm_provider.lower()
        if provider == "openai":
            return self.openai_api_key
        if provider == "anthropic":
            return self.anthropic_api_key
        return self.gemini_api_key


def get_settings() -> Settings:
    return Settings()
