import pytest

from assistant.llm.base import LLMClient, LLMResponse


class FakeLLM(LLMClient):
    def __init__(self, content: str = "", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    async def complete(
        self,
        user: str,
        *,
        system: str | None = None,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        self.calls.append(
            {"user": user, "system": system, "max_tokens": max_tokens, "json_mode": json_mode}
        )
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, tokens_used=10, model="fake-model")


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    # Keep developer .env files and real keys out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in (
        "LLM_PROVIDER",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "REQUIRE_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
