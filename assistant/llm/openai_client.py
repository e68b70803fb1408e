import logging

import openai
from openai import AsyncOpenAI

from assistant.errors import AuthenticationFailure, TransportFailure
from assistant.llm.base import LLMClient, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIClient(LLMClient):
    def __init__(self, api_key: str, model: str, base_url: str | None = None):
        kwargs = {"api_key": api_key, "max_retries": 0}
        if base_url:
            kwargs["base_url"] = base_url
        self._client = AsyncOpenAI(**kwargs)
        self._model = model

    async def complete(
        self,
        user: str,
        *,
        system: str | None = None,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        # json_object mode only admits a top-level object, so the JSON array
        # contract lives in the prompt alone.
        messages = [{"role": "user", "content": user}]
        if system:
            messages.insert(0, {"role": "system", "content": system})
        try:
            resp = await self._client.chat.completions.create(
                model=self._model,
                max_tokens=max_tokens,
                messages=messages,
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            logger.warning("OpenAI rejected the credential: %s", e)
            raise AuthenticationFailure(detail=str(e)) from e
        except openai.OpenAIError as e:
            logger.error("OpenAI request failed: %s", e)
            raise TransportFailure(detail=str(e)) from e

        content = resp.choices[0].message.content or ""
        tokens = resp.usage.total_tokens if resp.usage else 0
        return LLMResponse(content=content, tokens_used=tokens, model=self._model)
