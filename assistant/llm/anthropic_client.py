import logging

import anthropic

from assistant.errors import AuthenticationFailure, TransportFailure
from assistant.llm.base import LLMClient, LLMResponse

logger = logging.getLogger(__name__)


class AnthropicClient(LLMClient):
    def __init__(self, api_key: str, model: str):
        self._client = anthropic.AsyncAnthropic(api_key=api_key, max_retries=0)
        self._model = model

    async def complete(
        self,
        user: str,
        *,
        system: str | None = None,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        kwargs = {}
        if system:
            kwargs["system"] = system
        try:
            msg = await self._client.messages.create(
                model=self._model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": user}],
                **kwargs,
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            logger.warning("Anthropic rejected the credential: %s", e)
            raise AuthenticationFailure(detail=str(e)) from e
        except TypeError as e:
            # Raised by the SDK while building headers when no key is set
            if "authentication" not in str(e).lower():
                raise
            logger.warning("Anthropic client has no credential: %s", e)
            raise AuthenticationFailure(detail=str(e)) from e
        except anthropic.AnthropicError as e:
            logger.error("Anthropic request failed: %s", e)
            raise TransportFailure(detail=str(e)) from e

        content = msg.content[0].text if msg.content else ""
        tokens = (msg.usage.input_tokens or 0) + (msg.usage.output_tokens or 0)
        return LLMResponse(content=content, tokens_used=tokens, model=self._model)
