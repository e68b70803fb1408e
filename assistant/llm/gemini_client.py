"""Google Gemini client built on the google-genai SDK."""
import logging

import httpx
from google import genai
from google.genai import errors, types

from assistant.errors import AuthenticationFailure, TransportFailure
from assistant.llm.base import LLMClient, LLMResponse

logger = logging.getLogger(__name__)

_AUTH_STATUS_CODES = (401, 403)


class GeminiClient(LLMClient):
    def __init__(self, api_key: str, model: str):
        self._api_key = api_key
        self._model = model
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        # Only the configured key is used; the SDK's GOOGLE_API_KEY fallback
        # is never consulted.
        if not self._api_key:
            raise AuthenticationFailure(detail="No Gemini API key configured")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def complete(
        self,
        user: str,
        *,
        system: str | None = None,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        config = types.GenerateContentConfig(
            system_instruction=system,
            max_output_tokens=max_tokens,
            response_mime_type="application/json" if json_mode else None,
        )
        client = self._get_client()
        try:
            resp = await client.aio.models.generate_content(
                model=self._model,
                contents=[types.Content(role="user", parts=[types.Part(text=user)])],
                config=config,
            )
        except errors.APIError as e:
            raise _map_api_error(e) from e
        except httpx.HTTPError as e:
            raise TransportFailure(detail=str(e) or type(e).__name__) from e

        content = resp.text or ""
        usage = resp.usage_metadata
        tokens = (usage.total_token_count or 0) if usage else 0
        return LLMResponse(content=content, tokens_used=tokens, model=self._model)


def _map_api_error(exc: errors.APIError) -> Exception:
    message = str(getattr(exc, "message", "") or exc)
    if exc.code in _AUTH_STATUS_CODES or "api key not valid" in message.lower():
        logger.warning("Gemini rejected the credential (HTTP %s)", exc.code)
        return AuthenticationFailure(detail=message)
    logger.error("Gemini request failed (HTTP %s): %s", exc.code, message)
    return TransportFailure(detail=message)
