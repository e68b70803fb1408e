import itertools
import logging
from collections.abc import Mapping

from assistant.errors import GenerationError, TransportFailure
from assistant.llm.base import LLMClient, LLMResponse
from assistant.modules.parse import parse_replies, parse_summary
from assistant.modules.prompt import build_prompt, coerce_mode
from assistant.prompts import reply as reply_prompts
from assistant.schemas import (
    GenerationMode,
    GenerationResult,
    ReplyResult,
    ReplyStyle,
    ReplySuggestion,
    SummaryResult,
)

logger = logging.getLogger(__name__)


class GenerationClient:
    """Turns article text into reply suggestions or a summary post.

    One instance is built at startup and shared by the UI layer. Each call
    makes exactly one provider request; nothing is retried, deduplicated or
    cancelled. Overlapping calls resolve independently, and ``is_latest``
    tells the caller whether a result still belongs to the newest call.
    """

    def __init__(
        self,
        llm: LLMClient,
        *,
        directives: Mapping[ReplyStyle, str] = reply_prompts.STYLE_DIRECTIVES,
        reply_count: int = 5,
        max_tokens: int = 2048,
    ) -> None:
        self._llm = llm
        self._directives = directives
        self._reply_count = reply_count
        self._max_tokens = max_tokens
        self._request_ids = itertools.count(1)
        self._latest_request_id = 0

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    def is_latest(self, request_id: int) -> bool:
        return request_id == self._latest_request_id

    async def generate(self, prompt: str, *, json_mode: bool = False) -> str:
        """Send one prompt and return the raw response text."""
        logger.info("Generation sending (json_mode=%s, %d chars)", json_mode, len(prompt))
        try:
            response: LLMResponse = await self._llm.complete(
                prompt,
                max_tokens=self._max_tokens,
                json_mode=json_mode,
            )
        except GenerationError as e:
            logger.error("Generation failed: %s (%s)", e.kind, e.detail or e.message)
            raise
        except Exception as e:
            logger.exception("Generation failed with unexpected provider error")
            raise TransportFailure(detail=str(e) or type(e).__name__) from e
        logger.info("Generation succeeded (%d tokens, model=%s)", response.tokens_used, response.model)
        return response.content

    async def generate_structured(
        self, content: str, style: ReplyStyle | str
    ) -> list[ReplySuggestion]:
        prompt = build_prompt(
            content,
            GenerationMode.REPLY,
            style,
            directives=self._directives,
            reply_count=self._reply_count,
        )
        raw = await self.generate(prompt, json_mode=True)
        return parse_replies(raw)

    async def generate_summary(self, content: str) -> str:
        prompt = build_prompt(content, GenerationMode.SUMMARY)
        raw = await self.generate(prompt)
        return parse_summary(raw)

    async def run(
        self,
        content: str,
        mode: GenerationMode | str,
        style: ReplyStyle | str | None = None,
    ) -> GenerationResult:
        """Entry point for the UI layer."""
        request_id = next(self._request_ids)
        self._latest_request_id = request_id

        mode = coerce_mode(mode)
        if mode is GenerationMode.REPLY:
            replies = await self.generate_structured(content, style)
            return ReplyResult(request_id=request_id, replies=replies)

        summary = await self.generate_summary(content)
        return SummaryResult(request_id=request_id, summary=summary)
