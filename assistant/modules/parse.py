import json
import logging
import re

from pydantic import ValidationError

from assistant.errors import MalformedResponse
from assistant.schemas import ReplyList, ReplySuggestion

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def unwrap_fenced(raw: str) -> str:
    """Strip a ```json ... ``` (or bare ```) fence if the whole text is one."""
    text = raw.strip()
    match = _FENCE_RE.match(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text


def parse_replies(raw: str) -> list[ReplySuggestion]:
    """Parse and validate a reply-suggestion array.

    The whole response is rejected if any element is invalid.
    """
    text = unwrap_fenced(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Reply response is not valid JSON: %s", e)
        raise MalformedResponse(
            "Lỗi khi phân tích phản hồi JSON từ AI. Vui lòng thử lại.",
            detail=str(e),
        ) from e

    try:
        return ReplyList.validate_python(data)
    except ValidationError as e:
        logger.error("Reply response has unexpected structure: %s", e)
        raise MalformedResponse(detail=str(e)) from e


def parse_summary(raw: str) -> str:
    text = raw.strip()
    if not text:
        raise MalformedResponse(detail="Empty summary response")
    return text
