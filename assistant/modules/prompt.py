"""
Pure-function prompt assembly.

No LLM involvement: the prompt is a function of the content, the mode, the
style, and the directive table handed in.
"""
import logging
from collections.abc import Mapping

from assistant.errors import InvalidInput, UnknownStyle
from assistant.prompts import reply as reply_prompts
from assistant.prompts import summary as summary_prompts
from assistant.schemas import GenerationMode, ReplyStyle

logger = logging.getLogger(__name__)


def build_prompt(
    content: str,
    mode: GenerationMode | str,
    style: ReplyStyle | str | None = None,
    *,
    directives: Mapping[ReplyStyle, str] = reply_prompts.STYLE_DIRECTIVES,
    reply_count: int = 5,
) -> str:
    """Return the full instruction text for one generation call.

    Raises InvalidInput for blank content or an unknown mode, and
    UnknownStyle when reply mode gets a style outside the directive table.
    """
    if not content or not content.strip():
        raise InvalidInput()

    mode = coerce_mode(mode)

    if mode is GenerationMode.SUMMARY:
        template = summary_prompts.TEMPLATE.format(contact_block=summary_prompts.CONTACT_BLOCK)
        return "\n\n".join([
            template,
            summary_prompts.CONTENT_TEMPLATE.format(content=content),
        ])

    style = coerce_style(style)
    directive = directives.get(style)
    if directive is None:
        raise UnknownStyle(detail=f"No directive configured for style {style.value!r}")

    contract = reply_prompts.OUTPUT_CONTRACT.format(
        count=reply_count,
        example=reply_prompts.example_array(reply_count),
    )
    logger.debug("Built %s reply prompt for %d chars of content", style.value, len(content))
    return "\n\n".join([
        directive,
        contract,
        reply_prompts.CONTENT_TEMPLATE.format(content=content),
    ])


def coerce_mode(mode: GenerationMode | str) -> GenerationMode:
    try:
        return GenerationMode(mode)
    except ValueError as e:
        raise InvalidInput(detail=f"Unknown generation mode: {mode!r}") from e


def coerce_style(style: ReplyStyle | str | None) -> ReplyStyle:
    try:
        return ReplyStyle(style)
    except ValueError as e:
        raise UnknownStyle(detail=f"Unknown reply style: {style!r}") from e
