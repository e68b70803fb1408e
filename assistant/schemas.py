from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter


class GenerationMode(str, Enum):
    REPLY = "reply"
    SUMMARY = "summary"


class ReplyStyle(str, Enum):
    HUMOROUS = "humorous"
    SUPPORTIVE = "supportive"
    INQUISITIVE = "inquisitive"
    ANALYTICAL = "analytical"


class ReplySuggestion(BaseModel):
    """One reply in the article's language plus its Vietnamese translation.

    Only the wire names (``originalReply``, ``vietnameseTranslation``) are
    accepted on input.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    original_reply: StrictStr = Field(alias="originalReply")
    vietnamese_translation: StrictStr = Field(alias="vietnameseTranslation")


ReplyList = TypeAdapter(Annotated[list[ReplySuggestion], Field(min_length=1)])


class ReplyResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal[GenerationMode.REPLY] = GenerationMode.REPLY
    request_id: int
    replies: list[ReplySuggestion] = Field(min_length=1)


class SummaryResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal[GenerationMode.SUMMARY] = GenerationMode.SUMMARY
    request_id: int
    summary: str = Field(min_length=1)


GenerationResult = Annotated[Union[ReplyResult, SummaryResult], Field(discriminator="mode")]

ResultAdapter = TypeAdapter(GenerationResult)
