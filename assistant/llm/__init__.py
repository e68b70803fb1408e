from assistant.llm.base import LLMClient, LLMResponse
from assistant.llm.factory import get_llm_client

__all__ = ["LLMClient", "LLMResponse", "get_llm_client"]
