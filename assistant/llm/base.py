from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    content: str
    tokens_used: int = 0
    model: str = ""


class LLMClient(ABC):
    """Abstract base for all LLM providers.

    Implementations translate their SDK's credential errors into
    ``AuthenticationFailure`` and everything else that goes wrong on the wire
    into ``TransportFailure``.
    """

    @abstractmethod
    async def complete(
        self,
        user: str,
        *,
        system: str | None = None,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Send a single-turn completion request.

        json_mode asks the provider to constrain output to JSON where the
        provider supports such a hint.
        """
        ...
