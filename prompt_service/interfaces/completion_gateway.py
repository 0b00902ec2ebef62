"""Completion gateway interface"""
from abc import ABC, abstractmethod
from typing import List, Optional

from prompt_service.domain.message import Message


class ICompletionGateway(ABC):
    """
    Interface for the external chat-completion provider.

    Implementations:
    - GroqCompletionClient (OpenAI-compatible HTTP API)
    - stub gateways in tests
    """

    @abstractmethod
    async def complete(
        self,
        messages: List[Message],
        model: str,
        temperature: float,
        max_tokens: int
    ) -> Optional[str]:
        """Return the completion text for a role-tagged message sequence"""
        pass

    async def close(self) -> None:
        """Release any held resources"""
        return None
