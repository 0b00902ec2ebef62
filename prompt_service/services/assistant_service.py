"""Generation and chat orchestration (business logic)"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from prompt_service.domain.message import Message
from prompt_service.interfaces.completion_gateway import ICompletionGateway
from prompt_service.services.message_composer import MessageComposer

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    response: Optional[str]
    model: str
    prompt_used: str


class AssistantService:
    """Composes requests and forwards them to the completion gateway (DIP - depends on interfaces)"""

    def __init__(
        self,
        composer: MessageComposer,
        gateway: ICompletionGateway,
        default_model: str,
        temperature: float = 0.7,
        max_tokens: int = 4096
    ):
        self.composer = composer
        self.gateway = gateway
        self.default_model = default_model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(
        self,
        user_request: str,
        prompt_id: Optional[str] = None,
        model: Optional[str] = None
    ) -> GenerationResult:
        """
        One-shot generation with an optional stored system prompt.

        The model output is returned verbatim.
        """
        composition = await self.composer.compose_generation(user_request, prompt_id)
        model = model or self.default_model

        logger.info(f"Generating with prompt={composition.prompt_used}, model={model}")
        response = await self.gateway.complete(
            composition.messages,
            model=model,
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )

        return GenerationResult(
            response=response,
            model=model,
            prompt_used=composition.prompt_used
        )

    async def chat(
        self,
        messages: List[Message],
        prompt_id: Optional[str] = None
    ) -> Optional[str]:
        """
        One chat turn over a caller-owned transcript.

        Chat always targets the default model.
        """
        chat_messages = await self.composer.compose_chat(messages, prompt_id)

        logger.info(f"Chat turn: {len(messages)} transcript messages, prompt={prompt_id or 'none'}")
        return await self.gateway.complete(
            chat_messages,
            model=self.default_model,
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )
