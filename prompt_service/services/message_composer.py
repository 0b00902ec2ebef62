"""Message composition for generation and chat requests.

Builds the role-tagged message sequence handed to the completion gateway,
optionally injecting a stored prompt as the system message.
"""
import logging
from typing import List, Optional, Tuple

from prompt_service.domain.message import ROLE_SYSTEM, ROLE_USER, Composition, Message
from prompt_service.domain.prompt import Prompt
from prompt_service.exceptions import InvalidInputError, PromptServiceError
from prompt_service.interfaces.prompt_repository import IPromptRepository

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_MARKER = "default"


def parse_prompt_id(prompt_id: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split a ``category/name`` id.

    Returns:
        (category, name), or None if the id is absent or malformed
    """
    if not prompt_id or "/" not in prompt_id:
        return None

    category, name = prompt_id.split("/", 1)
    if not category or not name:
        return None
    return category, name


class MessageComposer:
    """
    Composes message sequences from stored prompts and user input.

    An unresolvable prompt id (absent, malformed, unsafe or missing) is
    treated as no prompt at all; it never raises.

    Usage:
        composer = MessageComposer(repository, "You are an expert assistant.")
        composition = await composer.compose_generation("hello", "backend/nodejs-api")
        messages = await composer.compose_chat(transcript, "security/auth-patterns")
    """

    def __init__(self, repository: IPromptRepository, default_system_prompt: str):
        self.repository = repository
        self.default_system_prompt = default_system_prompt

    async def resolve_system_prompt(self, prompt_id: Optional[str]) -> Optional[Prompt]:
        """Load the prompt for ``prompt_id``, or None if it can't be resolved."""
        parsed = parse_prompt_id(prompt_id)
        if parsed is None:
            if prompt_id:
                logger.debug(f"Ignoring malformed prompt id: {prompt_id!r}")
            return None

        category, name = parsed
        if not await self.repository.exists(category, name):
            logger.debug(f"Prompt {prompt_id!r} not in store, falling back")
            return None

        try:
            return await self.repository.get_prompt(category, name)
        except PromptServiceError as e:
            logger.debug(f"Prompt {prompt_id!r} not resolved, falling back: {e}")
            return None

    async def compose_generation(
        self,
        user_request: str,
        prompt_id: Optional[str] = None
    ) -> Composition:
        """
        Build the two-message sequence for a one-shot generation.

        Args:
            user_request: User input, required
            prompt_id: Optional ``category/name`` of the system prompt

        Returns:
            Composition with [system, user] messages and the prompt used

        Raises:
            InvalidInputError: If user_request is missing or empty
        """
        if not user_request:
            raise InvalidInputError("userRequest required")

        prompt = await self.resolve_system_prompt(prompt_id)
        system_content = prompt.content if prompt else self.default_system_prompt

        return Composition(
            messages=[
                Message(role=ROLE_SYSTEM, content=system_content),
                Message(role=ROLE_USER, content=user_request),
            ],
            prompt_used=prompt.id if prompt else DEFAULT_PROMPT_MARKER
        )

    async def compose_chat(
        self,
        transcript: List[Message],
        prompt_id: Optional[str] = None
    ) -> List[Message]:
        """
        Build the message sequence for one chat turn.

        The caller owns the transcript and resends it in full every turn.
        When the prompt resolves, its content is prepended as a system
        message ahead of the whole transcript, without deduplication.
        """
        messages = list(transcript)

        prompt = await self.resolve_system_prompt(prompt_id)
        if prompt:
            messages.insert(0, Message(role=ROLE_SYSTEM, content=prompt.content))

        return messages
