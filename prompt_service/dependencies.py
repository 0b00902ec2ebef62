"""Dependency injection for services.

The store and the completion gateway are process-wide singletons; the
services built on top of them are cheap and created per request so that
tests can swap either dependency through ``app.dependency_overrides``.
"""
from pathlib import Path

from fastapi import Depends

from prompt_service.clients.groq_client import GroqCompletionClient
from prompt_service.config import settings
from prompt_service.interfaces.completion_gateway import ICompletionGateway
from prompt_service.interfaces.prompt_repository import IPromptRepository
from prompt_service.repositories.file_prompt_repository import FilePromptRepository
from prompt_service.services.assistant_service import AssistantService
from prompt_service.services.message_composer import MessageComposer
from prompt_service.services.search_service import PromptSearchService


# Singletons
_repository = None
_gateway = None


def get_prompt_repository() -> IPromptRepository:
    """
    Get the prompt store (singleton).

    The store root is fixed from settings at first use.

    Returns:
        FilePromptRepository instance (implements IPromptRepository)
    """
    global _repository
    if _repository is None:
        _repository = FilePromptRepository(
            Path(settings.PROMPTS_DIR),
            extension=settings.PROMPT_FILE_EXTENSION
        )
    return _repository


def get_completion_gateway() -> ICompletionGateway:
    """
    Get the completion gateway (singleton).

    Returns:
        GroqCompletionClient instance (implements ICompletionGateway)
    """
    global _gateway
    if _gateway is None:
        _gateway = GroqCompletionClient(
            base_url=settings.GROQ_BASE_URL,
            api_key=settings.GROQ_API_KEY,
            timeout=settings.COMPLETION_TIMEOUT_SECONDS
        )
    return _gateway


async def close_completion_gateway():
    """Close the gateway's HTTP client if one was created."""
    global _gateway
    if _gateway is not None:
        await _gateway.close()
        _gateway = None


def get_search_service(
    repository: IPromptRepository = Depends(get_prompt_repository)
) -> PromptSearchService:
    return PromptSearchService(repository, extension=settings.PROMPT_FILE_EXTENSION)


def get_message_composer(
    repository: IPromptRepository = Depends(get_prompt_repository)
) -> MessageComposer:
    return MessageComposer(repository, settings.DEFAULT_SYSTEM_PROMPT)


def get_assistant_service(
    composer: MessageComposer = Depends(get_message_composer),
    gateway: ICompletionGateway = Depends(get_completion_gateway)
) -> AssistantService:
    return AssistantService(
        composer,
        gateway,
        default_model=settings.DEFAULT_MODEL,
        temperature=settings.DEFAULT_TEMPERATURE,
        max_tokens=settings.DEFAULT_MAX_TOKENS
    )
