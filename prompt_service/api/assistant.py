"""Generation and chat API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from prompt_service.dependencies import get_assistant_service
from prompt_service.exceptions import PromptServiceError
from prompt_service.models.requests import ChatRequest, GenerateRequest
from prompt_service.models.responses import ChatResponse, GenerateResponse
from prompt_service.services.assistant_service import AssistantService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["assistant"])


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    service: AssistantService = Depends(get_assistant_service)
):
    """
    One-shot generation.

    Uses the stored prompt named by ``promptId`` as the system message when it
    resolves, otherwise the default system message.

    Returns:
        dict: {success, response, model, promptUsed}
    """
    try:
        result = await service.generate(
            user_request=request.user_request,
            prompt_id=request.prompt_id,
            model=request.model
        )

        return GenerateResponse(
            success=True,
            response=result.response,
            model=result.model,
            prompt_used=result.prompt_used
        )

    except PromptServiceError as e:
        logger.error(f"Generation failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    service: AssistantService = Depends(get_assistant_service)
):
    """
    One chat turn.

    The client sends the whole transcript every turn and appends the returned
    text to its own copy; no conversation state is kept here.
    """
    try:
        response = await service.chat(
            messages=[m.to_domain() for m in request.messages],
            prompt_id=request.prompt_id
        )
        return ChatResponse(response=response)

    except PromptServiceError as e:
        logger.error(f"Chat failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
