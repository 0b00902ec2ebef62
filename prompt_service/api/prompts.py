"""Prompt library API endpoints (thin, delegates to the store and search service)."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from prompt_service.dependencies import get_prompt_repository, get_search_service
from prompt_service.exceptions import PromptServiceError
from prompt_service.interfaces.prompt_repository import IPromptRepository
from prompt_service.models.requests import CreatePromptRequest, SearchRequest
from prompt_service.models.responses import (
    CategoryResponse,
    CreatePromptResponse,
    DeletePromptResponse,
    PromptResponse,
    SearchResponse,
    SearchResultResponse,
)
from prompt_service.services.search_service import PromptSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["prompts"])


@router.get("/prompts", response_model=List[CategoryResponse])
async def list_prompts(
    repository: IPromptRepository = Depends(get_prompt_repository)
):
    """
    List every category with its prompts.

    Never fails: a store error yields an empty list.
    """
    categories = await repository.list_categories()
    return [CategoryResponse.from_domain(c) for c in categories]


@router.get("/prompts/{category}/{name}", response_model=PromptResponse)
async def get_prompt(
    category: str,
    name: str,
    repository: IPromptRepository = Depends(get_prompt_repository)
):
    """Get a prompt with its full content."""
    try:
        prompt = await repository.get_prompt(category, name)
        return PromptResponse.from_domain(prompt)

    except PromptServiceError as e:
        logger.warning(f"Get prompt {category}/{name} failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.post("/prompts", response_model=CreatePromptResponse)
async def create_prompt(
    request: CreatePromptRequest,
    repository: IPromptRepository = Depends(get_prompt_repository)
):
    """
    Create or overwrite a prompt.

    The category and name are sanitized; the response carries the resulting id.
    """
    try:
        prompt_id = await repository.create_prompt(
            category=request.category,
            name=request.name,
            content=request.content
        )
        return CreatePromptResponse(success=True, id=prompt_id)

    except PromptServiceError as e:
        logger.warning(f"Create prompt failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.delete("/prompts/{category}/{name}", response_model=DeletePromptResponse)
async def delete_prompt(
    category: str,
    name: str,
    repository: IPromptRepository = Depends(get_prompt_repository)
):
    """Delete a prompt. Its category directory is kept even when left empty."""
    try:
        await repository.delete_prompt(category, name)
        return DeletePromptResponse(success=True)

    except PromptServiceError as e:
        logger.warning(f"Delete prompt {category}/{name} failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())


@router.post("/search", response_model=SearchResponse)
async def search_prompts(
    request: SearchRequest,
    service: PromptSearchService = Depends(get_search_service)
):
    """Case-insensitive substring search over category, file name and content."""
    query = request.query or ""
    results = await service.search(query)

    return SearchResponse(
        query=query,
        count=len(results),
        results=[SearchResultResponse.from_domain(r) for r in results]
    )
