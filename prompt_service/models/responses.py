"""API response models"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from prompt_service.domain.prompt import Category, Prompt, PromptSummary, SearchResult


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


class PromptSummaryResponse(BaseModel):
    id: str
    name: str
    category: str

    @classmethod
    def from_domain(cls, summary: PromptSummary):
        return cls(id=summary.id, name=summary.name, category=summary.category)


class CategoryResponse(BaseModel):
    name: str
    count: int
    prompts: List[PromptSummaryResponse]

    @classmethod
    def from_domain(cls, category: Category):
        return cls(
            name=category.name,
            count=category.count,
            prompts=[PromptSummaryResponse.from_domain(p) for p in category.prompts]
        )


class PromptResponse(BaseModel):
    id: str
    category: str
    name: str
    content: str

    @classmethod
    def from_domain(cls, prompt: Prompt):
        return cls(
            id=prompt.id,
            category=prompt.category,
            name=prompt.name,
            content=prompt.content
        )


class CreatePromptResponse(BaseModel):
    success: bool
    id: str


class DeletePromptResponse(BaseModel):
    success: bool


class SearchResultResponse(BaseModel):
    id: str
    category: str
    name: str
    preview: str

    @classmethod
    def from_domain(cls, result: SearchResult):
        return cls(
            id=result.id,
            category=result.category,
            name=result.name,
            preview=result.preview
        )


class SearchResponse(BaseModel):
    query: str
    count: int
    results: List[SearchResultResponse]


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    response: Optional[str]
    model: str
    prompt_used: str = Field(alias="promptUsed")


class ChatResponse(BaseModel):
    response: Optional[str]
