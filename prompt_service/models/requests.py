"""API request models

Required fields are optional at the schema level so that missing data is
reported as an InvalidInputError (400) by the service layer.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from prompt_service.domain.message import Message


class CreatePromptRequest(BaseModel):
    category: Optional[str] = None
    name: Optional[str] = None
    content: Optional[str] = None


class SearchRequest(BaseModel):
    query: Optional[str] = ""


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt_id: Optional[str] = Field(None, alias="promptId")
    user_request: Optional[str] = Field(None, alias="userRequest")
    model: Optional[str] = None


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

    def to_domain(self) -> Message:
        return Message(role=self.role, content=self.content)


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessage] = Field(default_factory=list)
    prompt_id: Optional[str] = Field(None, alias="promptId")
