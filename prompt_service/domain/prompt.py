"""Prompt domain entities"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class PromptSummary:
    """Listing entry for a stored prompt (no content)"""
    id: str
    name: str
    category: str


@dataclass
class Prompt:
    """A stored text template, keyed by ``category/name``"""
    category: str
    name: str
    content: str

    @property
    def id(self) -> str:
        return make_prompt_id(self.category, self.name)

    def summary(self) -> PromptSummary:
        return PromptSummary(id=self.id, name=self.name, category=self.category)


@dataclass
class Category:
    """A named grouping of prompts, backed by one storage directory"""
    name: str
    prompts: List[PromptSummary] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.prompts)


@dataclass
class SearchResult:
    """A prompt matched by a substring search"""
    id: str
    category: str
    name: str
    preview: str


def make_prompt_id(category: str, name: str) -> str:
    return f"{category}/{name}"
