"""Prompt repository interface"""
from abc import ABC, abstractmethod
from typing import AsyncIterator, Dict, List, Optional

from prompt_service.domain.prompt import Category, Prompt


class IPromptRepository(ABC):
    """Interface for prompt storage"""

    @abstractmethod
    async def bootstrap(self, defaults: Optional[Dict[str, str]] = None) -> List[str]:
        """Write the default prompt set where absent, return written ids"""
        pass

    @abstractmethod
    async def list_categories(self) -> List[Category]:
        """List categories with their prompt summaries"""
        pass

    @abstractmethod
    async def get_prompt(self, category: str, name: str) -> Prompt:
        """Get prompt by category and name"""
        pass

    @abstractmethod
    async def create_prompt(self, category: str, name: str, content: str) -> str:
        """Create or overwrite a prompt, return its id"""
        pass

    @abstractmethod
    async def delete_prompt(self, category: str, name: str) -> None:
        """Delete prompt"""
        pass

    @abstractmethod
    async def exists(self, category: str, name: str) -> bool:
        """Check whether a prompt exists"""
        pass

    @abstractmethod
    def iter_prompts(self) -> AsyncIterator[Prompt]:
        """Iterate every stored prompt with its content"""
        pass
