"""Substring search across the prompt store.

There is no persistent index: every query walks the full store and matches
against category, file name and content.
"""
import logging
from typing import List

from prompt_service.domain.prompt import SearchResult
from prompt_service.exceptions import PromptServiceError
from prompt_service.interfaces.prompt_repository import IPromptRepository

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 150
PREVIEW_SUFFIX = "..."


def build_preview(content: str) -> str:
    """Fixed-offset preview: the first 150 characters plus an ellipsis."""
    return content[:PREVIEW_LENGTH] + PREVIEW_SUFFIX


class PromptSearchService:
    """Case-insensitive substring scanner over an IPromptRepository."""

    def __init__(self, repository: IPromptRepository, extension: str = ".md"):
        self.repository = repository
        self.extension = extension

    async def search(self, query: str) -> List[SearchResult]:
        """
        Find prompts whose category, file name or content contains ``query``.

        Args:
            query: Substring to look for (case-insensitive). Empty yields no results.

        Returns:
            Matches in store listing order. Store faults are logged and
            yield an empty list.
        """
        if not query:
            return []

        needle = query.lower()
        results = []

        try:
            async for prompt in self.repository.iter_prompts():
                haystack = f"{prompt.category} {prompt.name}{self.extension} {prompt.content}".lower()
                if needle in haystack:
                    results.append(SearchResult(
                        id=prompt.id,
                        category=prompt.category,
                        name=prompt.name,
                        preview=build_preview(prompt.content)
                    ))
        except (OSError, PromptServiceError) as e:
            logger.error(f"Search for '{query}' failed: {e}")
            return []

        logger.debug(f"Search '{query}' matched {len(results)} prompts")
        return results
