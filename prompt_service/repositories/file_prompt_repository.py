"""File-backed prompt repository.

Layout on disk::

    <root>/
        <category>/
            <name>.md

Each category is a directory and each prompt is one file whose stem is the
prompt name. Directory walks and deletes run in a worker thread; file
contents are read and written with aiofiles.
"""
import asyncio
import logging
from pathlib import Path
from typing import AsyncIterator, Dict, List, Optional, Union

import aiofiles

from prompt_service.domain.prompt import Category, Prompt, PromptSummary, make_prompt_id
from prompt_service.exceptions import (
    InvalidInputError,
    InvalidPathError,
    PromptNotFoundError,
    PromptServiceError,
    StorageError,
)
from prompt_service.interfaces.prompt_repository import IPromptRepository
from prompt_service.repositories.default_prompts import DEFAULT_PROMPTS
from prompt_service.utils.sanitizer import sanitize_identifier

logger = logging.getLogger(__name__)


class FilePromptRepository(IPromptRepository):
    """
    Prompt storage over a category/prompt directory tree.

    Security:
    - Every path is resolved and must stay exactly one directory below the root
    - Category and name are both sanitized on create

    Example:
        repo = FilePromptRepository("/data/prompts")
        await repo.bootstrap()
        prompt_id = await repo.create_prompt("backend", "Test API", "Use REST conventions.")
        prompt = await repo.get_prompt("backend", "test-api")
    """

    def __init__(self, root: Union[str, Path], extension: str = ".md"):
        """
        Initialize the repository.

        Args:
            root: Store root directory. Created by bootstrap() if missing.
            extension: Recognized prompt file extension.
        """
        self._root = Path(root).resolve()
        self._extension = extension

    @property
    def root(self) -> Path:
        """Get the store root path."""
        return self._root

    def _resolve_path(self, category: str, name: str) -> Path:
        """
        Resolve category/name to a prompt file path inside the store.

        Raises:
            InvalidPathError: If either segment is not a plain path component
                or the resolved path leaves the store root.
        """
        for segment in (category, name):
            if not segment or segment in (".", "..") or "/" in segment or "\\" in segment:
                raise InvalidPathError(f"Invalid prompt path: {category}/{name}")

        full_path = (self._root / category / f"{name}{self._extension}").resolve()

        if full_path.parent.parent != self._root:
            raise InvalidPathError(f"Path escapes prompt store: {category}/{name}")

        return full_path

    async def bootstrap(self, defaults: Optional[Dict[str, str]] = None) -> List[str]:
        """
        Ensure the store root exists and write any missing default prompts.

        Existing files are never overwritten, so running this twice is a no-op
        the second time.

        Args:
            defaults: Mapping of ``category/name`` ids to content.
                Defaults to the built-in set.

        Returns:
            Ids of the prompts written by this call
        """
        defaults = DEFAULT_PROMPTS if defaults is None else defaults

        await asyncio.to_thread(self._root.mkdir, parents=True, exist_ok=True)

        written = []
        for prompt_id, content in defaults.items():
            category, name = prompt_id.split("/", 1)
            path = self._resolve_path(category, name)

            if await asyncio.to_thread(path.exists):
                continue

            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            async with aiofiles.open(path, mode='w', encoding='utf-8', newline='') as f:
                await f.write(content)
            written.append(prompt_id)

        if written:
            logger.info(f"Bootstrapped {len(written)} default prompts into {self._root}")
        else:
            logger.debug(f"Default prompts already present in {self._root}")
        return written

    def _scan(self) -> List[Category]:
        """Walk the store tree synchronously (run in a worker thread)."""
        if not self._root.is_dir():
            return []

        categories = []
        for entry in sorted(self._root.iterdir()):
            if entry.name.startswith(".") or not entry.is_dir():
                continue

            prompts = [
                PromptSummary(
                    id=make_prompt_id(entry.name, f.stem),
                    name=f.stem,
                    category=entry.name
                )
                for f in sorted(entry.iterdir())
                if f.suffix == self._extension and f.is_file()
            ]
            categories.append(Category(name=entry.name, prompts=prompts))
        return categories

    async def list_categories(self) -> List[Category]:
        """
        List every category with its prompt summaries.

        Empty categories are included with a count of 0. Filesystem errors
        are logged and yield an empty list.
        """
        try:
            return await asyncio.to_thread(self._scan)
        except OSError as e:
            logger.error(f"Failed to list prompt categories in {self._root}: {e}")
            return []

    async def get_prompt(self, category: str, name: str) -> Prompt:
        """
        Read a prompt in full.

        Raises:
            PromptNotFoundError: If no prompt file exists at the computed path.
            InvalidPathError: If the path is invalid.
            StorageError: If the file exists but can't be read.
        """
        path = self._resolve_path(category, name)

        if not path.is_file():
            raise PromptNotFoundError(f"Prompt not found: {make_prompt_id(category, name)}")

        try:
            async with aiofiles.open(path, mode='r', encoding='utf-8', newline='') as f:
                content = await f.read()
        except FileNotFoundError:
            raise PromptNotFoundError(f"Prompt not found: {make_prompt_id(category, name)}")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read prompt {make_prompt_id(category, name)}: {e}")

        logger.debug(f"Read prompt: {category}/{name} ({len(content)} chars)")
        return Prompt(category=category, name=name, content=content)

    async def create_prompt(self, category: str, name: str, content: str) -> str:
        """
        Write a prompt, creating its category directory if needed.

        An existing prompt at the same path is overwritten unconditionally.

        Returns:
            Composite id of the written prompt

        Raises:
            InvalidInputError: If category, name or content is missing or empty.
            StorageError: If the write fails.
        """
        if not category or not name or not content:
            raise InvalidInputError("Incomplete data: category, name and content are required")

        safe_category = sanitize_identifier(category)
        safe_name = sanitize_identifier(name)
        path = self._resolve_path(safe_category, safe_name)

        try:
            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            async with aiofiles.open(path, mode='w', encoding='utf-8', newline='') as f:
                await f.write(content)
        except OSError as e:
            raise StorageError(f"Failed to write prompt {safe_category}/{safe_name}: {e}")

        prompt_id = make_prompt_id(safe_category, safe_name)
        logger.info(f"Wrote prompt: {prompt_id} ({len(content)} chars)")
        return prompt_id

    async def delete_prompt(self, category: str, name: str) -> None:
        """
        Delete a prompt file. The category directory is left in place.

        Raises:
            PromptNotFoundError: If the prompt doesn't exist.
        """
        path = self._resolve_path(category, name)

        if not path.is_file():
            raise PromptNotFoundError(f"Prompt not found: {make_prompt_id(category, name)}")

        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            raise PromptNotFoundError(f"Prompt not found: {make_prompt_id(category, name)}")
        except OSError as e:
            raise StorageError(f"Failed to delete prompt {make_prompt_id(category, name)}: {e}")

        logger.info(f"Deleted prompt: {category}/{name}")

    async def exists(self, category: str, name: str) -> bool:
        try:
            return self._resolve_path(category, name).is_file()
        except InvalidPathError:
            return False

    async def iter_prompts(self) -> AsyncIterator[Prompt]:
        """
        Yield every stored prompt with its content, in listing order.

        Prompts removed while the scan is in flight, and prompts that can't be
        read (undecodable content, unsafe paths), are logged and skipped.

        Raises:
            OSError: If the store tree can't be walked.
        """
        categories = await asyncio.to_thread(self._scan)

        for category in categories:
            for summary in category.prompts:
                try:
                    yield await self.get_prompt(summary.category, summary.name)
                except PromptNotFoundError:
                    logger.debug(f"Prompt vanished during scan: {summary.id}")
                except PromptServiceError as e:
                    logger.warning(f"Skipping unreadable prompt {summary.id}: {e}")
