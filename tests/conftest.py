"""Pytest configuration and shared fixtures."""
from typing import List, Optional

import pytest

from prompt_service.domain.message import Message
from prompt_service.interfaces.completion_gateway import ICompletionGateway
from prompt_service.repositories.file_prompt_repository import FilePromptRepository


class StubCompletionGateway(ICompletionGateway):
    """Records every call and answers with a fixed reply (or raises ``error``)."""

    def __init__(self, reply: Optional[str] = "stub reply", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def complete(self, messages, model, temperature, max_tokens):
        self.calls.append({
            "messages": list(messages),
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def prompts_dir(tmp_path):
    """Store root inside the test's temporary directory (not created yet)."""
    return tmp_path / "prompts"


@pytest.fixture
def repository(prompts_dir):
    """Empty file-backed repository."""
    return FilePromptRepository(prompts_dir)


@pytest.fixture
def seeded_repository(prompts_dir):
    """Repository with a few prompts written directly to disk."""
    (prompts_dir / "backend").mkdir(parents=True)
    (prompts_dir / "backend" / "test-api.md").write_text("Use REST conventions.", encoding="utf-8")
    (prompts_dir / "security").mkdir()
    (prompts_dir / "security" / "auth-patterns.md").write_text(
        "# AUTH PATTERNS\n\nAccess token: 15min", encoding="utf-8"
    )
    (prompts_dir / "security" / "notes.txt").write_text("not a prompt", encoding="utf-8")
    return FilePromptRepository(prompts_dir)


@pytest.fixture
def gateway():
    return StubCompletionGateway()


@pytest.fixture
def user_message():
    return Message(role="user", content="hi")
