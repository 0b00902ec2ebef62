"""Chat message entities (never persisted)"""
from dataclasses import dataclass
from typing import Dict, List


ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

VALID_ROLES = (ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT)


@dataclass
class Message:
    """Role-tagged message sent to the completion provider"""
    role: str  # 'system' | 'user' | 'assistant'
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class Composition:
    """Message sequence for a generation call plus the prompt it was built from"""
    messages: List[Message]
    prompt_used: str  # resolved prompt id, or 'default'
