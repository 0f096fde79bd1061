"""Data models for the conversation log.

``ChatMessage`` is what the front end displays; ``ConversationTurn`` is the
minimal role/content shape sent to the remote responder.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Role of a message sender."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ConversationTurn(BaseModel):
    """One role-tagged message in the conversation context."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender")
    content: str = Field(description="Content of the message")

    def to_payload(self) -> dict[str, str]:
        """Convert to the chat-completion message format."""
        return {"role": self.role.value, "content": self.content}


class ChatMessage(BaseModel):
    """A message shown in the chat transcript.

    Attributes:
        id: Unique identifier for the message
        role: Either user or assistant
        content: Message text (assistant messages may carry inline markup)
        created_at: Creation time (UTC)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: Role
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("role")
    @classmethod
    def _no_system_messages(cls, role: Role) -> Role:
        if role is Role.SYSTEM:
            raise ValueError("chat messages are either user or assistant messages")
        return role

    def to_turn(self) -> ConversationTurn:
        """Drop id and timestamp, keeping what the responder needs."""
        return ConversationTurn(role=self.role, content=self.content)
