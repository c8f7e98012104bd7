"""Command value object: one method call on the agent."""

from typing import Any

from pydantic import BaseModel, Field


class Command(BaseModel, frozen=True):
    method: str = Field(min_length=1)
    arguments: list[Any] = Field(default_factory=list)

    def to_payload(self, reply_to: str) -> dict[str, Any]:
        """Build the JSON object sent on the wire."""
        return {
            "method": self.method,
            "arguments": list(self.arguments),
            "reply_to": reply_to,
        }
