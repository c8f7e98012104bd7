"""AgentEndpoint value object: where agent requests are sent."""

from pydantic import BaseModel, Field


class AgentEndpoint(BaseModel, frozen=True):
    """Immutable agent address plus the correlation id attached to every request.

    Constructed once per deployment session.
    """

    base_url: str = Field(min_length=1)
    uuid: str = Field(min_length=1)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/agent"
