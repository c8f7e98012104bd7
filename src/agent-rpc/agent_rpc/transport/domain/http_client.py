"""HttpClient Protocol: the transport port consumed by AgentRequest."""

from typing import Protocol


class HttpClient(Protocol):
    """Structural interface for a single JSON POST exchange.

    Implementations raise AgentTransportError on network failures and
    non-successful status codes, and return the raw response body otherwise.
    """

    async def post(self, url: str, body: bytes) -> bytes: ...
