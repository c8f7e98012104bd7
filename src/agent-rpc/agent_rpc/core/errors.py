"""Base exception class for all agent-rpc-specific errors."""


class AgentRpcError(Exception):
    """Base class for all agent-rpc errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
