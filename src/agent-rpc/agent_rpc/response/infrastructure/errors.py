"""Error types raised while interpreting decoded agent responses."""

from agent_rpc.core.errors import AgentRpcError


class MalformedResponseError(AgentRpcError):
    """Raised when a well-formed response lacks a usable task id or task state."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed agent response: {reason}")
