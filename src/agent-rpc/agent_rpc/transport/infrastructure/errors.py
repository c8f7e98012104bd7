"""Error types raised by the agent transport."""

from agent_rpc.core.errors import AgentRpcError


class AgentTransportError(AgentRpcError):
    """Raised when the HTTP exchange with the agent fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Performing request to agent: {reason}")


class AgentExceptionError(AgentRpcError):
    """Raised when the agent replies with an exception envelope."""

    def __init__(self, method: str, message: str) -> None:
        self.method = method
        super().__init__(f"Agent responded with error to '{method}': {message}")


class AgentResponseDecodeError(AgentRpcError):
    """Raised when the agent reply is not valid JSON or does not match the expected schema."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        super().__init__(f"Unmarshalling agent response to '{method}': {reason}")
