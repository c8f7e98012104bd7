"""Error types raised by the retry engine."""

from agent_rpc.core.errors import AgentRpcError


class RetryTimeoutError(AgentRpcError):
    """Raised when a bounded policy runs out of attempts without the unit finishing."""

    def __init__(self, attempts: int, last_error: AgentRpcError | None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        detail = f": {last_error}" if last_error is not None else ""
        super().__init__(f"Timed out retrying after {attempts} attempts{detail}")
