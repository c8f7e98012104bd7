"""Error types raised by the agent client."""

from agent_rpc.core.errors import AgentRpcError


class AgentCommandError(AgentRpcError):
    """Wraps a lower-level failure with the agent command it happened in."""

    def __init__(self, context: str, cause: AgentRpcError) -> None:
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}", retriable=cause.retriable)
        self.__cause__ = cause


class UnexpectedAgentResponseError(AgentRpcError):
    """Raised when a synchronous command returns something other than its success literal."""

    def __init__(self, method: str, expected: str, actual: object) -> None:
        self.method = method
        self.actual = actual
        super().__init__(
            f"Failed to {method} agent services with response: {actual!r}"
            f" (expected {expected!r})"
        )


class TaskStillRunningError(AgentRpcError):
    """Signals that an agent task has not finished yet; absorbed by the retry engine."""

    def __init__(self, method: str, task_id: str) -> None:
        super().__init__(f"Task {method} ({task_id}) is still running", retriable=True)


class TaskFailedError(AgentRpcError):
    """Raised when the agent reports the task as failed."""

    def __init__(self, method: str, task_id: str, state: str) -> None:
        self.method = method
        self.task_id = task_id
        self.state = state
        super().__init__(
            f"Failed to run agent task {method} ({task_id}): task ended in state '{state}'"
        )
