"""AgentClientObserver port: domain events emitted while talking to the agent."""

from typing import Protocol


class AgentClientObserver(Protocol):
    """Observer port for agent client domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def agent_command_sent(self, method: str) -> None: ...

    def agent_command_failed(self, method: str, reason: str) -> None: ...

    def agent_task_started(self, method: str, task_id: str) -> None: ...

    def agent_task_polled(self, method: str, task_id: str, state: str) -> None: ...

    def agent_task_completed(self, method: str, task_id: str) -> None: ...
