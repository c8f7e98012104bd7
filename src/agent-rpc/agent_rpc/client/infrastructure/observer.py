"""Structlog implementation of the AgentClientObserver port."""

import structlog


class StructlogAgentClientObserver:
    """Delegates agent client domain events to structlog.

    Satisfies the AgentClientObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def agent_command_sent(self, method: str) -> None:
        self._log.debug("agent.command_sent", method=method)

    def agent_command_failed(self, method: str, reason: str) -> None:
        self._log.error("agent.command_failed", method=method, reason=reason)

    def agent_task_started(self, method: str, task_id: str) -> None:
        self._log.info("agent.task_started", method=method, task_id=task_id)

    def agent_task_polled(self, method: str, task_id: str, state: str) -> None:
        self._log.debug(
            "agent.task_polled", method=method, task_id=task_id, state=state
        )

    def agent_task_completed(self, method: str, task_id: str) -> None:
        self._log.info("agent.task_completed", method=method, task_id=task_id)
