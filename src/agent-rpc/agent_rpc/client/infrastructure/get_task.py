"""GetTaskRetryable: one get_task poll of an asynchronous agent task."""

from agent_rpc.client.domain.observer import AgentClientObserver
from agent_rpc.client.domain.task import AsyncTaskRef
from agent_rpc.client.infrastructure.errors import (
    AgentCommandError,
    TaskFailedError,
    TaskStillRunningError,
)
from agent_rpc.core.errors import AgentRpcError
from agent_rpc.response.domain.task import FAILED_STATE, RUNNING_STATE, TaskResponse
from agent_rpc.response.infrastructure.errors import MalformedResponseError
from agent_rpc.retry.domain.retryable import RetryOutcome
from agent_rpc.transport.infrastructure.agent_request import AgentRequest


class GetTaskRetryable:
    """Satisfies the Retryable protocol for a single agent task.

    Only "running" asks for another attempt and only "failed" is a task
    failure. Any other state the agent reports ends the task successfully.
    Transport, decode and protocol failures are terminal.
    """

    def __init__(
        self,
        request: AgentRequest,
        task: AsyncTaskRef,
        observer: AgentClientObserver,
    ) -> None:
        self._request = request
        self._task = task
        self._observer = observer

    async def attempt(self) -> RetryOutcome:
        method = self._task.method
        try:
            response = await self._request.send(
                "get_task", [self._task.task_id], TaskResponse
            )
        except AgentRpcError as exc:
            return RetryOutcome(
                done=True,
                error=AgentCommandError(
                    context=f"Sending 'get_task' for '{method}' to the agent",
                    cause=exc,
                ),
            )

        try:
            state = response.task_state()
        except MalformedResponseError as exc:
            return RetryOutcome(
                done=True,
                error=AgentCommandError(
                    context=f"Getting task state of '{method}'", cause=exc
                ),
            )

        self._observer.agent_task_polled(
            method=method, task_id=self._task.task_id, state=state
        )

        if state == RUNNING_STATE:
            return RetryOutcome(
                done=False,
                error=TaskStillRunningError(method=method, task_id=self._task.task_id),
            )

        if state == FAILED_STATE:
            return RetryOutcome(
                done=True,
                error=TaskFailedError(
                    method=method, task_id=self._task.task_id, state=state
                ),
            )

        self._observer.agent_task_completed(method=method, task_id=self._task.task_id)
        return RetryOutcome(done=True)
