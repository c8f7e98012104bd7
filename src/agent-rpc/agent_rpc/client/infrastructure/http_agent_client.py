"""HttpAgentClient: AgentClient implementation over the agent HTTP endpoint."""

from typing import Any

from pydantic import BaseModel

from agent_rpc.client.domain.agent_client import ApplySpec
from agent_rpc.client.domain.observer import AgentClientObserver
from agent_rpc.client.domain.task import AsyncTaskRef
from agent_rpc.client.infrastructure.errors import (
    AgentCommandError,
    UnexpectedAgentResponseError,
)
from agent_rpc.client.infrastructure.get_task import GetTaskRetryable
from agent_rpc.core.errors import AgentRpcError
from agent_rpc.response.domain.listing import ListResponse
from agent_rpc.response.domain.simple import Scalar, SimpleResponse
from agent_rpc.response.domain.state import AgentState, StateResponse
from agent_rpc.response.domain.task import TaskResponse
from agent_rpc.response.infrastructure.errors import MalformedResponseError
from agent_rpc.retry.application.engine import RetryEngine
from agent_rpc.retry.domain.policy import UnboundedRetryPolicy
from agent_rpc.transport.infrastructure.agent_request import AgentRequest

_STARTED = "started"


class HttpAgentClient:
    """Sends agent commands and resolves asynchronous ones to completion.

    Synchronous commands are sent once. Asynchronous commands are sent once to
    obtain a task id, then polled with get_task through the RetryEngine under
    an unbounded policy with no default deadline. Wrap the call in
    asyncio.timeout() to bound it.
    """

    def __init__(
        self,
        request: AgentRequest,
        engine: RetryEngine,
        get_task_delay_seconds: float,
        observer: AgentClientObserver,
    ) -> None:
        self._request = request
        self._engine = engine
        self._get_task_policy = UnboundedRetryPolicy(
            delay_seconds=get_task_delay_seconds
        )
        self._observer = observer

    async def ping(self) -> Scalar:
        response = await self._send(
            "ping", [], SimpleResponse, context="Sending ping to the agent"
        )
        return response.value

    async def start(self) -> None:
        """Start the agent's services.

        Raises:
            AgentCommandError: if the start command cannot be sent or decoded.
            UnexpectedAgentResponseError: if the agent does not reply "started".
        """
        response = await self._send(
            "start", [], SimpleResponse, context="Starting agent services"
        )
        if response.value != _STARTED:
            error = UnexpectedAgentResponseError(
                method="start", expected=_STARTED, actual=response.value
            )
            self._observer.agent_command_failed(method="start", reason=str(error))
            raise error

    async def stop(self) -> None:
        await self._send_async_task_message("stop", [])

    async def apply(self, spec: ApplySpec) -> None:
        await self._send_async_task_message("apply", [dict(spec)])

    async def get_state(self) -> AgentState:
        response = await self._send(
            "get_state", [], StateResponse, context="Sending get_state to the agent"
        )
        return response.value

    async def list_disk(self) -> list[str]:
        response = await self._send(
            "list_disk", [], ListResponse, context="Sending 'list_disk' to the agent"
        )
        return list(response.value)

    async def mount_disk(self, disk_cid: str) -> None:
        await self._send_async_task_message("mount_disk", [disk_cid])

    async def unmount_disk(self, disk_cid: str) -> None:
        await self._send_async_task_message("unmount_disk", [disk_cid])

    async def migrate_disk(self) -> None:
        await self._send_async_task_message("migrate_disk", [])

    async def _send[R: BaseModel](
        self,
        method: str,
        arguments: list[Any],
        response_type: type[R],
        context: str,
    ) -> R:
        """Send one command; wrap any failure with context. Never retried."""
        self._observer.agent_command_sent(method=method)
        try:
            return await self._request.send(method, arguments, response_type)
        except AgentRpcError as exc:
            self._observer.agent_command_failed(method=method, reason=str(exc))
            raise AgentCommandError(context=context, cause=exc) from exc

    async def _send_async_task_message(
        self, method: str, arguments: list[Any]
    ) -> None:
        """Dispatch an asynchronous command and poll its task until it finishes.

        Raises:
            AgentCommandError: if dispatch fails, no task id is returned, or a
                get_task poll fails.
            TaskFailedError: if the agent reports the task as failed.
        """
        response = await self._send(
            method, arguments, TaskResponse, context=f"Sending '{method}' to the agent"
        )

        try:
            task_id = response.task_id()
        except MalformedResponseError as exc:
            self._observer.agent_command_failed(method=method, reason=str(exc))
            raise AgentCommandError(
                context=f"Getting agent task id of '{method}'", cause=exc
            ) from exc

        task = AsyncTaskRef(method=method, task_id=task_id)
        self._observer.agent_task_started(method=method, task_id=task_id)

        try:
            await self._engine.run(
                unit=GetTaskRetryable(
                    request=self._request, task=task, observer=self._observer
                ),
                policy=self._get_task_policy,
            )
        except AgentRpcError as exc:
            self._observer.agent_command_failed(method=method, reason=str(exc))
            raise
