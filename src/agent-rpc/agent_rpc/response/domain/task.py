"""TaskResponse: an asynchronous task handle, immediate or with inline state.

The agent does not tag its replies, so the value is kept raw and decoded
explicitly by task_id() and task_state(). Both fail closed with
MalformedResponseError instead of guessing.
"""

from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError

from agent_rpc.response.infrastructure.errors import MalformedResponseError

TaskId = StrictStr | StrictInt

RUNNING_STATE = "running"
FAILED_STATE = "failed"


class TaskHandle(BaseModel, frozen=True):
    """The {"agent_task_id": ..., "state": ...} object form of a task value."""

    agent_task_id: TaskId
    state: StrictStr | None = None


class TaskResponse(BaseModel, frozen=True):
    value: Any

    def task_id(self) -> str:
        """Return the agent task id as a string.

        Accepts {"agent_task_id": id, ...} or a bare string/number id.

        Raises:
            MalformedResponseError: if the value matches neither form.
        """
        if isinstance(self.value, dict):
            return str(self._handle().agent_task_id)
        if isinstance(self.value, str) and self.value:
            return self.value
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return str(self.value)
        raise MalformedResponseError(f"no agent task id in value {self.value!r}")

    def task_state(self) -> str:
        """Return the inline task state.

        Raises:
            MalformedResponseError: if the value is not an object with a string state.
        """
        if not isinstance(self.value, dict):
            raise MalformedResponseError(f"no task state in value {self.value!r}")
        state = self._handle().state
        if state is None:
            raise MalformedResponseError(f"no task state in value {self.value!r}")
        return state

    def _handle(self) -> TaskHandle:
        try:
            return TaskHandle.model_validate(self.value)
        except ValidationError as exc:
            raise MalformedResponseError(str(exc)) from exc
