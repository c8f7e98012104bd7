"""AsyncTaskRef value object: the agent task an asynchronous command is waiting on."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AsyncTaskRef:
    method: str
    task_id: str
