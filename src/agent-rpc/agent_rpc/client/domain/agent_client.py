"""AgentClient Protocol: the command surface of a deployed agent."""

from collections.abc import Mapping
from typing import Any, Protocol

from agent_rpc.response.domain.simple import Scalar
from agent_rpc.response.domain.state import AgentState

type ApplySpec = Mapping[str, Any]


class AgentClient(Protocol):
    """Structural interface satisfied by any agent client implementation.

    ping/start/get_state/list_disk return as soon as the agent replies.
    stop/apply/mount_disk/unmount_disk/migrate_disk return once the agent task
    they start has left the running state.
    """

    async def ping(self) -> Scalar: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    async def apply(self, spec: ApplySpec) -> None: ...

    async def get_state(self) -> AgentState: ...

    async def list_disk(self) -> list[str]: ...

    async def mount_disk(self, disk_cid: str) -> None: ...

    async def unmount_disk(self, disk_cid: str) -> None: ...

    async def migrate_disk(self) -> None: ...
