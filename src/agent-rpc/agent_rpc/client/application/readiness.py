"""AgentReadinessWaiter: pings a freshly created VM's agent until it answers."""

from agent_rpc.client.domain.agent_client import AgentClient
from agent_rpc.core.errors import AgentRpcError
from agent_rpc.retry.application.engine import RetryEngine
from agent_rpc.retry.domain.policy import BoundedRetryPolicy
from agent_rpc.retry.domain.retryable import RetryOutcome


class _PingRetryable:
    """Every ping failure is transient: the agent may still be booting."""

    def __init__(self, client: AgentClient) -> None:
        self._client = client

    async def attempt(self) -> RetryOutcome:
        try:
            await self._client.ping()
        except AgentRpcError as exc:
            return RetryOutcome(done=False, error=exc)
        return RetryOutcome(done=True)


class AgentReadinessWaiter:
    def __init__(self, client: AgentClient, engine: RetryEngine) -> None:
        self._client = client
        self._engine = engine

    async def wait(self, policy: BoundedRetryPolicy) -> None:
        """Return once the agent answers a ping.

        Raises:
            RetryTimeoutError: if the agent never answers within policy.max_attempts pings.
        """
        await self._engine.run(unit=_PingRetryable(client=self._client), policy=policy)
