"""RetryEngine: drives a Retryable unit according to a RetryPolicy."""

import asyncio

from agent_rpc.core.errors import AgentRpcError
from agent_rpc.retry.domain.observer import RetryObserver
from agent_rpc.retry.domain.policy import BoundedRetryPolicy, RetryPolicy
from agent_rpc.retry.domain.retryable import Retryable
from agent_rpc.retry.infrastructure.errors import RetryTimeoutError


class RetryEngine:
    """Re-invokes a unit until it reports done or the policy gives up.

    The engine never interprets the unit's error: it only decides whether to
    loop again. Transient errors are passed to the observer and otherwise
    absorbed. The only suspension point is the sleep between attempts, so an
    embedding caller can impose a deadline with asyncio.timeout().
    """

    def __init__(self, observer: RetryObserver) -> None:
        self._observer = observer

    async def run(self, unit: Retryable, policy: RetryPolicy) -> None:
        """Invoke unit until it reports done.

        Raises:
            AgentRpcError: the error the unit returned alongside done=True.
            RetryTimeoutError: if a BoundedRetryPolicy is exhausted first.
        """
        attempt = 0
        last_error: AgentRpcError | None = None

        while True:
            attempt += 1
            outcome = await unit.attempt()

            if outcome.done:
                if outcome.error is not None:
                    raise outcome.error
                return

            last_error = outcome.error
            reason = str(last_error) if last_error is not None else "not done"

            if (
                isinstance(policy, BoundedRetryPolicy)
                and attempt >= policy.max_attempts
            ):
                self._observer.retry_exhausted(attempts=attempt, reason=reason)
                raise RetryTimeoutError(
                    attempts=attempt, last_error=last_error
                ) from last_error

            self._observer.retry_attempt_failed(
                attempt=attempt, reason=reason, delay_seconds=policy.delay_seconds
            )
            await asyncio.sleep(policy.delay_seconds)
