"""Retryable Protocol and RetryOutcome: the contract for one unit of retryable work."""

from dataclasses import dataclass
from typing import Protocol

from agent_rpc.core.errors import AgentRpcError


@dataclass(frozen=True)
class RetryOutcome:
    """Result of a single attempt.

    done=True stops the engine; error is raised to the caller if present.
    done=False asks for another attempt; error, if present, is only observed.
    """

    done: bool
    error: AgentRpcError | None = None


class Retryable(Protocol):
    """Structural interface for one attempt of idempotent-safe work."""

    async def attempt(self) -> RetryOutcome: ...
