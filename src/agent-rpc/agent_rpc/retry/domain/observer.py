"""RetryObserver port: domain events emitted while the engine retries."""

from typing import Protocol


class RetryObserver(Protocol):
    """Observer port for retry domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def retry_attempt_failed(
        self, attempt: int, reason: str, delay_seconds: float
    ) -> None: ...

    def retry_exhausted(self, attempts: int, reason: str) -> None: ...
