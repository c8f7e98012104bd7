"""Structlog implementation of the RetryObserver port."""

import structlog


class StructlogRetryObserver:
    """Delegates retry domain events to structlog.

    Satisfies the RetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def retry_attempt_failed(
        self, attempt: int, reason: str, delay_seconds: float
    ) -> None:
        self._log.debug(
            "retry.attempt_failed",
            attempt=attempt,
            reason=reason,
            delay_seconds=delay_seconds,
        )

    def retry_exhausted(self, attempts: int, reason: str) -> None:
        self._log.error("retry.exhausted", attempts=attempts, reason=reason)
