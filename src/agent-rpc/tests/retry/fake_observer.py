"""FakeRetryObserver: records retry domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttemptFailedEvent:
    attempt: int
    reason: str
    delay_seconds: float


@dataclass(frozen=True)
class ExhaustedEvent:
    attempts: int
    reason: str


class FakeRetryObserver:
    """Records all emitted retry events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.attempts_failed: list[AttemptFailedEvent] = []
        self.exhausted: list[ExhaustedEvent] = []

    def retry_attempt_failed(
        self, attempt: int, reason: str, delay_seconds: float
    ) -> None:
        self.attempts_failed.append(
            AttemptFailedEvent(attempt=attempt, reason=reason, delay_seconds=delay_seconds)
        )

    def retry_exhausted(self, attempts: int, reason: str) -> None:
        self.exhausted.append(ExhaustedEvent(attempts=attempts, reason=reason))
