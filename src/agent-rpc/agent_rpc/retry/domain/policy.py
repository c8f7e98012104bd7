"""Retry policy value objects: how long and how often the engine retries."""

from pydantic import BaseModel, Field


class UnboundedRetryPolicy(BaseModel, frozen=True):
    """Retry forever, waiting delay_seconds between attempts."""

    delay_seconds: float = Field(ge=0)


class BoundedRetryPolicy(BaseModel, frozen=True):
    """Retry at most max_attempts times, waiting delay_seconds between attempts."""

    delay_seconds: float = Field(ge=0)
    max_attempts: int = Field(ge=1)


type RetryPolicy = UnboundedRetryPolicy | BoundedRetryPolicy
