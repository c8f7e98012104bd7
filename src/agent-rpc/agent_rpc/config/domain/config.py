"""AgentClientConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field


class HttpConfig(BaseModel, frozen=True):
    connect_timeout_seconds: float = Field(default=10.0, gt=0)
    read_timeout_seconds: float = Field(default=60.0, gt=0)
    verify_tls: bool = True


class ReadinessConfig(BaseModel, frozen=True):
    max_attempts: int = Field(default=300, ge=1)
    delay_seconds: float = Field(default=0.5, ge=0)


class AgentClientConfig(BaseModel, frozen=True):
    """Root configuration for talking to one deployed agent."""

    endpoint: str = Field(min_length=1)
    uuid: str = Field(min_length=1)
    get_task_delay_seconds: float = Field(default=1.0, ge=0)
    http: HttpConfig = HttpConfig()
    readiness: ReadinessConfig = ReadinessConfig()
