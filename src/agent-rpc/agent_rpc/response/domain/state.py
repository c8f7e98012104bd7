"""AgentState and StateResponse: the agent's reported state snapshot."""

from pydantic import BaseModel, ConfigDict


class AgentState(BaseModel):
    """Structured snapshot of the agent's reported state.

    Only job_state is typed; every other field the agent reports is kept as-is
    so that model_dump(exclude_unset=True) returns the snapshot as reported.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    job_state: str | None = None


class StateResponse(BaseModel, frozen=True):
    value: AgentState
