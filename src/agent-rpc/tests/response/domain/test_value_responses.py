"""Tests for SimpleResponse, StateResponse and ListResponse decoding."""

import pytest
from pydantic import ValidationError

from agent_rpc.response.domain.listing import ListResponse
from agent_rpc.response.domain.simple import SimpleResponse
from agent_rpc.response.domain.state import AgentState, StateResponse


class TestSimpleResponse:
    @pytest.mark.parametrize("value", ["pong", "started", 1, 2.5, True])
    def test_scalar_values_are_kept_as_is(self, value: object) -> None:
        response = SimpleResponse.model_validate({"value": value})

        assert response.value == value
        assert type(response.value) is type(value)

    @pytest.mark.parametrize("value", [None, [], {"a": 1}])
    def test_non_scalar_values_are_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            SimpleResponse.model_validate({"value": value})


class TestStateResponse:
    def test_job_state_is_typed(self) -> None:
        response = StateResponse.model_validate({"value": {"job_state": "failing"}})

        assert response.value.job_state == "failing"

    def test_job_state_is_optional(self) -> None:
        response = StateResponse.model_validate({"value": {"agent_id": "a-1"}})

        assert response.value.job_state is None

    def test_extra_fields_survive_dump(self) -> None:
        value = {"agent_id": "a-1", "vm": {"name": "vm-1"}, "job_state": "running"}

        state = StateResponse.model_validate({"value": value}).value

        assert state.model_dump() == value

    def test_unreported_job_state_is_left_out_of_the_snapshot(self) -> None:
        value = {"agent_id": "a-1", "vm": {"name": "vm-1"}}

        state = StateResponse.model_validate({"value": value}).value

        assert state.model_dump(exclude_unset=True) == value

    def test_non_object_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StateResponse.model_validate({"value": "running"})

    def test_agent_state_is_frozen(self) -> None:
        state = AgentState(job_state="running")
        with pytest.raises(ValidationError):
            state.job_state = "failing"  # type: ignore[misc]


class TestListResponse:
    def test_empty_list(self) -> None:
        assert ListResponse.model_validate({"value": []}).value == []

    def test_non_list_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListResponse.model_validate({"value": "disk-1"})
