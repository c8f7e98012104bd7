"""Tests for TaskResponse task id and task state decoding."""

import pytest

from agent_rpc.response.domain.task import TaskResponse
from agent_rpc.response.infrastructure.errors import MalformedResponseError


class TestTaskId:
    """task_id() accepts the object form and the bare id form."""

    def test_object_with_string_id(self) -> None:
        assert TaskResponse(value={"agent_task_id": "42"}).task_id() == "42"

    def test_object_with_numeric_id(self) -> None:
        assert TaskResponse(value={"agent_task_id": 42}).task_id() == "42"

    def test_object_with_state(self) -> None:
        response = TaskResponse(value={"agent_task_id": "42", "state": "done"})

        assert response.task_id() == "42"

    def test_bare_string_id(self) -> None:
        assert TaskResponse(value="42").task_id() == "42"

    def test_bare_numeric_id(self) -> None:
        assert TaskResponse(value=42).task_id() == "42"

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            True,
            1.5,
            [],
            ["42"],
            {},
            {"task": "42"},
            {"agent_task_id": None},
            {"agent_task_id": ["42"]},
        ],
    )
    def test_unusable_values_raise_malformed_response_error(self, value: object) -> None:
        with pytest.raises(MalformedResponseError):
            TaskResponse(value=value).task_id()


class TestTaskState:
    """task_state() requires the inline-state object form."""

    def test_running(self) -> None:
        response = TaskResponse(value={"agent_task_id": "42", "state": "running"})

        assert response.task_state() == "running"

    def test_done(self) -> None:
        response = TaskResponse(value={"agent_task_id": "42", "state": "done"})

        assert response.task_state() == "done"

    @pytest.mark.parametrize(
        "value",
        [
            "42",
            42,
            None,
            {"agent_task_id": "42"},
            {"state": "running"},
            {"agent_task_id": "42", "state": 3},
        ],
    )
    def test_unusable_values_raise_malformed_response_error(self, value: object) -> None:
        with pytest.raises(MalformedResponseError):
            TaskResponse(value=value).task_state()

    def test_error_message_names_the_value(self) -> None:
        with pytest.raises(MalformedResponseError, match="no task state"):
            TaskResponse(value="42").task_state()
