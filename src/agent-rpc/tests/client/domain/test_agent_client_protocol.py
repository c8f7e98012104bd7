"""Tests verifying AgentClient protocol compliance of concrete implementations."""

import inspect

import pytest

from agent_rpc.client.domain.agent_client import AgentClient
from agent_rpc.client.infrastructure.http_agent_client import HttpAgentClient
from tests.client.fake_agent_client import FakeAgentClient

_COMMANDS = [
    name
    for name, member in inspect.getmembers(AgentClient, inspect.isfunction)
    if not name.startswith("_")
]


class TestAgentClientProtocolSurface:
    def test_protocol_declares_all_agent_commands(self) -> None:
        assert sorted(_COMMANDS) == [
            "apply",
            "get_state",
            "list_disk",
            "migrate_disk",
            "mount_disk",
            "ping",
            "start",
            "stop",
            "unmount_disk",
        ]


@pytest.mark.parametrize("implementation", [HttpAgentClient, FakeAgentClient])
class TestAgentClientProtocolCompliance:
    """Concrete clients expose every protocol command as a coroutine function."""

    @pytest.mark.parametrize("command", _COMMANDS)
    def test_command_is_coroutine_function(
        self, implementation: type, command: str
    ) -> None:
        assert inspect.iscoroutinefunction(getattr(implementation, command))

    @pytest.mark.parametrize("command", _COMMANDS)
    def test_command_parameters_match_protocol(
        self, implementation: type, command: str
    ) -> None:
        expected = list(inspect.signature(getattr(AgentClient, command)).parameters)
        actual = list(inspect.signature(getattr(implementation, command)).parameters)

        assert actual == expected
