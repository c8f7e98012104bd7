"""AgentRequest: sends one command to the agent and decodes the typed reply."""

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from agent_rpc.transport.domain.command import Command
from agent_rpc.transport.domain.endpoint import AgentEndpoint
from agent_rpc.transport.domain.http_client import HttpClient
from agent_rpc.transport.infrastructure.errors import (
    AgentExceptionError,
    AgentResponseDecodeError,
)


class AgentRequest:
    """Performs exactly one request/response exchange per send() call.

    Retry decisions belong to the layers above; nothing here loops.
    """

    def __init__(self, endpoint: AgentEndpoint, http_client: HttpClient) -> None:
        self._endpoint = endpoint
        self._http_client = http_client

    async def send[R: BaseModel](
        self, method: str, arguments: list[Any], response_type: type[R]
    ) -> R:
        """Send method(arguments) to the agent and decode the reply as response_type.

        Raises:
            AgentTransportError: if the HTTP exchange fails.
            AgentExceptionError: if the agent replies with an exception envelope.
            AgentResponseDecodeError: if the reply is not JSON or fails validation.
        """
        command = Command(method=method, arguments=list(arguments))
        body = json.dumps(command.to_payload(reply_to=self._endpoint.uuid))

        raw = await self._http_client.post(self._endpoint.url, body.encode("utf-8"))

        payload = _parse_json(method=method, raw=raw)
        _raise_for_exception(method=method, payload=payload)

        try:
            return response_type.model_validate(payload)
        except ValidationError as exc:
            raise AgentResponseDecodeError(method=method, reason=str(exc)) from exc


def _parse_json(method: str, raw: bytes) -> object:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise AgentResponseDecodeError(method=method, reason=str(exc)) from exc


def _raise_for_exception(method: str, payload: object) -> None:
    """Raise AgentExceptionError if payload is an {"exception": {...}} envelope."""
    if not isinstance(payload, dict) or "exception" not in payload:
        return

    exception = payload["exception"]
    if isinstance(exception, dict):
        message = str(exception.get("message", exception))
    else:
        message = str(exception)
    raise AgentExceptionError(method=method, message=message)
