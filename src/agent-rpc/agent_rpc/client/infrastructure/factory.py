"""create_agent_client: wires an HttpAgentClient from configuration."""

from agent_rpc.client.domain.observer import AgentClientObserver
from agent_rpc.client.infrastructure.http_agent_client import HttpAgentClient
from agent_rpc.config.domain.config import AgentClientConfig
from agent_rpc.retry.application.engine import RetryEngine
from agent_rpc.retry.domain.observer import RetryObserver
from agent_rpc.transport.domain.endpoint import AgentEndpoint
from agent_rpc.transport.domain.http_client import HttpClient
from agent_rpc.transport.infrastructure.agent_request import AgentRequest


def create_agent_client(
    config: AgentClientConfig,
    http_client: HttpClient,
    observer: AgentClientObserver,
    retry_observer: RetryObserver,
) -> HttpAgentClient:
    """Return an HttpAgentClient for the agent described by config.

    The http_client is owned by the caller, who is responsible for closing it.
    """
    endpoint = AgentEndpoint(base_url=config.endpoint, uuid=config.uuid)
    return HttpAgentClient(
        request=AgentRequest(endpoint=endpoint, http_client=http_client),
        engine=RetryEngine(observer=retry_observer),
        get_task_delay_seconds=config.get_task_delay_seconds,
        observer=observer,
    )
