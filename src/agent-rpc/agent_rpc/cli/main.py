"""CLI entrypoint for agent-rpc: typer app with ping, state, disks and wait commands."""

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog
import typer

from agent_rpc.client.application.readiness import AgentReadinessWaiter
from agent_rpc.client.infrastructure.factory import create_agent_client
from agent_rpc.client.infrastructure.http_agent_client import HttpAgentClient
from agent_rpc.client.infrastructure.observer import StructlogAgentClientObserver
from agent_rpc.config.domain.config import AgentClientConfig
from agent_rpc.config.infrastructure.observer import StructlogConfigObserver
from agent_rpc.config.infrastructure.yaml_loader import YamlConfigLoader
from agent_rpc.core.errors import AgentRpcError
from agent_rpc.retry.application.engine import RetryEngine
from agent_rpc.retry.domain.policy import BoundedRetryPolicy
from agent_rpc.retry.infrastructure.observer import StructlogRetryObserver
from agent_rpc.transport.infrastructure.httpx_client import HttpxHttpClient

app = typer.Typer(add_completion=False)

type ClientAction = Callable[[HttpAgentClient, AgentClientConfig], Awaitable[object]]


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


async def _with_client(config: AgentClientConfig, action: ClientAction) -> object:
    async with HttpxHttpClient(config=config.http) as http_client:
        client = create_agent_client(
            config=config,
            http_client=http_client,
            observer=StructlogAgentClientObserver(),
            retry_observer=StructlogRetryObserver(),
        )
        return await action(client, config)


def _run(config_path: Path, log_format: str, action: ClientAction) -> object:
    """Load config, run action against the agent, and map errors to exit code 1."""
    _configure_structlog(log_format)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(config_path)
        return asyncio.run(_with_client(config=config, action=action))
    except AgentRpcError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


async def _ping(client: HttpAgentClient, config: AgentClientConfig) -> object:
    return await client.ping()


async def _state(client: HttpAgentClient, config: AgentClientConfig) -> object:
    state = await client.get_state()
    return state.model_dump(exclude_unset=True)


async def _disks(client: HttpAgentClient, config: AgentClientConfig) -> object:
    return await client.list_disk()


async def _wait(client: HttpAgentClient, config: AgentClientConfig) -> object:
    waiter = AgentReadinessWaiter(
        client=client, engine=RetryEngine(observer=StructlogRetryObserver())
    )
    await waiter.wait(
        policy=BoundedRetryPolicy(
            delay_seconds=config.readiness.delay_seconds,
            max_attempts=config.readiness.max_attempts,
        )
    )
    return "ready"


@app.command()
def ping(
    config: Path = typer.Option(..., "--config", "-c", help="Path to the YAML config."),
    log_format: str = typer.Option("console", help="Log format: console or json."),
) -> None:
    """Ping the agent once and print its reply."""
    typer.echo(json.dumps(_run(config, log_format, _ping)))


@app.command()
def state(
    config: Path = typer.Option(..., "--config", "-c", help="Path to the YAML config."),
    log_format: str = typer.Option("console", help="Log format: console or json."),
) -> None:
    """Print the agent's reported state as JSON."""
    typer.echo(json.dumps(_run(config, log_format, _state), indent=2))


@app.command()
def disks(
    config: Path = typer.Option(..., "--config", "-c", help="Path to the YAML config."),
    log_format: str = typer.Option("console", help="Log format: console or json."),
) -> None:
    """Print the disk CIDs the agent has mounted."""
    typer.echo(json.dumps(_run(config, log_format, _disks)))


@app.command()
def wait(
    config: Path = typer.Option(..., "--config", "-c", help="Path to the YAML config."),
    log_format: str = typer.Option("console", help="Log format: console or json."),
) -> None:
    """Ping the agent until it answers or the readiness policy is exhausted."""
    typer.echo(_run(config, log_format, _wait))


if __name__ == "__main__":
    app()
