"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml
from pydantic import ValidationError

from agent_rpc.config.domain.config import AgentClientConfig
from agent_rpc.config.domain.observer import ConfigObserver
from agent_rpc.config.infrastructure.env_interpolation import resolve_env_vars
from agent_rpc.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AgentClientConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AgentClientConfig:
        """
        Load, interpolate, validate, and return an AgentClientConfig.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(resolved=resolve_env_vars(raw))

        # Credentials may be embedded in the endpoint; never log them.
        endpoint = _redact(cfg.endpoint)
        if not cfg.http.verify_tls:
            self._observer.config_tls_verification_disabled(endpoint=endpoint)
        self._observer.config_loaded(endpoint=endpoint, uuid=cfg.uuid)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc


def _build_config(resolved: Any) -> AgentClientConfig:
    try:
        return AgentClientConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _redact(url: str) -> str:
    parts = urlsplit(url)
    if parts.password is None:
        return url
    netloc = parts.netloc.rsplit("@", 1)[1]
    return parts._replace(netloc=f"{parts.username}:***@{netloc}").geturl()
