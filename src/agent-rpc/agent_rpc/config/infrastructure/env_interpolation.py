"""Resolve ${ENV_VAR} references in raw YAML config data."""

import os
import re
from typing import Any

from agent_rpc.config.infrastructure.errors import MissingEnvVarsError

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def resolve_env_vars(raw: Any) -> Any:
    """Return a copy of raw with every ${ENV_VAR} reference substituted.

    Only string leaves are rewritten; mappings and lists are walked.

    Raises:
        MissingEnvVarsError: listing every referenced variable that is unset.
    """
    missing: list[str] = []
    resolved = _resolve(raw, missing)
    if missing:
        raise MissingEnvVarsError(missing)
    return resolved


def _resolve(node: Any, missing: list[str]) -> Any:
    if isinstance(node, str):
        return _ENV_VAR_PATTERN.sub(lambda m: _lookup(m.group(1), missing), node)
    if isinstance(node, list):
        return [_resolve(item, missing) for item in node]
    if isinstance(node, dict):
        return {key: _resolve(value, missing) for key, value in node.items()}
    return node


def _lookup(name: str, missing: list[str]) -> str:
    value = os.environ.get(name)
    if value is None:
        if name not in missing:
            missing.append(name)
        return ""
    return value
