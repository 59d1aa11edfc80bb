"""Typed configuration for one action invocation.

GitHub Actions hands action inputs to the process as ``INPUT_<NAME>``
environment variables and describes the run through ``GITHUB_*`` variables.
This module turns that flat mapping (plus any CLI overrides) into a frozen
``ActionConfig``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from tagrelease.release.model import MatchRule, RepoId, TriggerContext

from .result import Err, Ok, Result

__all__ = [
    "ActionConfig",
    "ConfigError",
    "ConfigOverrides",
    "load_config",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_SECONDS",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Action inputs
ENV_TOKEN = "INPUT_TOKEN"
ENV_MATCH = "INPUT_MATCH"
ENV_EXCLUDE = "INPUT_EXCLUDE"

# Runner context
ENV_FALLBACK_TOKEN = "GITHUB_TOKEN"
ENV_REF = "GITHUB_REF"
ENV_REPOSITORY = "GITHUB_REPOSITORY"
ENV_API_URL = "GITHUB_API_URL"
ENV_OUTPUT = "GITHUB_OUTPUT"
ENV_RUNNER_DEBUG = "RUNNER_DEBUG"
ENV_TIMEOUT = "TAGRELEASE_HTTP_TIMEOUT"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the invocation cannot be configured."""

    message: str
    key: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigOverrides:
    """Values given on the command line; each one wins over its env var."""

    token: str | None = None
    match: str | None = None
    exclude: str | None = None
    ref: str | None = None
    repo: str | None = None
    api_url: str | None = None
    output_path: Path | None = None
    verbose: bool = False


@dataclass(frozen=True, slots=True)
class ActionConfig:
    token: str | None
    context: TriggerContext
    rule: MatchRule
    api_url: str = DEFAULT_API_URL
    output_path: Path | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    debug: bool = False


def _pick(override: str | None, env: Mapping[str, str], *keys: str) -> str | None:
    if override is not None:
        return override
    for key in keys:
        value = env.get(key)
        if value:
            return value
    return None


def _parse_timeout(raw: str | None) -> Result[float, ConfigError]:
    if raw is None or not raw.strip():
        return Ok(DEFAULT_TIMEOUT_SECONDS)
    try:
        value = float(raw)
    except ValueError:
        return Err(ConfigError(f"{ENV_TIMEOUT} must be a number, got '{raw}'", key=ENV_TIMEOUT))
    if value <= 0:
        return Err(ConfigError(f"{ENV_TIMEOUT} must be positive, got '{raw}'", key=ENV_TIMEOUT))
    return Ok(value)


def load_config(
    env: Mapping[str, str],
    overrides: ConfigOverrides | None = None,
) -> Result[ActionConfig, ConfigError]:
    """Build the invocation config from the environment and CLI overrides.

    Args:
        env: Process environment (usually ``os.environ``)
        overrides: Values passed explicitly on the command line

    Returns:
        Ok(ActionConfig) on success, Err(ConfigError) naming the bad key
    """
    o = overrides or ConfigOverrides()

    rule = MatchRule(
        include=_pick(o.match, env, ENV_MATCH),
        exclude=_pick(o.exclude, env, ENV_EXCLUDE),
    )

    repo_raw = _pick(o.repo, env, ENV_REPOSITORY)
    if repo_raw is None:
        return Err(ConfigError(f"{ENV_REPOSITORY} is not set (pass --repo)", key=ENV_REPOSITORY))
    repo = RepoId.parse(repo_raw)
    if repo is None:
        return Err(
            ConfigError(
                f"{ENV_REPOSITORY} must look like 'owner/name', got '{repo_raw}'",
                key=ENV_REPOSITORY,
            )
        )

    # An empty GITHUB_REF is kept: direct mode then fails on the ref itself.
    ref = o.ref if o.ref is not None else env.get(ENV_REF)
    if ref is None:
        if rule.is_empty:
            return Err(
                ConfigError(
                    f"{ENV_REF} is not set; pass --ref or a match/exclude pattern",
                    key=ENV_REF,
                )
            )
        ref = ""

    timeout = _parse_timeout(env.get(ENV_TIMEOUT))
    if isinstance(timeout, Err):
        return timeout

    api_url = (_pick(o.api_url, env, ENV_API_URL) or DEFAULT_API_URL).rstrip("/")
    output_raw = env.get(ENV_OUTPUT)
    output_path = o.output_path or (Path(output_raw) if output_raw else None)

    return Ok(
        ActionConfig(
            token=_pick(o.token, env, ENV_TOKEN, ENV_FALLBACK_TOKEN),
            context=TriggerContext(ref=ref, repo=repo),
            rule=rule,
            api_url=api_url,
            output_path=output_path,
            timeout=timeout.value,
            debug=o.verbose or env.get(ENV_RUNNER_DEBUG) == "1",
        )
    )
